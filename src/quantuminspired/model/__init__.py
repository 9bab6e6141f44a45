"""
The MODEL layer contains pure data structures.
It has NO knowledge of the kernels or of the entry point output.
"""
