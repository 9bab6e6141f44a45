"""Command-line interface."""
from quantuminspired.main import main

if __name__ == "__main__":
    main()
