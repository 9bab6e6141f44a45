import math

import pytest

from quantuminspired.kernels.series import recursive_sum, feedback_series, log_magnitude

from conftest import reference_recursive_sum, reference_feedback_series


# --- recursive_sum -----------------------------------------------------------

def test_recursive_sum_matches_reference_loop():
    assert recursive_sum(42.0, 3.14, 5) == pytest.approx(reference_recursive_sum(42.0, 3.14, 5), rel=1e-12)


def test_recursive_sum_default_inputs_value():
    assert recursive_sum(42.0, 3.14, 5) == pytest.approx(5.6499973971332436, rel=1e-12)


@pytest.mark.parametrize("depth", [0, -3])
def test_recursive_sum_without_terms_is_log_term(depth):
    assert recursive_sum(42.0, 3.14, depth) == pytest.approx(abs(math.log(42.0 * 3.14)), rel=1e-15)


def test_recursive_sum_log_term_uses_magnitude_of_product():
    # ln(|x·t|) for a negative product, then its absolute value
    assert recursive_sum(-2.0, 0.25, 0) == pytest.approx(abs(math.log(0.5)), rel=1e-15)


def test_recursive_sum_zero_product_is_infinite():
    value = recursive_sum(0.0, 3.14, 5)
    assert math.isinf(value)
    assert value > 0


def test_recursive_sum_propagates_nan():
    assert math.isnan(recursive_sum(float("nan"), 3.14, 5))


def test_recursive_sum_sequential_is_bit_identical():
    first = recursive_sum(42.0, 3.14, 500)
    assert all(recursive_sum(42.0, 3.14, 500) == first for _ in range(5))


def test_recursive_sum_parallel_matches_sequential():
    sequential = recursive_sum(1.7, 0.3, 10_000)
    assert recursive_sum(1.7, 0.3, 10_000, parallel=True) == pytest.approx(sequential, rel=1e-12)


def test_recursive_sum_accepts_integer_arguments():
    assert recursive_sum(2, 3, 4) == pytest.approx(reference_recursive_sum(2.0, 3.0, 4), rel=1e-12)


def test_log_magnitude_of_zero_is_positive_infinity():
    assert log_magnitude(0.0, 5.0) == math.inf


# --- feedback_series ---------------------------------------------------------

def test_feedback_series_without_layers_is_zero():
    assert feedback_series(42.0, 0) == 0.0


def test_feedback_series_matches_reference_loop():
    assert feedback_series(42.0, 3) == pytest.approx(reference_feedback_series(42.0, 3), rel=1e-12)


def test_feedback_series_default_inputs_value():
    assert feedback_series(42.0, 3) == pytest.approx(0.0051427184795602363, rel=1e-12)


def test_feedback_series_zero_base_is_infinite():
    # x + 1 == 0 for i == 1
    assert feedback_series(-1.0, 3) == math.inf


def test_feedback_series_negative_base_is_nan():
    assert math.isnan(feedback_series(-10.5, 3))


def test_feedback_series_parallel_matches_sequential():
    sequential = feedback_series(0.5, 20_000)
    assert feedback_series(0.5, 20_000, parallel=True) == pytest.approx(sequential, rel=1e-12)
