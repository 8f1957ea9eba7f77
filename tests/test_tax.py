import math

import pytest

from coursekit.tax import calculate_tax, calculate_tiered_tax


def test_calculate_tax_single_value():
    assert calculate_tax(500.0) == 5.0


@pytest.mark.parametrize(
    "amount, expected",
    [
        (500, 5),
        (1000, 10),
        (1500, 10),
    ],
)
def test_calculate_tax_batch(amount, expected):
    assert calculate_tax(amount) == expected


@pytest.mark.parametrize(
    "amount",
    [500.0, 1000.0, 1501.0, 999.999, 0.0, -3.5, 1e9, math.inf, -math.inf],
)
def test_calculate_tax_large_amounts_pay_ten(amount):
    result = calculate_tax(amount)
    if amount >= 1000:
        assert result == 10.0
    else:
        assert result == 5.0


def test_calculate_tiered_tax_middle_tier():
    assert calculate_tiered_tax(1000.0) == 10.0


def test_calculate_tiered_tax_top_tier():
    assert calculate_tiered_tax(20000.0) == 20.0


@pytest.mark.parametrize("amount", [0, -1, -1000.0])
def test_calculate_tiered_tax_non_positive_is_free(amount):
    assert calculate_tiered_tax(amount) == 0


def test_calculate_tiered_tax_small_amount():
    assert calculate_tiered_tax(500.0) == 5.0


def test_calculate_tiered_tax_boundary_below_top_tier():
    assert calculate_tiered_tax(19999.99) == 10.0