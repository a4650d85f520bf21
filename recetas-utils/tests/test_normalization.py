import pytest

from recetas_utils.ingredients.units import (
    are_units_compatible,
    format_quantity,
    grouping_unit,
    normalize_unit,
)


@pytest.mark.parametrize(
    "input_unit, expected_unit",
    [
        ("pc", "pcs"),
        ("Pieces", "pcs"),
        ("gram", "g"),
        ("GRAMS", "g"),
        ("kilograms", "kg"),
        ("millilitre", "ml"),
        ("Milliliters", "ml"),
        ("litre", "l"),
        ("liters", "l"),
        ("tbsp", "tbsp"),
        (" tsp ", "tsp"),
        ("Bunch", "bunch"),
    ],
)
def test_normalize_unit(input_unit, expected_unit):
    """Test unit synonym normalization."""
    assert normalize_unit(input_unit) == expected_unit


@pytest.mark.parametrize(
    "input_unit, expected_unit",
    [
        ("g", "g"),
        ("kilogram", "kg"),
        ("litre", "l"),
        ("tsp", "tsp"),
        ("pc", "pcs"),
        ("bunch", "pcs"),
        ("cup", "pcs"),
    ],
)
def test_grouping_unit(input_unit, expected_unit):
    """Test that units outside weight and volume group as pieces."""
    assert grouping_unit(input_unit) == expected_unit


def test_are_units_compatible():
    assert are_units_compatible("pieces", "pc")
    assert are_units_compatible("Grams", "g")
    assert not are_units_compatible("g", "kg")


@pytest.mark.parametrize(
    "amount, unit, expected",
    [
        (750, "g", "750g"),
        (750.0, "g", "750g"),
        (1.5, "l", "1.5l"),
        (0.333, "kg", "0.3kg"),
        (2.999, "ml", "3ml"),
        (1, "pcs", "1"),
        (4.0, "pcs", "4"),
        (2.5, "pc", "2.5"),
    ],
)
def test_format_quantity(amount, unit, expected):
    assert format_quantity(amount, unit) == expected
