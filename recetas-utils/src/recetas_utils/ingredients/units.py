"""Unit normalization and display for aggregated ingredients."""

import math

# Canonical unit -> spellings that mean it
UNIT_MAP = {
    "pcs": ["pc", "pcs", "piece", "pieces"],
    "g": ["g", "gram", "grams"],
    "kg": ["kg", "kilogram", "kilograms"],
    "ml": ["ml", "milliliter", "milliliters", "millilitre", "millilitres"],
    "l": ["l", "liter", "liters", "litre", "litres"],
    "tsp": ["tsp"],
    "tbsp": ["tbsp"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}

# Weight and volume units are shown with their unit, everything else as pieces
MEASURED_UNITS = frozenset({"g", "kg", "ml", "l", "tsp", "tbsp"})

COUNT_UNIT = "pcs"


def normalize_unit(unit: str) -> str:
    """Normalize unit names to their canonical form.

    Unknown units are returned lowercased.

    Examples:
        >>> normalize_unit("Grams")
        'g'
        >>> normalize_unit("piece")
        'pcs'
    """
    unit = unit.lower().strip()
    return UNIT_LOOKUP.get(unit, unit)


def grouping_unit(unit: str) -> str:
    """Unit used to group and display an amount.

    Examples:
        >>> grouping_unit("millilitre")
        'ml'
        >>> grouping_unit("bunch")
        'pcs'
    """
    normalized = normalize_unit(unit)
    return normalized if normalized in MEASURED_UNITS else COUNT_UNIT


def are_units_compatible(unit1: str, unit2: str) -> bool:
    """Check if two units can be summed together."""
    return normalize_unit(unit1) == normalize_unit(unit2)


def format_quantity(amount: float, unit: str) -> str:
    """Format an amount for a shopping list.

    Amounts are rounded to two decimals and shown with at most one. Piece
    counts are shown without a unit.

    Examples:
        >>> format_quantity(750, "g")
        '750g'
        >>> format_quantity(2.34, "kg")
        '2.3kg'
        >>> format_quantity(3, "pcs")
        '3'
    """
    rounded = math.floor(amount * 100 + 0.5) / 100
    if rounded.is_integer():
        display = str(int(rounded))
    else:
        display = f"{rounded:.1f}"

    if normalize_unit(unit) == COUNT_UNIT:
        return display
    return f"{display}{unit}"
