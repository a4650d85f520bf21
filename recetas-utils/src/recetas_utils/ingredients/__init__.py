"""Ingredient quantity parsing and aggregation utilities."""

from .aggregation import (
    combine_ingredients,
    combined_to_dataframe,
    load_occurrence_file,
    load_occurrence_groups,
)
from .models import (
    CombinedIngredient,
    CountBased,
    IngredientOccurrence,
    OccurrenceGroup,
    PackBased,
    ParsedQuantity,
    combined_to_dicts,
)
from .parsing import parse_quantity_from_label
from .units import (
    are_units_compatible,
    format_quantity,
    grouping_unit,
    normalize_unit,
)

__all__ = [
    "combine_ingredients",
    "combined_to_dataframe",
    "load_occurrence_file",
    "load_occurrence_groups",
    "CombinedIngredient",
    "CountBased",
    "IngredientOccurrence",
    "OccurrenceGroup",
    "PackBased",
    "ParsedQuantity",
    "combined_to_dicts",
    "parse_quantity_from_label",
    "are_units_compatible",
    "format_quantity",
    "grouping_unit",
    "normalize_unit",
]
