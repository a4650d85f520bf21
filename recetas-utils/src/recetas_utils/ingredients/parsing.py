"""Parsing of pack sizes and item counts from ingredient labels."""

import re
from typing import Callable, NamedTuple

from recetas_utils.ingredients.models import CountBased, LabelQuantity, PackBased

# --- Constants ---

# A trailing "x0" carries no multiplier
ZERO_MULTIPLIER_RE = re.compile(r"\s*x0$", re.IGNORECASE)

DEFAULT_QUANTITY = CountBased(amount=1, unit="pcs")


class LabelPattern(NamedTuple):
    """A label shape and how to read a quantity from its match."""

    name: str
    regex: re.Pattern
    build: Callable[[re.Match], LabelQuantity]


# Evaluated top to bottom, first match wins.
LABEL_PATTERNS = (
    # "Chicken breast strips (250g)", "Curry powder (1tbsp)", "Buns (2pcs)"
    LabelPattern(
        "parenthesized_amount_with_unit",
        re.compile(r"\((\d+(?:\.\d+)?)\s*(g|kg|ml|l|tsp|tbsp|pcs?)\)", re.IGNORECASE),
        lambda m: PackBased(amount=float(m.group(1)), unit=m.group(2).lower()),
    ),
    # "Lime (0.5)"
    LabelPattern(
        "parenthesized_amount",
        re.compile(r"\((\d+(?:\.\d+)?)\)"),
        lambda m: PackBased(amount=float(m.group(1)), unit="pcs"),
    ),
    # "White potato x4", "Ciabatta x2"
    LabelPattern(
        "count_suffix",
        re.compile(r"x\s*(\d+)$", re.IGNORECASE),
        lambda m: CountBased(amount=int(m.group(1)), unit="pcs"),
    ),
    # "2 brioche style buns", "6x eggs"
    LabelPattern(
        "leading_count",
        re.compile(r"^(\d+)\s*x?\s+", re.IGNORECASE),
        lambda m: PackBased(amount=int(m.group(1)), unit="pcs"),
    ),
)

# --- Functions ---


def parse_quantity_from_label(label: str) -> LabelQuantity:
    """Parse the quantity described by an ingredient label.

    Pack-based results mean the occurrence quantity counts packs and must be
    multiplied by ``amount``. Count-based results mean the occurrence
    quantity is already the item count. Labels with no recognizable quantity
    fall back to one count-based piece, so parsing never fails.

    Args:
        label: Free-text ingredient label.

    Returns:
        A ``PackBased`` or ``CountBased`` quantity.

    Examples:
        >>> parse_quantity_from_label("Chicken breast strips (250g)")
        PackBased(amount=250.0, unit='g')
        >>> parse_quantity_from_label("White potato x4")
        CountBased(amount=4, unit='pcs')
        >>> parse_quantity_from_label("Red onion")
        CountBased(amount=1, unit='pcs')
    """
    cleaned = ZERO_MULTIPLIER_RE.sub("", label)
    for pattern in LABEL_PATTERNS:
        match = pattern.regex.search(cleaned)
        if match:
            return pattern.build(match)
    return DEFAULT_QUANTITY
