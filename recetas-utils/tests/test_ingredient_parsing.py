import pytest

from recetas_utils.ingredients.models import CountBased, PackBased
from recetas_utils.ingredients.parsing import (
    LABEL_PATTERNS,
    parse_quantity_from_label,
)


@pytest.mark.parametrize(
    "label, expected",
    [
        # Parenthesized amount with unit
        ("Chicken breast strips (250g)", PackBased(250, "g")),
        ("Curry powder (1tbsp)", PackBased(1, "tbsp")),
        ("Soy sauce (15 ml)", PackBased(15, "ml")),
        ("Brioche style buns (2pcs)", PackBased(2, "pcs")),
        ("Flatbread (1pc)", PackBased(1, "pc")),
        ("Rice (0.5KG)", PackBased(0.5, "kg")),
        ("Stock (1.5l)", PackBased(1.5, "l")),
        ("Cumin (2tsp) x2", PackBased(2, "tsp")),
        # Parenthesized bare amount
        ("Lime (0.5)", PackBased(0.5, "pcs")),
        # Trailing count suffix
        ("White potato x4", CountBased(4, "pcs")),
        ("Ciabatta X2", CountBased(2, "pcs")),
        ("Eggs x 6", CountBased(6, "pcs")),
        ("Eggs x10", CountBased(10, "pcs")),
        # Leading count
        ("2 brioche style buns", PackBased(2, "pcs")),
        ("6x eggs", PackBased(6, "pcs")),
        ("6 x eggs", PackBased(6, "pcs")),
        # No quantity
        ("Red onion", CountBased(1, "pcs")),
        ("Garlic x0", CountBased(1, "pcs")),
        ("Tomato (large)", CountBased(1, "pcs")),
        ("", CountBased(1, "pcs")),
    ],
)
def test_parse_quantity_from_label(label, expected):
    """Test label quantity patterns and their precedence."""
    assert parse_quantity_from_label(label) == expected


@pytest.mark.parametrize(
    "label, is_pack_based",
    [
        ("Chicken breast strips (250g)", True),
        ("Lime (0.5)", True),
        ("White potato x4", False),
        ("2 brioche style buns", True),
        ("Red onion", False),
    ],
)
def test_pack_based_flag(label, is_pack_based):
    assert parse_quantity_from_label(label).is_pack_based is is_pack_based


def test_zero_multiplier_is_stripped_before_matching():
    # Without the trailing x0 the leading count applies
    assert parse_quantity_from_label("2 buns x0") == PackBased(2, "pcs")
    assert parse_quantity_from_label("Mince (500g) x0") == PackBased(500, "g")


def test_pattern_order():
    assert [p.name for p in LABEL_PATTERNS] == [
        "parenthesized_amount_with_unit",
        "parenthesized_amount",
        "count_suffix",
        "leading_count",
    ]


def test_total_for_pack_and_count():
    """Test how each quantity kind turns a portion count into a total."""
    assert parse_quantity_from_label("Chicken breast strips (250g)").total_for(3) == 750
    assert parse_quantity_from_label("White potato x4").total_for(4) == 4
    assert parse_quantity_from_label("Red onion").total_for(2) == 2


def test_parse_quantity_is_pure():
    label = "Chicken breast strips (250g)"
    results = {parse_quantity_from_label(label) for _ in range(5)}
    assert results == {PackBased(250.0, "g")}
