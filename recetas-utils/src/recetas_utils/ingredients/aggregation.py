"""Combining ingredient occurrences from many recipes into a shopping list."""

import dataclasses
import json
import logging
import math
import pathlib
from typing import Any, Dict, Iterable, List, Union

import pandas as pd

from recetas_utils.ingredients.models import (
    CombinedIngredient,
    IngredientOccurrence,
    OccurrenceGroup,
    ParsedQuantity,
)
from recetas_utils.ingredients.parsing import parse_quantity_from_label
from recetas_utils.ingredients.units import format_quantity, grouping_unit
from recetas_utils.recipes.text_utils import collation_key

logger = logging.getLogger(__name__)

DATAFRAME_COLUMNS = [
    "name",
    "display_name",
    "total_amount",
    "unit",
    "display_quantity",
    "recipe_count",
    "image_url",
]


@dataclasses.dataclass(frozen=True)
class _Contribution:
    recipe_title: str
    occurrence: IngredientOccurrence
    quantity: ParsedQuantity


def display_name(name: str) -> str:
    """Capitalize the first character of an ingredient name only."""
    return name[:1].upper() + name[1:]


def _contribution(recipe_title: str, occurrence: IngredientOccurrence) -> _Contribution:
    parsed = parse_quantity_from_label(occurrence.label)
    return _Contribution(
        recipe_title=recipe_title,
        occurrence=occurrence,
        quantity=ParsedQuantity(
            amount=parsed.total_for(occurrence.quantity),
            unit=grouping_unit(parsed.unit),
            original_label=occurrence.label,
        ),
    )


def _combine(
    name: str, unit: str, items: List[_Contribution], disambiguate: bool
) -> CombinedIngredient:
    quantities = tuple(item.quantity for item in items)
    suffix = f" ({unit})" if disambiguate else ""
    return CombinedIngredient(
        name=f"{name}{suffix}",
        display_name=f"{display_name(name)}{suffix}",
        quantities=quantities,
        total_amount=sum(q.amount for q in quantities),
        unit=unit,
        recipe_count=len({item.recipe_title for item in items}),
        image_url=items[0].occurrence.image_url,
    )


def combine_ingredients(groups: Iterable[OccurrenceGroup]) -> List[CombinedIngredient]:
    """Combine ingredients from multiple recipes.

    Each occurrence's total is its label amount times its quantity when the
    label describes a pack, or the quantity itself when it describes a
    count. Occurrences are summed per ingredient name and unit. A name that
    appears in more than one unit yields one row per unit with the unit
    appended to the name.

    Args:
        groups: The ingredients of each recipe being shopped for.

    Returns:
        Combined rows sorted by display name.
    """
    by_name: Dict[str, Dict[str, List[_Contribution]]] = {}
    occurrence_count = 0
    recipe_titles = set()

    for group in groups:
        recipe_titles.add(group.recipe_title)
        for occurrence in group.ingredients:
            item = _contribution(group.recipe_title, occurrence)
            by_name.setdefault(occurrence.name, {}).setdefault(
                item.quantity.unit, []
            ).append(item)
            occurrence_count += 1

    combined = []
    for name, by_unit in by_name.items():
        disambiguate = len(by_unit) > 1
        for unit, items in by_unit.items():
            combined.append(_combine(name, unit, items, disambiguate))

    combined.sort(key=lambda row: collation_key(row.display_name))
    logger.info(
        f"Combined {occurrence_count} ingredient occurrences from "
        f"{len(recipe_titles)} recipes into {len(combined)} rows"
    )
    return combined


def _require(payload: Dict[str, Any], field: str, where: str) -> Any:
    if not isinstance(payload, dict):
        raise ValueError(f"{where} must be a JSON object")
    if field not in payload or payload[field] is None:
        raise ValueError(f"{where} is missing required field '{field}'")
    return payload[field]


def _parse_occurrence(payload: Dict[str, Any], where: str) -> IngredientOccurrence:
    quantity = _require(payload, "quantity", where)
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        raise ValueError(f"{where} has non-numeric quantity {quantity!r}")
    if not math.isfinite(quantity):
        raise ValueError(f"{where} has non-finite quantity {quantity!r}")
    return IngredientOccurrence(
        id=str(_require(payload, "id", where)),
        name=str(_require(payload, "name", where)),
        label=str(_require(payload, "label", where)),
        quantity=quantity,
        image_url=payload.get("imageUrl"),
    )


def load_occurrence_groups(payload: List[Dict[str, Any]]) -> List[OccurrenceGroup]:
    """Validate decoded occurrence JSON into occurrence groups.

    Args:
        payload: A list of ``{recipeTitle, ingredients: [...]}`` objects.

    Returns:
        One OccurrenceGroup per input object.

    Raises:
        ValueError: If a group or ingredient is malformed.
    """
    if not isinstance(payload, list):
        raise ValueError("Occurrence input must be a list of recipe groups")

    groups = []
    for i, group in enumerate(payload):
        where = f"Group {i}"
        title = str(_require(group, "recipeTitle", where))
        ingredients = _require(group, "ingredients", where)
        if not isinstance(ingredients, list):
            raise ValueError(f"{where} ('{title}') ingredients must be a list")
        groups.append(
            OccurrenceGroup(
                recipe_title=title,
                ingredients=tuple(
                    _parse_occurrence(ing, f"Ingredient {j} of '{title}'")
                    for j, ing in enumerate(ingredients)
                ),
            )
        )
    return groups


def load_occurrence_file(path: Union[str, pathlib.Path]) -> List[OccurrenceGroup]:
    """Load occurrence groups from a JSON file."""
    payload = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    return load_occurrence_groups(payload)


def combined_to_dataframe(combined: List[CombinedIngredient]) -> pd.DataFrame:
    """Tabulate combined ingredients as a shopping list, keeping their order."""
    rows = [
        {
            "name": row.name,
            "display_name": row.display_name,
            "total_amount": row.total_amount,
            "unit": row.unit,
            "display_quantity": format_quantity(row.total_amount, row.unit),
            "recipe_count": row.recipe_count,
            "image_url": row.image_url,
        }
        for row in combined
    ]
    return pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)
