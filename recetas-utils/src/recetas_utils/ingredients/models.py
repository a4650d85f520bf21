"""Ingredient occurrence and aggregate models."""

import dataclasses
import math
from typing import ClassVar, Dict, List, Optional, Tuple, Union


@dataclasses.dataclass(frozen=True)
class IngredientOccurrence:
    """One ingredient of one recipe in a shopping selection.

    ``quantity`` is the raw portion count. Whether it counts packs or items
    depends on the shape of ``label``.
    """

    id: str
    name: str
    label: str
    quantity: float
    image_url: Optional[str] = None

    def __post_init__(self):
        if not math.isfinite(self.quantity) or self.quantity < 0:
            raise ValueError(
                f"Ingredient '{self.name}' has invalid quantity {self.quantity}"
            )


@dataclasses.dataclass(frozen=True)
class OccurrenceGroup:
    """The ingredients used by one recipe."""

    recipe_title: str
    ingredients: Tuple[IngredientOccurrence, ...]


@dataclasses.dataclass(frozen=True)
class PackBased:
    """A per-pack amount. The occurrence quantity counts packs."""

    amount: float
    unit: str
    is_pack_based: ClassVar[bool] = True

    def total_for(self, quantity: float) -> float:
        return self.amount * quantity


@dataclasses.dataclass(frozen=True)
class CountBased:
    """An item count. The occurrence quantity is already the total."""

    amount: float
    unit: str = "pcs"
    is_pack_based: ClassVar[bool] = False

    def total_for(self, quantity: float) -> float:
        return quantity


LabelQuantity = Union[PackBased, CountBased]


@dataclasses.dataclass(frozen=True)
class ParsedQuantity:
    amount: float
    unit: str
    original_label: str

    def to_dict(self) -> Dict[str, Union[float, str]]:
        return {
            "amount": self.amount,
            "unit": self.unit,
            "originalLabel": self.original_label,
        }


@dataclasses.dataclass(frozen=True)
class CombinedIngredient:
    """One shopping list row: an ingredient name in a single unit."""

    name: str
    display_name: str
    quantities: Tuple[ParsedQuantity, ...]
    total_amount: float
    unit: str
    recipe_count: int
    image_url: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {
            "name": self.name,
            "displayName": self.display_name,
            "quantities": [q.to_dict() for q in self.quantities],
            "totalAmount": self.total_amount,
            "unit": self.unit,
            "recipeCount": self.recipe_count,
        }
        if self.image_url is not None:
            data["imageUrl"] = self.image_url
        return data


def combined_to_dicts(combined: List[CombinedIngredient]) -> List[Dict]:
    return [row.to_dict() for row in combined]
