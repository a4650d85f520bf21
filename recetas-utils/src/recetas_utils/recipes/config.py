"""Tunable thresholds for the recipe segmentation heuristics."""

import dataclasses


@dataclasses.dataclass(frozen=True)
class HeuristicConfig:
    """Thresholds used when classifying lines of a recipe dump.

    Attributes:
        title_uppercase_ratio: Minimum fraction of uppercase letters for a
            line to be read as a recipe title.
        title_min_length: Minimum length of a cleaned title.
        ingredient_max_length: Lines longer than this are never ingredients.
        short_line_length: Lines shorter than this without a period are
            read as ingredients.
        min_ingredient_lines: Ingredient lines needed to split a recipe body.
        min_method_lines: Method lines needed to split a recipe body.
    """

    title_uppercase_ratio: float = 0.70
    title_min_length: int = 3
    ingredient_max_length: int = 80
    short_line_length: int = 50
    min_ingredient_lines: int = 2
    min_method_lines: int = 1


DEFAULT_CONFIG = HeuristicConfig()
