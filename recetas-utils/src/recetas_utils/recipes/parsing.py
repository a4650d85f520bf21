"""End-to-end recipe extraction from a line stream."""

import logging
from typing import Iterable, List, Optional

from recetas_utils.recipes.classification import ContentClassifier
from recetas_utils.recipes.config import DEFAULT_CONFIG, HeuristicConfig
from recetas_utils.recipes.models import RawLine, Recipe, RecipeBlock
from recetas_utils.recipes.segmentation import RecipeSegmenter
from recetas_utils.recipes.sources import lines_from_text

logger = logging.getLogger(__name__)


def classify_block(
    block: RecipeBlock, classifier: Optional[ContentClassifier] = None
) -> Recipe:
    """Turn a segmented recipe block into a classified Recipe."""
    classifier = classifier or ContentClassifier()
    return Recipe(title=block.title, slug=block.slug, **classifier.classify(block.raw_body))


def parse_recipes(
    lines: Iterable[RawLine], config: Optional[HeuristicConfig] = None
) -> List[Recipe]:
    """Extract classified recipes from the lines of a recipe dump.

    The leading index section is skipped, the remaining lines are split at
    each title, and every body is separated into ingredients and method
    where possible.

    Args:
        lines: The input lines in order.
        config: Heuristic thresholds, defaults to ``DEFAULT_CONFIG``.

    Returns:
        Recipes in the order they appear in the input.
    """
    config = config or DEFAULT_CONFIG
    blocks = RecipeSegmenter(config).segment(lines)
    classifier = ContentClassifier(config)
    recipes = [classify_block(block, classifier) for block in blocks]

    split_count = sum(1 for recipe in recipes if recipe.is_split)
    logger.info(
        f"Found {len(recipes)} recipes: {split_count} with ingredients/method "
        f"separation, {len(recipes) - split_count} without clear separation"
    )
    return recipes


def parse_recipe_text(text: str, config: Optional[HeuristicConfig] = None) -> List[Recipe]:
    """Extract classified recipes from an in-memory text dump."""
    return parse_recipes(lines_from_text(text), config)
