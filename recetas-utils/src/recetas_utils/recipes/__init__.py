"""Recipe extraction from unstructured text dumps."""

from .classification import ContentClassifier, looks_like_ingredient
from .config import DEFAULT_CONFIG, HeuristicConfig
from .index import IndexSkipper, LineKind, classify_index_line
from .models import RawLine, Recipe, RecipeBlock
from .parsing import classify_block, parse_recipe_text, parse_recipes
from .segmentation import RecipeSegmenter
from .sources import html_to_text, lines_from_text, read_recipe_lines
from .storage import assign_unique_slugs, build_index, load_recipe, write_recipes
from .titles import clean_title, is_index_entry, is_recipe_title, slugify

__all__ = [
    "ContentClassifier",
    "looks_like_ingredient",
    "DEFAULT_CONFIG",
    "HeuristicConfig",
    "IndexSkipper",
    "LineKind",
    "classify_index_line",
    "RawLine",
    "Recipe",
    "RecipeBlock",
    "classify_block",
    "parse_recipe_text",
    "parse_recipes",
    "RecipeSegmenter",
    "html_to_text",
    "lines_from_text",
    "read_recipe_lines",
    "assign_unique_slugs",
    "build_index",
    "load_recipe",
    "write_recipes",
    "clean_title",
    "is_index_entry",
    "is_recipe_title",
    "slugify",
]
