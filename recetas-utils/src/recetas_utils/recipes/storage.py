"""Writing classified recipes to per-recipe JSON files and an index."""

import dataclasses
import json
import logging
import pathlib
from typing import Dict, List, Union

from tqdm import tqdm

from recetas_utils.recipes.models import Recipe
from recetas_utils.recipes.text_utils import collation_key

logger = logging.getLogger(__name__)

INDEX_FILENAME = "recetas-index.json"


def assign_unique_slugs(recipes: List[Recipe]) -> List[Recipe]:
    """Give recipes that share a slug distinct slugs.

    The first recipe keeps its slug. Later ones get ``-2``, ``-3`` and so on
    in input order, skipping suffixes that are already taken.
    """
    taken = {recipe.slug for recipe in recipes}
    seen = set()
    unique = []
    for recipe in recipes:
        if recipe.slug not in seen:
            seen.add(recipe.slug)
            unique.append(recipe)
            continue

        n = 2
        while f"{recipe.slug}-{n}" in taken:
            n += 1
        new_slug = f"{recipe.slug}-{n}"
        taken.add(new_slug)
        seen.add(new_slug)
        logger.warning(
            f"Duplicate slug '{recipe.slug}' for recipe '{recipe.title}', using '{new_slug}'"
        )
        unique.append(dataclasses.replace(recipe, slug=new_slug))
    return unique


def build_index(recipes: List[Recipe]) -> List[Dict[str, str]]:
    """Build the ``{title, slug}`` index sorted by title."""
    index = [{"title": recipe.title, "slug": recipe.slug} for recipe in recipes]
    index.sort(key=lambda entry: collation_key(entry["title"]))
    return index


def _write_json(path: pathlib.Path, payload) -> None:
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def write_recipes(
    recipes: List[Recipe],
    output_dir: Union[str, pathlib.Path],
    index_path: Union[str, pathlib.Path, None] = None,
    progress: bool = False,
) -> List[pathlib.Path]:
    """Write one ``<slug>.json`` per recipe and the title index.

    Duplicate slugs are renamed with ``assign_unique_slugs`` first so no
    recipe file overwrites another.

    Args:
        recipes: Classified recipes.
        output_dir: Directory for the per-recipe files, created if missing.
        index_path: Where to write the index. Defaults to
            ``recetas-index.json`` next to ``output_dir``.
        progress: Show a progress bar.

    Returns:
        Paths of the recipe files written.
    """
    output_dir = pathlib.Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    index_path = (
        pathlib.Path(index_path) if index_path else output_dir.parent / INDEX_FILENAME
    )

    recipes = assign_unique_slugs(recipes)
    _write_json(index_path, build_index(recipes))
    logger.info(f"Wrote index to {index_path}")

    written = []
    for recipe in tqdm(recipes, desc="Writing recipes", disable=not progress):
        path = output_dir / f"{recipe.slug}.json"
        _write_json(path, recipe.to_dict())
        written.append(path)
    logger.info(f"Wrote {len(written)} recipe files to {output_dir}")
    return written


def load_recipe(path: Union[str, pathlib.Path]) -> Recipe:
    """Load a recipe previously written by ``write_recipes``."""
    return Recipe.from_dict(json.loads(pathlib.Path(path).read_text(encoding="utf-8")))
