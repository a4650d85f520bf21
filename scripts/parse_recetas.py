#!/usr/bin/env python3
"""
Parse a recipe collection dump into per-recipe JSON files and a title index.
Separates ingredients from method where possible.
"""

import argparse
import logging
import pathlib

from recetas_utils.recipes import (
    HeuristicConfig,
    parse_recipes,
    read_recipe_lines,
    write_recipes,
)

logger = logging.getLogger(__name__)


def main():
    """Main function to parse the recipe dump and write the recipe files."""
    parser = argparse.ArgumentParser(
        description="Parse a recipe text or HTML dump into recipe JSON files"
    )
    parser.add_argument(
        "--input",
        type=str,
        default="data/raw_recetas.txt",
        help="Path to the raw recipe dump (.txt, .html or .htm)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data/recetas",
        help="Directory for the per-recipe JSON files",
    )
    parser.add_argument(
        "--index",
        type=str,
        default="data/recetas-index.json",
        help="Path of the title index JSON file",
    )
    parser.add_argument(
        "--title-uppercase-ratio",
        type=float,
        default=HeuristicConfig.title_uppercase_ratio,
        help="Minimum fraction of uppercase letters in a title line",
    )
    parser.add_argument(
        "--min-ingredient-lines",
        type=int,
        default=HeuristicConfig.min_ingredient_lines,
        help="Ingredient lines needed to split a recipe into ingredients and method",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    input_path = pathlib.Path(args.input)
    if not input_path.is_file():
        parser.error(f"Input file not found: {input_path}")

    config = HeuristicConfig(
        title_uppercase_ratio=args.title_uppercase_ratio,
        min_ingredient_lines=args.min_ingredient_lines,
    )

    logger.info(f"Parsing recipes from: {input_path}")
    recipes = parse_recipes(read_recipe_lines(input_path), config)
    write_recipes(recipes, args.output_dir, index_path=args.index, progress=True)

    logger.info("Sample recipes with separation:")
    for recipe in [r for r in recipes if r.is_split][:3]:
        logger.info(f"  - {recipe.title}")
    logger.info("Sample recipes without separation:")
    for recipe in [r for r in recipes if not r.is_split][:3]:
        logger.info(f"  - {recipe.title}")


if __name__ == "__main__":
    main()
