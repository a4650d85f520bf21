#!/usr/bin/env python3
"""
Combine the ingredients of several recipes into a shopping list.
Reads recipe ingredient groups from JSON and writes CSV or JSON.
"""

import argparse
import json
import logging
import pathlib

from recetas_utils.ingredients import (
    combine_ingredients,
    combined_to_dataframe,
    combined_to_dicts,
    load_occurrence_file,
)

logger = logging.getLogger(__name__)


def main():
    """Main function to build a shopping list from recipe ingredients."""
    parser = argparse.ArgumentParser(
        description="Combine recipe ingredients into a shopping list"
    )
    parser.add_argument(
        "input",
        type=str,
        help="JSON file with a list of {recipeTitle, ingredients} groups",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/shopping_list.csv",
        help="Output file path",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["csv", "json"],
        default="csv",
        help="Output format: csv (flat table) or json (rows with quantities)",
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

    combined = combine_ingredients(load_occurrence_file(input_path))

    output_path = pathlib.Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if args.format == "json":
        output_path.write_text(
            json.dumps(combined_to_dicts(combined), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
    else:
        combined_to_dataframe(combined).to_csv(output_path, index=False)

    logger.info(f"Wrote {len(combined)} shopping list rows to {output_path}")


if __name__ == "__main__":
    main()
