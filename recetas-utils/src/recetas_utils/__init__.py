"""Recetas Utils - Recipe extraction and shopping list aggregation."""

__version__ = "0.1.0"

from . import ingredients, recipes

__all__ = ["ingredients", "recipes"]
