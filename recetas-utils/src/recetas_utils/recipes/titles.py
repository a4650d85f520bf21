"""Recipe title detection, cleaning and slug derivation."""

import re
from typing import Optional

from recetas_utils.recipes.config import DEFAULT_CONFIG, HeuristicConfig
from recetas_utils.recipes.text_utils import strip_accents

# --- Constants ---

# Word index fields left behind by the export, e.g. XE "Pollo al horno"
XE_MARKER_RE = re.compile(r'\s*XE\s*"[^"]*"\s*')

# Table of contents entries end in a middle dot and a page number
INDEX_ENTRY_RE = re.compile(r"·\s*\d+\s*$")

UPPERCASE_RE = re.compile(r"[A-ZÁÉÍÓÚÑÜ]")
LOWERCASE_RE = re.compile(r"[a-záéíóúñü]")

# --- Functions ---


def strip_markers(line: str) -> str:
    """Remove ``XE "..."`` markers, leaving a space where each one was."""
    return XE_MARKER_RE.sub(" ", line).strip()


def is_index_entry(line: str) -> bool:
    """Check if a line is a table of contents entry such as 'Flan · 12'."""
    return bool(INDEX_ENTRY_RE.search(line))


def uppercase_ratio(text: str) -> float:
    """Fraction of the letters in ``text`` that are uppercase.

    Only Latin letters and the Spanish accented set are counted. Returns 0.0
    when the text has no letters at all.
    """
    upper = len(UPPERCASE_RE.findall(text))
    lower = len(LOWERCASE_RE.findall(text))
    if upper == 0:
        return 0.0
    return upper / (upper + lower)


def is_recipe_title(line: str, config: Optional[HeuristicConfig] = None) -> bool:
    """Check if a line is a recipe title.

    Titles are written predominantly in uppercase and may carry ``XE`` index
    markers. Index entries are never titles, however uppercase they are.

    Args:
        line: A single line of the recipe dump.
        config: Heuristic thresholds, defaults to ``DEFAULT_CONFIG``.

    Returns:
        True if the line opens a new recipe.

    Examples:
        >>> is_recipe_title("POLLO AL HORNO")
        True
        >>> is_recipe_title("POLLO AL HORNO · 42")
        False
        >>> is_recipe_title("2 tazas de harina")
        False
    """
    config = config or DEFAULT_CONFIG
    cleaned = strip_markers(line)
    if len(cleaned) < config.title_min_length:
        return False
    if is_index_entry(line):
        return False
    ratio = uppercase_ratio(cleaned)
    return ratio > 0 and ratio >= config.title_uppercase_ratio


def clean_title(title: str) -> str:
    """Remove ``XE`` markers and collapse whitespace in a title line.

    Examples:
        >>> clean_title('  SOPA   DE AJO XE "Sopa de ajo" ')
        'SOPA DE AJO'
    """
    return re.sub(r"\s+", " ", strip_markers(title)).strip()


def slugify(title: str) -> str:
    """Generate a URL-friendly slug from a title.

    Examples:
        >>> slugify("POLLO AL HORNO")
        'pollo-al-horno'
        >>> slugify("Ñoquis (de papa) -- rápidos")
        'noquis-de-papa-rapidos'
    """
    slug = strip_accents(title.lower())
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")
