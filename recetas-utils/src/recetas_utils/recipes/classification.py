"""Separation of a recipe body into ingredient and method lines."""

import enum
import logging
import re
from typing import Callable, Dict, List, NamedTuple, Optional

from recetas_utils.recipes.config import DEFAULT_CONFIG, HeuristicConfig

logger = logging.getLogger(__name__)

# --- Constants ---

COOKING_VERBS = (
    "cocinar",
    "freír",
    "hervir",
    "mezclar",
    "agregar",
    "añadir",
    "poner",
    "dejar",
    "preparar",
    "calentar",
    "cortar",
    "licuar",
    "batir",
    "servir",
    "retirar",
    "tapar",
    "hornear",
    "precalentar",
    "sazonar",
    "condimentar",
    "espolvorear",
    "vaciar",
    "unir",
    "derretir",
    "dorar",
    "saltear",
    "revolver",
    "colar",
    "rallar",
    "picar",
)

MEASUREMENT_UNITS = (
    "T",
    "CH",
    "ch",
    "taza",
    "tazas",
    "grms?",
    "gramos?",
    "kg",
    "ml",
    "litro",
    "cucharada",
    "cucharadita",
    "pizca",
    "unidad",
    "unidades",
    "pcs",
    "dientes?",
    "ramitas?",
    "hojas?",
    "rebanadas?",
    "tajadas?",
    "rodajas?",
)

VULGAR_FRACTIONS = "½¼¾⅓⅔"

COOKING_VERB_RE = re.compile(r"\b(?:%s)\b" % "|".join(COOKING_VERBS), re.IGNORECASE)
BULLET_RE = re.compile(r"^[\d•\-*]")
MEASUREMENT_RE = re.compile(
    r"(?:\b\d+|[%s])\s*(?:%s)\b" % (VULGAR_FRACTIONS, "|".join(MEASUREMENT_UNITS)),
    re.IGNORECASE,
)


class IngredientRule(NamedTuple):
    """A named line test and the verdict it gives when it matches."""

    name: str
    matches: Callable[[str, HeuristicConfig], bool]
    is_ingredient: bool


def _has_cooking_verb(line: str, config: HeuristicConfig) -> bool:
    return bool(COOKING_VERB_RE.search(line))


def _starts_with_bullet(line: str, config: HeuristicConfig) -> bool:
    return bool(BULLET_RE.match(line))


def _has_measurement(line: str, config: HeuristicConfig) -> bool:
    return bool(MEASUREMENT_RE.search(line))


def _is_short_fragment(line: str, config: HeuristicConfig) -> bool:
    return len(line) < config.short_line_length and "." not in line


# Evaluated top to bottom, first match wins.
INGREDIENT_RULES = (
    IngredientRule("cooking_verb", _has_cooking_verb, False),
    IngredientRule("bullet", _starts_with_bullet, True),
    IngredientRule("measurement", _has_measurement, True),
    IngredientRule("short_fragment", _is_short_fragment, True),
)


def match_ingredient_rule(
    line: str, config: Optional[HeuristicConfig] = None
) -> Optional[IngredientRule]:
    """Return the first rule that decides ``line``, or None if none does.

    Blank lines and lines over the length cutoff are never matched.
    """
    config = config or DEFAULT_CONFIG
    trimmed = line.strip()
    if not trimmed or len(trimmed) > config.ingredient_max_length:
        return None
    for rule in INGREDIENT_RULES:
        if rule.matches(trimmed, config):
            return rule
    return None


def looks_like_ingredient(line: str, config: Optional[HeuristicConfig] = None) -> bool:
    """Check if a line looks like an ingredient line.

    Examples:
        >>> looks_like_ingredient("2 tazas de harina")
        True
        >>> looks_like_ingredient("Mezclar los ingredientes secos.")
        False
    """
    rule = match_ingredient_rule(line, config)
    return rule is not None and rule.is_ingredient


class Section(enum.Enum):
    INGREDIENTS = "ingredients"
    METHOD = "method"


def next_section(section: Section, is_ingredient: bool) -> Section:
    """Transition function for the splitter. The method section is never left."""
    if section is Section.METHOD or not is_ingredient:
        return Section.METHOD
    return Section.INGREDIENTS


class ContentClassifier:
    """Splits a raw recipe body into ingredients and method.

    Lines are read in order starting in the ingredients section. The first
    non-blank line that fails ``looks_like_ingredient`` starts the method,
    and every later line belongs to it. Blank lines only mark where a
    section may end; they are never kept.
    """

    def __init__(self, config: Optional[HeuristicConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def split_lines(self, raw_body: str):
        """Sort the body lines into ``(ingredient_lines, method_lines)``."""
        ingredient_lines: List[str] = []
        method_lines: List[str] = []
        section = Section.INGREDIENTS
        blank_seen = False

        for line in raw_body.split("\n"):
            trimmed = line.strip()
            if not trimmed:
                if ingredient_lines and section is Section.INGREDIENTS:
                    blank_seen = True
                continue

            previous = section
            section = next_section(
                section, looks_like_ingredient(trimmed, self.config)
            )
            if section is Section.INGREDIENTS:
                ingredient_lines.append(trimmed)
                continue
            if previous is Section.INGREDIENTS:
                logger.debug(
                    f"Method starts at {trimmed[:40]!r}"
                    + (" after a blank line" if blank_seen else "")
                )
            method_lines.append(trimmed)

        return ingredient_lines, method_lines

    def classify(self, raw_body: str) -> Dict[str, str]:
        """Classify a recipe body.

        Returns:
            ``{"ingredientes": ..., "metodo": ...}`` when the body separates
            cleanly, otherwise ``{"content": ...}`` with the trimmed body.
        """
        ingredient_lines, method_lines = self.split_lines(raw_body)
        if (
            len(ingredient_lines) >= self.config.min_ingredient_lines
            and len(method_lines) >= self.config.min_method_lines
        ):
            return {
                "ingredientes": "\n".join(ingredient_lines),
                "metodo": "\n\n".join(method_lines),
            }
        return {"content": raw_body.strip()}
