"""Skipping of the table of contents that precedes the recipes."""

import enum
import logging
import re
from typing import Optional

from recetas_utils.recipes.config import DEFAULT_CONFIG, HeuristicConfig
from recetas_utils.recipes.titles import is_index_entry, is_recipe_title

logger = logging.getLogger(__name__)

SINGLE_LETTER_RE = re.compile(r"[A-Z]")


class LineKind(enum.Enum):
    """Shapes of front-matter lines."""

    INDEX_ENTRY = "index_entry"
    SINGLE_LETTER_HEADING = "single_letter_heading"
    INDEX_HEADER = "index_header"
    UNKNOWN = "unknown"


class SkipperMode(enum.Enum):
    INDEX = "index"
    CONTENT = "content"


def classify_index_line(line: str) -> LineKind:
    """Classify a line by its table of contents shape.

    Examples:
        >>> classify_index_line("Arroz con leche · 15")
        <LineKind.INDEX_ENTRY: 'index_entry'>
        >>> classify_index_line("B")
        <LineKind.SINGLE_LETTER_HEADING: 'single_letter_heading'>
    """
    trimmed = line.strip()
    if is_index_entry(trimmed):
        return LineKind.INDEX_ENTRY
    if SINGLE_LETTER_RE.fullmatch(trimmed):
        return LineKind.SINGLE_LETTER_HEADING
    if trimmed.startswith("INDEX"):
        return LineKind.INDEX_HEADER
    return LineKind.UNKNOWN


def next_mode(mode: SkipperMode, is_title: bool) -> SkipperMode:
    """Transition function for the skipper. Content mode is never left."""
    if mode is SkipperMode.CONTENT or is_title:
        return SkipperMode.CONTENT
    return SkipperMode.INDEX


class IndexSkipper:
    """Discards front-matter lines until the first recipe title.

    The skipper starts in index mode. The first line that reads as a recipe
    title switches it to content mode for the rest of the stream.
    """

    def __init__(self, config: Optional[HeuristicConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.mode = SkipperMode.INDEX

    @property
    def in_index(self) -> bool:
        return self.mode is SkipperMode.INDEX

    def accepts(self, line: str) -> bool:
        """Return True if ``line`` belongs to recipe content."""
        if not self.in_index:
            return True

        trimmed = line.strip()
        kind = classify_index_line(trimmed)
        if kind is not LineKind.UNKNOWN:
            logger.debug(f"Skipping {kind.value} line: {trimmed!r}")
            return False

        self.mode = next_mode(self.mode, is_recipe_title(trimmed, self.config))
        if self.in_index:
            return False
        logger.debug(f"Index section ends at title {trimmed!r}")
        return True
