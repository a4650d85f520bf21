"""Splitting of a flat line stream into recipe blocks."""

import logging
from typing import Iterable, List, Optional

from recetas_utils.recipes.config import DEFAULT_CONFIG, HeuristicConfig
from recetas_utils.recipes.index import IndexSkipper
from recetas_utils.recipes.models import RawLine, RecipeBlock
from recetas_utils.recipes.titles import clean_title, is_recipe_title, slugify

logger = logging.getLogger(__name__)


class RecipeSegmenter:
    """Partitions content lines into ordered recipe blocks.

    Every title line opens a new block. Other lines are appended verbatim to
    the open block. Blocks whose body is blank are dropped.
    """

    def __init__(self, config: Optional[HeuristicConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def segment(self, lines: Iterable[RawLine]) -> List[RecipeBlock]:
        """Segment a line stream, skipping the leading index section.

        Args:
            lines: The input lines in order.

        Returns:
            Recipe blocks in the order their titles appear.
        """
        skipper = IndexSkipper(self.config)
        blocks: List[RecipeBlock] = []
        current: Optional[RecipeBlock] = None

        for line in lines:
            trimmed = line.text.strip()
            if not trimmed and current is None:
                continue
            if not skipper.accepts(trimmed):
                continue

            if is_recipe_title(trimmed, self.config):
                self._close(current, blocks)
                title = clean_title(trimmed)
                current = RecipeBlock(
                    title=title, slug=slugify(title), start_line=line.number
                )
                logger.debug(f"Line {line.number}: title {title!r}")
            elif current is not None:
                current.body_lines.append(line.text)

        self._close(current, blocks)
        return blocks

    @staticmethod
    def _close(block: Optional[RecipeBlock], blocks: List[RecipeBlock]) -> None:
        if block is None:
            return
        if block.has_content():
            blocks.append(block)
        else:
            logger.debug(
                f"Dropping recipe {block.title!r} at line {block.start_line}: empty body"
            )
