"""Reading recipe dumps into numbered lines."""

import logging
import pathlib
import re
from typing import List, Union

from bs4 import BeautifulSoup, NavigableString

from recetas_utils.recipes.models import RawLine

logger = logging.getLogger(__name__)

HTML_SUFFIXES = {".html", ".htm"}

# Elements that hold one line of text in a word processor HTML export
BLOCK_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "li", "td", "pre"]


def lines_from_text(text: str) -> List[RawLine]:
    """Split text into numbered lines.

    Windows line endings are treated as plain newlines and a leading byte
    order mark is dropped.
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    return [RawLine(number=i, text=line) for i, line in enumerate(text.split("\n"), 1)]


def html_to_text(html: str) -> str:
    """Convert an HTML export of a recipe dump into plain text lines.

    Each innermost paragraph-like element becomes one line, and every
    ``<br>`` inside it starts a new line. Whitespace within a line is
    collapsed. Empty paragraphs become blank lines, which keeps the blank
    line structure the classifier relies on.

    Args:
        html: Raw HTML content.

    Returns:
        The document text, one block per line.
    """
    soup = BeautifulSoup(html, "lxml")
    body = soup.body or soup

    # Source formatting newlines are not line breaks, <br> is
    for string in body.find_all(string=True):
        if type(string) is NavigableString:
            string.replace_with(re.sub(r"\s+", " ", str(string)))
    for br in body.find_all("br"):
        br.replace_with("\n")

    blocks = [tag for tag in body.find_all(BLOCK_TAGS) if tag.find(BLOCK_TAGS) is None]
    if not blocks:
        return body.get_text()

    return "\n".join(
        " ".join(piece.split())
        for tag in blocks
        for piece in tag.get_text().split("\n")
    )


def read_recipe_lines(path: Union[str, pathlib.Path]) -> List[RawLine]:
    """Read a recipe dump from a UTF-8 text or HTML file.

    Args:
        path: Path to the input file.

    Returns:
        The numbered lines of the document.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    path = pathlib.Path(path)
    text = path.read_text(encoding="utf-8-sig")
    if path.suffix.lower() in HTML_SUFFIXES:
        text = html_to_text(text)
    lines = lines_from_text(text)
    logger.info(f"Read {len(lines)} lines from {path}")
    return lines
