"""Text normalization helpers shared by recipe storage and aggregation."""

import unicodedata
from typing import Tuple


def strip_accents(text: str) -> str:
    """Remove combining diacritical marks (e.g. 'Azúcar' -> 'Azucar')."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def collation_key(text: str) -> Tuple[str, str]:
    """Sort key approximating Spanish locale ordering.

    Comparison ignores case and accents, except that 'ñ' sorts after every
    other 'n'. Ties fall back to the exact string so ordering is total.
    """
    folded = text.casefold().replace("ñ", "n\uffff")
    return strip_accents(folded), text
