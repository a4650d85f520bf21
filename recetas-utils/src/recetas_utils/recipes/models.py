"""Recipe data models."""

import dataclasses
from typing import Dict, List, Optional


@dataclasses.dataclass(frozen=True)
class RawLine:
    """A single line of input text and its 1-based position in the stream."""

    number: int
    text: str


@dataclasses.dataclass
class RecipeBlock:
    """A recipe title and the raw body lines that follow it."""

    title: str
    slug: str
    start_line: int = 0
    body_lines: List[str] = dataclasses.field(default_factory=list)

    @property
    def raw_body(self) -> str:
        return "".join(f"{line}\n" for line in self.body_lines)

    def has_content(self) -> bool:
        return bool(self.raw_body.strip())


@dataclasses.dataclass(frozen=True)
class Recipe:
    """A classified recipe.

    Either ``ingredientes`` and ``metodo`` are both set, or ``content`` alone
    holds the undifferentiated body.
    """

    title: str
    slug: str
    ingredientes: Optional[str] = None
    metodo: Optional[str] = None
    content: Optional[str] = None

    def __post_init__(self):
        if (self.ingredientes is None) != (self.metodo is None):
            raise ValueError(
                f"Recipe '{self.title}' must set both ingredientes and metodo"
            )
        if self.content is not None and self.ingredientes is not None:
            raise ValueError(
                f"Recipe '{self.title}' cannot mix content with ingredientes/metodo"
            )

    @property
    def is_split(self) -> bool:
        return self.ingredientes is not None

    def to_dict(self) -> Dict[str, str]:
        data = {"title": self.title, "slug": self.slug}
        for field in ("ingredientes", "metodo", "content"):
            value = getattr(self, field)
            if value is not None:
                data[field] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Recipe":
        return cls(
            title=data["title"],
            slug=data["slug"],
            ingredientes=data.get("ingredientes"),
            metodo=data.get("metodo"),
            content=data.get("content"),
        )
