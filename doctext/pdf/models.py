from dataclasses import dataclass, field
from typing import Any


@dataclass
class PdfHandle:
    """An opened PDF document.

    ``native`` holds the decoder library's own document object.
    """

    page_count: int
    native: Any = None


@dataclass(frozen=True)
class PageHandle:
    """A single page of an opened PDF; ``number`` is 1-based."""

    number: int
    native: Any = None


@dataclass(frozen=True)
class TextItem:
    """One text token as positioned on the page."""

    text: str


@dataclass(frozen=True)
class TextContent:
    """Text tokens of one page, in reading order."""

    items: list[TextItem] = field(default_factory=list)
