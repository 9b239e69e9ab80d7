# parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentNode:
    """One top-level element of a converted document.

    ``heading_level`` is 1..6 for headings and ``None`` for body content.
    """

    text: str
    heading_level: int | None = None


@dataclass(frozen=True)
class DocumentSection:
    heading: str
    level: int
    content: str  # Own content only; children carry theirs
    subsections: tuple["DocumentSection", ...] = ()


@dataclass(frozen=True)
class ParsedDocument:
    title: str
    metadata: dict
    sections: tuple[DocumentSection, ...]
    raw_text: str = field(default="", repr=False)
