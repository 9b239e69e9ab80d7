# parsers/sections.py

"""Section tree reconstruction from a flat node stream.

Headings nest under the nearest open heading with a strictly smaller level.
The tree is built in an arena with index-based parent links and frozen into
immutable ``DocumentSection`` objects once the stream is consumed.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import DocumentNode, DocumentSection

INTRODUCTION_HEADING = "Introduction"


@dataclass
class _Draft:
    heading: str
    level: int
    parent: int | None
    lines: list[str] = field(default_factory=list)
    children: list[int] = field(default_factory=list)


def build_section_tree(nodes: Iterable[DocumentNode]) -> tuple[DocumentSection, ...]:
    arena: list[_Draft] = []
    roots: list[int] = []
    stack: list[int] = []

    for node in nodes:
        text = node.text.strip()
        if not text:
            continue

        if node.heading_level is not None:
            level = min(max(node.heading_level, 1), 6)
            while stack and arena[stack[-1]].level >= level:
                stack.pop()

            parent = stack[-1] if stack else None
            arena.append(_Draft(heading=text, level=level, parent=parent))
            index = len(arena) - 1
            if parent is None:
                roots.append(index)
            else:
                arena[parent].children.append(index)
            stack.append(index)
            continue

        if not stack:
            # Content before the first heading
            arena.append(_Draft(heading=INTRODUCTION_HEADING, level=1, parent=None))
            roots.append(len(arena) - 1)
            stack.append(len(arena) - 1)

        arena[stack[-1]].lines.append(text)

    return tuple(_freeze(arena, index) for index in roots)


def _freeze(arena: list[_Draft], index: int) -> DocumentSection:
    draft = arena[index]
    return DocumentSection(
        heading=draft.heading,
        level=draft.level,
        content="\n".join(draft.lines),
        subsections=tuple(_freeze(arena, child) for child in draft.children),
    )


def flatten_sections(sections: Iterable[DocumentSection]) -> str:
    """Render a section tree as Markdown-style text."""
    parts: list[str] = []

    def visit(section: DocumentSection, depth: int) -> None:
        parts.append(f"{'#' * min(depth, 6)} {section.heading}")
        if section.content:
            parts.append(section.content)
        for subsection in section.subsections:
            visit(subsection, depth + 1)

    for section in sections:
        visit(section, 1)

    return "\n\n".join(parts).strip()


def count_sections(sections: Iterable[DocumentSection]) -> int:
    return sum(1 + count_sections(s.subsections) for s in sections)
