# parsers/docx_parser.py

import logging
import re

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from .base import DocumentParser, DocumentSource, open_binary
from .models import DocumentNode

logger = logging.getLogger(__name__)

_HEADING_STYLE = re.compile(r"^heading\s*(\d)", re.IGNORECASE)


class DocxParser(DocumentParser):
    """
    Word document parser.
    - Walks the body in document order
    - "Heading N" paragraph styles open sections, "Title" counts as level 1
    - Table rows become single lines with cells joined by " | "
    """

    source_type = "docx"

    def _convert(self, source: DocumentSource) -> tuple[list[DocumentNode], str]:
        document = Document(open_binary(source))
        nodes: list[DocumentNode] = []

        for element in document.element.body.iterchildren():
            tag = element.tag.rsplit("}", 1)[-1]
            if tag == "p":
                paragraph = Paragraph(element, document)
                nodes.append(
                    DocumentNode(
                        text=paragraph.text,
                        heading_level=self._heading_level(paragraph),
                    )
                )
            elif tag == "tbl":
                nodes.extend(
                    DocumentNode(text=row) for row in self._table_rows(Table(element, document))
                )

        raw_text = "\n".join(n.text.strip() for n in nodes if n.text.strip())
        logger.debug("Converted docx body into %d nodes", len(nodes))
        return nodes, raw_text

    def _heading_level(self, paragraph: Paragraph) -> int | None:
        style_name = paragraph.style.name if paragraph.style is not None else ""
        if style_name == "Title":
            return 1
        match = _HEADING_STYLE.match(style_name)
        return int(match.group(1)) if match else None

    def _table_rows(self, table: Table) -> list[str]:
        rows = []
        for row in table.rows:
            # Merged cells repeat their text once per grid column
            cells = list(dict.fromkeys(cell.text.strip() for cell in row.cells))
            line = " | ".join(c for c in cells if c)
            if line:
                rows.append(line)
        return rows
