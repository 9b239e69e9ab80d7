# parsers/pdf_parser.py

from typing import Any, cast

import pdfplumber

from .base import DocumentParser, DocumentSource, open_binary
from .models import DocumentNode


class PdfParser(DocumentParser):
    """
    Deterministic PDF parser.
    - Uses page order
    - Uses simple heading heuristics, every heading is level 1
    """

    source_type = "pdf"

    def _convert(self, source: DocumentSource) -> tuple[list[DocumentNode], str]:
        nodes: list[DocumentNode] = []
        pages: list[str] = []

        # pdfplumber.open accepts path-like or buffer objects; cast to Any
        with pdfplumber.open(cast(Any, open_binary(source))) as pdf:
            for page in pdf.pages:
                text = page.extract_text() or ""
                pages.append(text)

                for line in text.splitlines():
                    clean = line.strip()
                    if not clean:
                        continue
                    nodes.append(
                        DocumentNode(
                            text=clean,
                            heading_level=1 if self._is_heading(clean) else None,
                        )
                    )

        return nodes, "\n".join(pages).strip()

    def _is_heading(self, line: str) -> bool:
        """
        Very conservative heading heuristic.
        """
        if len(line) > 120:
            return False
        if line.isupper():
            return True
        return line.endswith(":")
