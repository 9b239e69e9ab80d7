# parsers/text_parser.py

from .base import DocumentParser, DocumentSource, open_binary
from .models import DocumentNode


class TextParser(DocumentParser):
    """Plain UTF-8 text. Produces no sections, only raw text."""

    source_type = "text"

    def _convert(self, source: DocumentSource) -> tuple[list[DocumentNode], str]:
        text = open_binary(source).read().decode("utf-8")
        return [], text.strip()
