# parsers/html_parser.py

import re

from bs4 import BeautifulSoup, Tag

from .base import DocumentParser, DocumentSource, open_binary
from .models import DocumentNode

_HEADING_TAG = re.compile(r"^h([1-6])$")


class HtmlParser(DocumentParser):
    """Wiki page parser (Confluence storage format or any HTML fragment).

    A ``str`` source is treated as markup, not as a path.
    """

    source_type = "html"

    def _convert(self, source: DocumentSource) -> tuple[list[DocumentNode], str]:
        if isinstance(source, str):
            markup = source
        else:
            markup = open_binary(source).read().decode("utf-8")

        soup = BeautifulSoup(markup, "html.parser")
        root = soup.body or soup
        nodes: list[DocumentNode] = []

        # Bare text between top-level elements is layout noise
        for child in root.children:
            if not isinstance(child, Tag):
                continue
            match = _HEADING_TAG.match(child.name.lower())
            nodes.append(
                DocumentNode(
                    text=child.get_text(" ", strip=True),
                    heading_level=int(match.group(1)) if match else None,
                )
            )

        return nodes, root.get_text("\n", strip=True)
