# parsers/registry.py

"""Parser registry: dispatches documents to a parser by file extension."""

import logging
from pathlib import Path

from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser, ParseError
from .docx_parser import DocxParser
from .html_parser import HtmlParser
from .pdf_parser import PdfParser
from .text_parser import TextParser

logger = logging.getLogger(__name__)

_PARSERS: dict[str, type[DocumentParser]] = {
    ".docx": DocxParser,
    ".html": HtmlParser,
    ".htm": HtmlParser,
    ".pdf": PdfParser,
    ".txt": TextParser,
}


def get_parser(
    filename: str,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentParser:
    """Create the parser for ``filename``.

    Raises:
        ParseError: If the extension is not supported.
    """
    suffix = Path(filename).suffix.lower()
    try:
        parser_cls = _PARSERS[suffix]
    except KeyError:
        logger.error("No parser for %s (extension: %s)", filename, suffix or "<none>")
        raise ParseError(filename, f"unsupported file type '{suffix}'") from None

    return parser_cls(metrics_hook=metrics_hook)
