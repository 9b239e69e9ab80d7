from .base import DocumentParser, ParseError
from .docx_parser import DocxParser
from .html_parser import HtmlParser
from .models import DocumentNode, DocumentSection, ParsedDocument
from .pdf_parser import PdfParser
from .text_parser import TextParser
from .registry import get_parser
from .sections import build_section_tree, count_sections, flatten_sections

__all__ = [
    "DocumentNode",
    "DocumentParser",
    "DocumentSection",
    "DocxParser",
    "HtmlParser",
    "ParseError",
    "ParsedDocument",
    "PdfParser",
    "TextParser",
    "build_section_tree",
    "count_sections",
    "flatten_sections",
    "get_parser",
]
