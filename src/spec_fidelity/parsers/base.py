# parsers/base.py

import asyncio
import io
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from time import monotonic
from typing import BinaryIO

from spec_fidelity.observability import names
from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook

from .models import DocumentNode, ParsedDocument
from .sections import build_section_tree, count_sections

logger = logging.getLogger(__name__)

DocumentSource = bytes | str | Path | BinaryIO


class ParseError(Exception):
    """A document could not be converted. Fatal for that document."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"Failed to parse document '{filename}': {message}")
        self.filename = filename


class DocumentParser(ABC):
    """Converts a document into a section tree plus its raw text.

    Requirements:
    - Deterministic output for same input
    - Subclasses only convert; tree building is shared
    - Conversion failures surface as ParseError, never retried
    """

    source_type: str = "unknown"

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, source: DocumentSource, filename: str = "document") -> ParsedDocument:
        start = monotonic()
        logger.info("Parsing %s document: %s", self.source_type, filename)

        try:
            nodes, raw_text = self._convert(source)
        except Exception as e:
            self.metrics_hook.increment(
                names.PARSING_ERRORS_TOTAL, labels={"source_type": self.source_type}
            )
            logger.error("Failed to parse %s: %s", filename, e)
            raise ParseError(filename, str(e)) from e

        sections = build_section_tree(nodes)
        title = sections[0].heading if sections else "Untitled Document"

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.PARSING_DURATION, elapsed_ms, labels={"source_type": self.source_type}
        )
        logger.info(
            "Parsed %s: sections=%d, raw_text_length=%d, latency=%.0fms",
            filename,
            count_sections(sections),
            len(raw_text),
            elapsed_ms,
        )

        return ParsedDocument(
            title=title,
            metadata={"source_type": self.source_type, "filename": filename},
            sections=sections,
            raw_text=raw_text,
        )

    async def aparse(
        self, source: DocumentSource, filename: str = "document"
    ) -> ParsedDocument:
        """Parse on a worker thread; a single awaited operation."""
        return await asyncio.to_thread(self.parse, source, filename)

    @abstractmethod
    def _convert(self, source: DocumentSource) -> tuple[list[DocumentNode], str]:
        """Convert the source into top-level nodes and its raw text."""
        raise NotImplementedError


def open_binary(source: DocumentSource) -> BinaryIO:
    """Normalize bytes, paths and file objects into a readable binary stream."""
    if isinstance(source, bytes):
        return io.BytesIO(source)
    if isinstance(source, (str, Path)):
        return io.BytesIO(Path(source).read_bytes())
    return source
