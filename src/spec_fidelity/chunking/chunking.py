import asyncio
import logging
import math
import re
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from time import monotonic

from spec_fidelity.fidelity.keywords import KeywordExtractor
from spec_fidelity.fidelity.vocabulary import load_vocabulary
from spec_fidelity.observability import names
from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook
from spec_fidelity.parsers.models import DocumentSection

from .config import ChunkingConfig

logger = logging.getLogger(__name__)

UNTITLED_HEADING = "Bez názvu"

# Sentence end followed by an upper-case letter, Slovak capitals included
_SENTENCE_BREAK = re.compile(r"[.!?]\s+(?=[A-ZÁÄČĎÉÍĹĽŇÓÔŔŠŤÚÝŽ])")


@dataclass(frozen=True)
class DocumentChunk:
    chunk_id: str
    document_id: str
    section_path: list[str]
    heading: str
    content: str
    char_count: int
    estimated_tokens: int
    keywords: list[str]


@dataclass(frozen=True)
class ChunkedDocument:
    document_id: str
    filename: str
    total_chunks: int
    total_chars: int
    total_estimated_tokens: int
    chunks: tuple[DocumentChunk, ...]
    chunked_at: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["chunks"] = list(data["chunks"])
        return data


def estimate_tokens(text: str, chars_per_token: float = 4) -> int:
    return math.ceil(len(text) / chars_per_token)


def tokens_to_chars(tokens: int, chars_per_token: float = 4) -> int:
    """Largest character count whose ``estimate_tokens`` stays within ``tokens``."""
    chars = math.floor(tokens * chars_per_token)
    # Fractional ratios can round-trip one token high (500 * 4.1 -> 501)
    while chars > 0 and math.ceil(chars / chars_per_token) > tokens:
        chars -= 1
    return chars


def split_text_at_boundaries(text: str, max_chars: int, overlap_chars: int) -> list[str]:
    """Split ``text`` into windows of at most ``max_chars`` characters.

    Break points, in priority order: a paragraph break in the last 20% of
    the window, a sentence end in that same tail, the last space past the
    window's midpoint. Without any of them the window is cut hard. The next
    window starts ``overlap_chars`` before the break point.
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be > 0")
    if overlap_chars < 0:
        raise ValueError("overlap_chars must be >= 0")

    pieces: list[str] = []
    position = 0
    text_len = len(text)

    while position < text_len:
        end = position + max_chars
        if end >= text_len:
            pieces.append(text[position:].strip())
            break

        break_point = _find_break_point(text, position, end, max_chars)
        pieces.append(text[position:break_point].strip())

        next_position = break_point - overlap_chars
        # Overlap must never stall the cursor
        position = next_position if next_position > position else break_point

    return [p for p in pieces if p]


def _find_break_point(text: str, start: int, end: int, max_chars: int) -> int:
    search_start = start + math.floor(max_chars * 0.8)
    tail = text[search_start:end]

    paragraph = tail.rfind("\n\n")
    if paragraph != -1:
        return search_start + paragraph + 2

    sentence_end = None
    for match in _SENTENCE_BREAK.finditer(tail):
        sentence_end = match.end()
    if sentence_end is not None:
        return search_start + sentence_end

    window = text[start:end]
    space = max(window.rfind(" "), window.rfind("\n"))
    if space != -1 and space > max_chars * 0.5:
        return start + space + 1

    return end


def chunk_document(
    sections: Sequence[DocumentSection],
    raw_text: str,
    document_id: str,
    filename: str,
    *,
    config: ChunkingConfig = ChunkingConfig(),
    extractor: KeywordExtractor | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ChunkedDocument:
    """Split a parsed document into keyword-tagged chunks in document order.

    Sections are walked depth-first; a section over ``max_tokens`` is split
    into parts. Without sections, ``raw_text`` is split at
    ``target_tokens`` granularity.

    Raises:
        ValueError: If the token budget resolves to an empty character window.
    """
    start = monotonic()
    window_tokens = min(config.target_tokens, config.max_tokens)
    if tokens_to_chars(window_tokens, config.chars_per_token) <= 0:
        raise ValueError("max_chars must be > 0")
    if extractor is None:
        extractor = KeywordExtractor(load_vocabulary().stop_words)

    builder = _ChunkBuilder(document_id, config, extractor)
    if sections:
        for section in sections:
            builder.add_section(section, [])
    elif raw_text:
        builder.add_raw_text(raw_text)

    chunks = tuple(builder.chunks)
    result = ChunkedDocument(
        document_id=document_id,
        filename=filename,
        total_chunks=len(chunks),
        total_chars=sum(c.char_count for c in chunks),
        total_estimated_tokens=sum(c.estimated_tokens for c in chunks),
        chunks=chunks,
        chunked_at=datetime.now(timezone.utc).isoformat(),
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    logger.info(
        "Chunked %s: chunks=%d, tokens=%d, latency=%.0fms",
        filename,
        result.total_chunks,
        result.total_estimated_tokens,
        elapsed_ms,
    )
    return result


async def chunk_document_async(
    sections: Sequence[DocumentSection],
    raw_text: str,
    document_id: str,
    filename: str,
    **kwargs,
) -> ChunkedDocument:
    """Run :func:`chunk_document` on a worker thread."""
    return await asyncio.to_thread(
        chunk_document, sections, raw_text, document_id, filename, **kwargs
    )


def should_chunk_document(
    text_length: int, config: ChunkingConfig = ChunkingConfig()
) -> bool:
    return text_length > tokens_to_chars(
        config.max_context_tokens, config.chars_per_token
    )


class _ChunkBuilder:
    def __init__(
        self, document_id: str, config: ChunkingConfig, extractor: KeywordExtractor
    ) -> None:
        self.document_id = document_id
        self.config = config
        self.extractor = extractor
        self.chunks: list[DocumentChunk] = []

    def add_section(self, section: DocumentSection, lineage: list[str]) -> None:
        path = [*lineage, section.heading or UNTITLED_HEADING]
        heading = path[-1]
        cpt = self.config.chars_per_token

        if estimate_tokens(section.content, cpt) <= self.config.max_tokens:
            content = section.content.strip()
            if content:
                self._emit(path, heading, content)
        else:
            parts = split_text_at_boundaries(
                section.content,
                tokens_to_chars(self.config.max_tokens, cpt),
                tokens_to_chars(self.config.overlap_tokens, cpt),
            )
            total = len(parts)
            for i, part in enumerate(parts, start=1):
                if total > 1:
                    self._emit([*path, f"časť {i}"], f"{heading} (časť {i}/{total})", part)
                else:
                    self._emit(path, heading, part)

        for subsection in section.subsections:
            self.add_section(subsection, path)

    def add_raw_text(self, raw_text: str) -> None:
        cpt = self.config.chars_per_token
        parts = split_text_at_boundaries(
            raw_text,
            tokens_to_chars(self.config.target_tokens, cpt),
            tokens_to_chars(self.config.overlap_tokens, cpt),
        )
        for i, part in enumerate(parts, start=1):
            heading = f"Sekcia {i}"
            self._emit([heading], heading, part)

    def _emit(self, path: list[str], heading: str, content: str) -> None:
        self.chunks.append(
            DocumentChunk(
                chunk_id=f"{self.document_id}_chunk_{len(self.chunks):04d}",
                document_id=self.document_id,
                section_path=path,
                heading=heading,
                content=content,
                char_count=len(content),
                estimated_tokens=estimate_tokens(content, self.config.chars_per_token),
                keywords=self.extractor.extract(f"{heading} {content}"),
            )
        )
