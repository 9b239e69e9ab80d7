from .chunking import (
    ChunkedDocument,
    DocumentChunk,
    chunk_document,
    chunk_document_async,
    estimate_tokens,
    should_chunk_document,
    split_text_at_boundaries,
    tokens_to_chars,
)
from .config import ChunkingConfig

__all__ = [
    "ChunkedDocument",
    "ChunkingConfig",
    "DocumentChunk",
    "chunk_document",
    "chunk_document_async",
    "estimate_tokens",
    "should_chunk_document",
    "split_text_at_boundaries",
    "tokens_to_chars",
]
