# src/spec_fidelity/chunking/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingConfig:
    """Token budgets for document chunking.

    Immutable. Explicit. Tokens are estimated as characters / chars_per_token.
    """

    target_tokens: int = 2000
    max_tokens: int = 3000
    overlap_tokens: int = 200
    chars_per_token: float = 4
    max_context_tokens: int = 8000

    def __post_init__(self) -> None:
        if self.chars_per_token <= 0:
            raise ValueError("chars_per_token must be > 0")
        for name in ("target_tokens", "max_tokens", "max_context_tokens"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0")
        if self.target_tokens > self.max_tokens:
            raise ValueError("target_tokens must be <= max_tokens")
        if self.overlap_tokens < 0:
            raise ValueError("overlap_tokens must be >= 0")
        if self.overlap_tokens >= self.target_tokens:
            raise ValueError("overlap_tokens must be < target_tokens")
