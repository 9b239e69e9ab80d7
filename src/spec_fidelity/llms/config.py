# src/spec_fidelity/llms/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["openai", "anthropic"]


@dataclass(frozen=True)
class LLMConfig:
    """Provider settings for the auto-correction client.

    Immutable. Explicit. The API key falls back to the provider SDK's own
    environment variable when omitted.
    """

    provider: Provider
    model: str
    api_key: str | None = None
    timeout: float = 30.0  # Per-request transport timeout in seconds
    max_retries: int = 3  # Total attempts, transport errors only

    def __post_init__(self) -> None:
        if not self.model:
            raise ValueError("model must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")
