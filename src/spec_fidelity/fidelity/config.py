# src/spec_fidelity/fidelity/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class FidelityConfig:
    """Configuration for drift analysis.

    Immutable. Explicit. The drift threshold and the critical ratio are
    independent knobs; neither is derived from the other.
    """

    threshold: float = 0.3
    critical_ratio: float = 0.6
    similarity_cutoff: float = 0.8
    min_keyword_length: int = 4
    vocabulary_dir: str | None = None  # Falls back to the shipped word lists

    def __post_init__(self) -> None:
        for name in ("threshold", "critical_ratio", "similarity_cutoff"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1]")
        if self.min_keyword_length < 1:
            raise ValueError("min_keyword_length must be >= 1")
