# src/spec_fidelity/validation/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationConfig:
    """Step rules and auto-correction settings.

    Immutable. Explicit. Drift thresholds live in FidelityConfig.
    """

    min_action_length: int = 10
    placeholder_markers: tuple[str, ...] = ("TODO", "TBD", "[insert", "...", "xxx")
    auto_correct: bool = True
    correction_temperature: float = 0.2
    correction_max_tokens: int = 4000
    correction_timeout: float | None = None  # Seconds; None waits indefinitely
    prompt_name: str = "auto_correction"
    prompt_version: str | None = "1.0"  # None picks the latest version

    def __post_init__(self) -> None:
        if self.min_action_length < 0:
            raise ValueError("min_action_length must be >= 0")
        if self.correction_timeout is not None and self.correction_timeout <= 0:
            raise ValueError("correction_timeout must be > 0")
