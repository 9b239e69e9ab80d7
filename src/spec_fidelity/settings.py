# src/spec_fidelity/settings.py

"""Process-level settings, loaded once from a YAML file.

Example file::

    chunking:
      max_tokens: 3000
      chars_per_token: 4
    fidelity:
      threshold: 0.3
      critical_ratio: 0.6
    validation:
      min_action_length: 10
    llm:
      provider: openai
      model: gpt-4o
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from spec_fidelity.chunking.config import ChunkingConfig
from spec_fidelity.fidelity.analyzer import FidelityAnalyzer
from spec_fidelity.fidelity.config import FidelityConfig
from spec_fidelity.llms.config import LLMConfig
from spec_fidelity.llms.factory import create_llm_client
from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook
from spec_fidelity.validation.config import ValidationConfig
from spec_fidelity.validation.corrector import AutoCorrector
from spec_fidelity.validation.validator import ScenarioValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    chunking: ChunkingConfig = ChunkingConfig()
    fidelity: FidelityConfig = FidelityConfig()
    validation: ValidationConfig = ValidationConfig()
    llm: LLMConfig | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        unknown = set(data) - {"chunking", "fidelity", "validation", "llm"}
        if unknown:
            raise ValueError(f"Unknown settings sections: {', '.join(sorted(unknown))}")

        validation = dict(data.get("validation") or {})
        if "placeholder_markers" in validation:
            validation["placeholder_markers"] = tuple(validation["placeholder_markers"])

        llm = data.get("llm")
        return cls(
            chunking=_build(ChunkingConfig, data.get("chunking") or {}, "chunking"),
            fidelity=_build(FidelityConfig, data.get("fidelity") or {}, "fidelity"),
            validation=_build(ValidationConfig, validation, "validation"),
            llm=_build(LLMConfig, llm, "llm") if llm else None,
        )


def load_settings(path: str | Path) -> Settings:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings must be a mapping")

    settings = Settings.from_dict(data)
    logger.info("Loaded settings from %s", path)
    return settings


def _build(config_cls: type, values: dict[str, Any], section: str) -> Any:
    known = {f.name for f in fields(config_cls)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(
            f"Unknown keys in '{section}' settings: {', '.join(sorted(unknown))}"
        )
    return config_cls(**values)


def build_validator(
    settings: Settings = Settings(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ScenarioValidator:
    """Wire a validator from settings.

    Auto-correction is enabled only when an ``llm`` section is configured
    and ``validation.auto_correct`` is set.
    """
    analyzer = FidelityAnalyzer(settings.fidelity)

    corrector = None
    if settings.llm is not None and settings.validation.auto_correct:
        corrector = AutoCorrector(
            create_llm_client(settings.llm, metrics_hook),
            analyzer,
            settings.validation,
            metrics_hook=metrics_hook,
        )
    else:
        logger.info("Auto-correction disabled: no LLM configured or auto_correct off")

    return ScenarioValidator(analyzer, settings.validation, corrector, metrics_hook)
