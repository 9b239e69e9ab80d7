from .config import ValidationConfig
from .corrector import AUTO_CORRECTION_NOTE, AutoCorrector
from .models import (
    GeneratedTestScenario,
    InputMetadata,
    NormalizedInput,
    TestStep,
    Traceability,
    ValidationDetail,
    ValidationNotes,
)
from .rules import (
    FidelityFinding,
    check_fidelity,
    check_required_fields,
    check_step_clarity,
    check_traceability,
)
from .validator import ScenarioValidator, summarize, validate_scenarios

__all__ = [
    "AUTO_CORRECTION_NOTE",
    "AutoCorrector",
    "FidelityFinding",
    "GeneratedTestScenario",
    "InputMetadata",
    "NormalizedInput",
    "ScenarioValidator",
    "TestStep",
    "Traceability",
    "ValidationConfig",
    "ValidationDetail",
    "ValidationNotes",
    "check_fidelity",
    "check_required_fields",
    "check_step_clarity",
    "check_traceability",
    "summarize",
    "validate_scenarios",
]
