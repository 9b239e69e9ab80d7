# src/spec_fidelity/validation/models.py

"""Scenario data exchanged with the generation layer.

Models are lenient on input: a scenario with missing or invalid fields must
still load so the validator can report what is wrong with it. Instances are
frozen; the validator returns updated copies.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

ValidationStatus = Literal["validated", "needs_review", "dismissed"]

TEST_TYPES = ("functional", "regression", "smoke")
SCENARIO_CLASSIFICATIONS = ("happy_path", "negative", "edge_case")
PRIORITIES = ("critical", "high", "medium", "low")
AUTOMATION_STATUSES = ("ready_for_automation", "automation_not_needed")


class TestStep(BaseModel):
    __test__ = False  # Not a pytest test class

    step_number: int = 0
    action: str = ""
    input: str = ""
    expected_result: str | None = None

    class Config:
        frozen = True

    @field_validator("input", mode="before")
    @classmethod
    def _none_input_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ValidationDetail(BaseModel):
    """Structured flag, kept apart from human-readable issue strings."""

    type: Literal["auto_correction_needed"] = "auto_correction_needed"
    severity: Literal["critical"] = "critical"
    ratio: float
    problematic_steps: list[int]

    class Config:
        frozen = True


class ValidationNotes(BaseModel):
    """Validation outcome attached to a scenario.

    ``issues`` are rule violations, ``flags`` are append-only structured
    signals and ``message`` is a free-form explanation. Flattened to a
    single string only by :meth:`render`.
    """

    issues: tuple[str, ...] = ()
    flags: tuple[ValidationDetail, ...] = ()
    message: str = ""

    class Config:
        frozen = True

    @property
    def has_critical_flag(self) -> bool:
        return any(flag.severity == "critical" for flag in self.flags)

    def with_flag(self, flag: ValidationDetail) -> "ValidationNotes":
        return self.model_copy(update={"flags": (*self.flags, flag)})

    def render(self) -> str:
        if self.issues:
            return "; ".join(self.issues)
        return self.message


class Traceability(BaseModel):
    source_confluence_page_id: str = ""
    generated_at: str = ""


class GeneratedTestScenario(BaseModel):
    test_id: str = ""
    test_name: str = ""
    description: str = ""
    test_type: str = ""
    scenario_classification: str = ""
    priority: str = ""
    preconditions: list[str] = Field(default_factory=list)
    test_steps: list[TestStep] = Field(default_factory=list)
    automation_status: str = ""
    test_repository_folder: str = ""
    validation_status: ValidationStatus | None = None
    validation_notes: ValidationNotes = Field(default_factory=ValidationNotes)
    traceability: Traceability = Field(default_factory=Traceability)
    parent_jira_issue_id: str = ""

    class Config:
        frozen = True

    @field_validator("preconditions", mode="before")
    @classmethod
    def _single_precondition(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        return value

    @field_validator("validation_notes", mode="before")
    @classmethod
    def _legacy_notes(cls, value: Any) -> Any:
        # Older producers store notes as a string or as a bare list of flags
        if value is None:
            return ValidationNotes()
        if isinstance(value, str):
            return ValidationNotes(issues=tuple(i for i in value.split("; ") if i))
        if isinstance(value, list):
            return ValidationNotes(flags=tuple(value))
        return value


class InputMetadata(BaseModel):
    parent_jira_issue_id: str
    system_type: str | None = None
    feature_priority: str | None = None


class NormalizedInput(BaseModel):
    normalized_text: str
    metadata: InputMetadata
