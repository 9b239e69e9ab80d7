# src/spec_fidelity/validation/rules.py

"""Validation rules. Each rule returns issues as data and never raises."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from spec_fidelity.fidelity.analyzer import FidelityAnalyzer

from .models import (
    AUTOMATION_STATUSES,
    PRIORITIES,
    SCENARIO_CLASSIFICATIONS,
    TEST_TYPES,
    GeneratedTestScenario,
    TestStep,
)


@dataclass(frozen=True)
class FidelityFinding:
    problematic_steps: list[int]
    max_ratio: float

    @property
    def issue(self) -> str | None:
        if not self.problematic_steps:
            return None
        steps = ", ".join(str(n) for n in self.problematic_steps)
        return (
            f"Test steps {steps} introduce concepts not found in the specification "
            f"(max drift {self.max_ratio:.0%})"
        )


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


def check_required_fields(scenario: GeneratedTestScenario) -> list[str]:
    issues = []

    if _blank(scenario.test_name):
        issues.append("Missing test_name")
    if _blank(scenario.description):
        issues.append("Missing description")
    if scenario.test_type not in TEST_TYPES:
        issues.append("Invalid or missing test_type")
    if scenario.scenario_classification not in SCENARIO_CLASSIFICATIONS:
        issues.append("Invalid or missing scenario_classification")
    if not any(not _blank(p) for p in scenario.preconditions):
        issues.append("Missing preconditions")

    if not scenario.test_steps:
        issues.append("Missing or empty test_steps array")
    for n, step in enumerate(scenario.test_steps, start=1):
        if _blank(step.action):
            issues.append(f"Test step {n} is missing an action")
        if not isinstance(step.expected_result, str):
            issues.append(f"Test step {n} is missing expected_result")

    if scenario.priority not in PRIORITIES:
        issues.append("Invalid or missing priority")
    if scenario.automation_status not in AUTOMATION_STATUSES:
        issues.append("Invalid or missing automation_status")
    if _blank(scenario.test_repository_folder):
        issues.append("Missing test_repository_folder")

    return issues


def check_step_clarity(
    steps: Sequence[TestStep],
    action_verbs: Sequence[str],
    min_action_length: int = 10,
    placeholder_markers: Sequence[str] = ("TODO", "TBD", "[insert", "...", "xxx"),
) -> list[str]:
    issues = []

    for n, step in enumerate(steps, start=1):
        action = step.action.strip()
        if len(action) < min_action_length:
            issues.append(
                f"Test step {n} is too short (less than {min_action_length} characters)"
            )

        lowered = action.lower()
        if not any(verb in lowered for verb in action_verbs):
            issues.append(f"Test step {n} does not contain an actionable verb")

        if isinstance(step.expected_result, str) and _blank(step.expected_result):
            issues.append(f"Test step {n} has an empty expected_result")

        text = " ".join((step.action, step.input, step.expected_result or "")).lower()
        for marker in placeholder_markers:
            if marker.lower() in text:
                issues.append(f'Test step {n} contains placeholder text: "{marker}"')

    return issues


def step_text(step: TestStep) -> str:
    return " ".join(p for p in (step.action, step.input, step.expected_result or "") if p)


def check_fidelity(
    steps: Sequence[TestStep],
    source_keywords: list[str],
    analyzer: FidelityAnalyzer,
) -> FidelityFinding:
    """Run drift analysis per step so drift localizes to specific steps."""
    problematic: list[int] = []
    max_ratio = 0.0

    for n, step in enumerate(steps, start=1):
        analysis = analyzer.analyze_keywords(
            source_keywords, analyzer.extract_keywords(step_text(step))
        )
        max_ratio = max(max_ratio, analysis.new_concept_ratio)
        if analysis.has_new_concepts:
            problematic.append(n)

    return FidelityFinding(problematic_steps=problematic, max_ratio=max_ratio)


def check_traceability(
    scenario: GeneratedTestScenario, expected_issue_id: str
) -> list[str]:
    issues = []

    if scenario.parent_jira_issue_id != expected_issue_id:
        issues.append("parent_jira_issue_id does not match input metadata")
    if _blank(scenario.traceability.source_confluence_page_id):
        issues.append("Missing source_confluence_page_id in traceability")

    generated_at = scenario.traceability.generated_at
    if _blank(generated_at):
        issues.append("Missing generated_at timestamp in traceability")
    elif not _is_timestamp(generated_at):
        issues.append("Invalid ISO 8601 timestamp in generated_at")

    return issues


def _is_timestamp(value: str) -> bool:
    try:
        datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return False
    return True
