from collections.abc import Callable
from typing import Any

import pytest

from spec_fidelity.fidelity import FidelityAnalyzer
from spec_fidelity.validation.models import (
    GeneratedTestScenario,
    InputMetadata,
    NormalizedInput,
)


@pytest.fixture(scope="session")
def analyzer() -> FidelityAnalyzer:
    return FidelityAnalyzer()


@pytest.fixture
def source_text() -> str:
    return "User enters email and password and clicks Login. System shows dashboard."


@pytest.fixture
def grounded_step() -> dict[str, Any]:
    return {
        "step_number": 1,
        "action": "Click the Login button",
        "input": "",
        "expected_result": "Dashboard is shown",
    }


@pytest.fixture
def drifting_step() -> dict[str, Any]:
    return {
        "step_number": 1,
        "action": "Scan fingerprint and click Login",
        "input": "",
        "expected_result": "Biometric vault unlocks",
    }


@pytest.fixture
def normalized_input(source_text: str) -> NormalizedInput:
    return NormalizedInput(
        normalized_text=source_text,
        metadata=InputMetadata(parent_jira_issue_id="PROJ-1"),
    )


@pytest.fixture
def make_scenario(
    grounded_step: dict[str, Any],
) -> Callable[..., GeneratedTestScenario]:
    """Build a scenario that passes every structural rule unless overridden."""

    def _make(**overrides: Any) -> GeneratedTestScenario:
        data: dict[str, Any] = {
            "test_id": "TC-1",
            "test_name": "Login with valid credentials",
            "description": "User logs in and lands on the dashboard.",
            "test_type": "functional",
            "scenario_classification": "happy_path",
            "priority": "high",
            "preconditions": ["User has an account"],
            "test_steps": [grounded_step],
            "automation_status": "ready_for_automation",
            "test_repository_folder": "Authentication",
            "traceability": {
                "source_confluence_page_id": "12345",
                "generated_at": "2024-05-01T10:00:00Z",
            },
            "parent_jira_issue_id": "PROJ-1",
        }
        data.update(overrides)
        return GeneratedTestScenario.model_validate(data)

    return _make
