from spec_fidelity.validation.models import (
    GeneratedTestScenario,
    TestStep,
    ValidationDetail,
    ValidationNotes,
)


class TestGeneratedTestScenario:
    def test_empty_payload_loads(self) -> None:
        """Invalid scenarios still load so rules can report on them."""
        scenario = GeneratedTestScenario.model_validate({})

        assert scenario.test_steps == []
        assert scenario.validation_status is None
        assert scenario.validation_notes == ValidationNotes()

    def test_single_precondition_string(self) -> None:
        scenario = GeneratedTestScenario.model_validate({"preconditions": "Logged in"})

        assert scenario.preconditions == ["Logged in"]

    def test_legacy_string_notes(self) -> None:
        scenario = GeneratedTestScenario.model_validate(
            {"validation_notes": "Missing test_name; Missing description"}
        )

        assert scenario.validation_notes.issues == (
            "Missing test_name",
            "Missing description",
        )

    def test_legacy_flag_list_notes(self) -> None:
        scenario = GeneratedTestScenario.model_validate(
            {
                "validation_notes": [
                    {
                        "type": "auto_correction_needed",
                        "severity": "critical",
                        "ratio": 0.7,
                        "problematic_steps": [2],
                    }
                ]
            }
        )

        notes = scenario.validation_notes
        assert notes.has_critical_flag
        assert notes.flags[0].problematic_steps == [2]

    def test_none_step_input_is_empty(self) -> None:
        assert TestStep.model_validate({"input": None}).input == ""


class TestValidationNotes:
    def test_with_flag_appends(self) -> None:
        first = ValidationDetail(ratio=0.7, problematic_steps=[1])
        second = ValidationDetail(ratio=0.9, problematic_steps=[2])

        notes = ValidationNotes(flags=(first,)).with_flag(second)

        assert notes.flags == (first, second)

    def test_render_prefers_issues(self) -> None:
        notes = ValidationNotes(issues=("a", "b"), message="ignored")

        assert notes.render() == "a; b"

    def test_render_falls_back_to_message(self) -> None:
        assert ValidationNotes(message="Rewritten.").render() == "Rewritten."
        assert ValidationNotes().render() == ""
