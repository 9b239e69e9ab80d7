# src/spec_fidelity/validation/corrector.py

import asyncio
import json
import logging
import re

from pydantic import BaseModel, ValidationError

from spec_fidelity.fidelity.analyzer import FidelityAnalyzer
from spec_fidelity.llms.base import LLMClient, Message, Role
from spec_fidelity.observability import names
from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook
from spec_fidelity.prompts import Prompt, PromptsLibrary

from .config import ValidationConfig
from .models import GeneratedTestScenario, NormalizedInput, TestStep, ValidationNotes
from .rules import check_fidelity

logger = logging.getLogger(__name__)

AUTO_CORRECTION_NOTE = (
    "Test steps were automatically rewritten to use only terminology from the "
    "specification; no new concepts remain."
)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class _CorrectedStep(BaseModel):
    step_number: int
    action: str
    input: str | None = ""
    expected_result: str


class _CorrectionResponse(BaseModel):
    test_steps: list[_CorrectedStep]


class AutoCorrector:
    """One bounded LLM rewrite of a drifting scenario.

    Exactly one request per call, no retry loop. Any failure (timeout,
    provider error, malformed JSON, empty fields, remaining drift) returns
    ``None`` and the caller keeps its uncorrected result.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        analyzer: FidelityAnalyzer,
        config: ValidationConfig = ValidationConfig(),
        prompts: PromptsLibrary | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._llm = llm_client
        self._analyzer = analyzer
        self._config = config
        prompts = prompts or PromptsLibrary()
        self._prompt: Prompt = (
            prompts.latest(config.prompt_name)
            if config.prompt_version is None
            else prompts.get(config.prompt_name, config.prompt_version)
        )
        self.metrics_hook = metrics_hook

    async def correct(
        self,
        scenario: GeneratedTestScenario,
        normalized_input: NormalizedInput,
        notes: ValidationNotes,
    ) -> GeneratedTestScenario | None:
        """Return a validated copy of ``scenario`` or ``None``."""
        self.metrics_hook.increment(names.CORRECTION_ATTEMPTS_TOTAL)
        logger.info("Attempting auto-correction for scenario %s", scenario.test_id)

        try:
            response = await asyncio.wait_for(
                self._llm.complete(
                    messages=self._build_messages(scenario, normalized_input),
                    temperature=self._config.correction_temperature,
                    max_tokens=self._config.correction_max_tokens,
                    response_format="json",
                ),
                timeout=self._config.correction_timeout,
            )
        except TimeoutError:
            return self._reject(scenario, "timeout")
        except Exception as e:
            logger.warning(
                "Auto-correction request failed for scenario %s: %s",
                scenario.test_id,
                e,
            )
            return self._reject(scenario, "llm_error")

        steps = self._parse_steps(scenario, response.content)
        if steps is None:
            return None

        corrected = scenario.model_copy(update={"test_steps": steps})
        finding = check_fidelity(
            corrected.test_steps,
            self._analyzer.extract_keywords(normalized_input.normalized_text),
            self._analyzer,
        )
        if finding.problematic_steps:
            logger.warning(
                "Auto-correction for scenario %s still drifts in steps %s",
                scenario.test_id,
                finding.problematic_steps,
            )
            return self._reject(scenario, "drift_remaining")

        self.metrics_hook.increment(names.CORRECTION_ACCEPTED_TOTAL)
        logger.info("Auto-correction accepted for scenario %s", scenario.test_id)
        return corrected.model_copy(
            update={
                "validation_status": "validated",
                "validation_notes": notes.model_copy(
                    update={"issues": (), "message": AUTO_CORRECTION_NOTE}
                ),
            }
        )

    def _build_messages(
        self, scenario: GeneratedTestScenario, normalized_input: NormalizedInput
    ) -> list[Message]:
        steps_json = json.dumps(
            [step.model_dump() for step in scenario.test_steps],
            ensure_ascii=False,
            indent=2,
        )
        user_prompt = self._prompt.render(
            specification=normalized_input.normalized_text,
            test_name=scenario.test_name,
            test_steps=steps_json,
            step_count=str(len(scenario.test_steps)),
        )
        return [
            Message(role=Role.SYSTEM, content=self._prompt.system),
            Message(role=Role.USER, content=user_prompt),
        ]

    def _parse_steps(
        self, scenario: GeneratedTestScenario, content: str | None
    ) -> list[TestStep] | None:
        if not content or not content.strip():
            return self._reject(scenario, "empty_response")

        payload = content.strip()
        fenced = _CODE_FENCE.match(payload)
        if fenced:
            payload = fenced.group(1)

        try:
            parsed = _CorrectionResponse.model_validate_json(payload)
        except ValidationError as e:
            logger.error(
                "Malformed auto-correction response for scenario %s: %s",
                scenario.test_id,
                e.errors()[0]["msg"] if e.errors() else e,
            )
            return self._reject(scenario, "malformed_json")

        if len(parsed.test_steps) != len(scenario.test_steps):
            logger.warning(
                "Auto-correction for scenario %s returned %d steps, expected %d",
                scenario.test_id,
                len(parsed.test_steps),
                len(scenario.test_steps),
            )
            return self._reject(scenario, "step_count")

        if any(
            not s.action.strip() or not s.expected_result.strip()
            for s in parsed.test_steps
        ):
            logger.warning(
                "Auto-correction for scenario %s returned empty step fields",
                scenario.test_id,
            )
            return self._reject(scenario, "empty_field")

        return [
            TestStep(
                step_number=s.step_number,
                action=s.action,
                input=s.input or "",
                expected_result=s.expected_result,
            )
            for s in parsed.test_steps
        ]

    def _reject(self, scenario: GeneratedTestScenario, reason: str) -> None:
        self.metrics_hook.increment(
            names.CORRECTION_REJECTED_TOTAL, labels={"reason": reason}
        )
        logger.warning(
            "Auto-correction discarded for scenario %s: %s", scenario.test_id, reason
        )
        return None
