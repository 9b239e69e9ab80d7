# src/spec_fidelity/validation/validator.py

import asyncio
import logging
from collections import Counter
from time import monotonic

from spec_fidelity.fidelity.analyzer import FidelityAnalyzer
from spec_fidelity.observability import names
from spec_fidelity.observability.base import MetricsHook, NoOpMetricsHook

from .config import ValidationConfig
from .corrector import AutoCorrector
from .models import (
    GeneratedTestScenario,
    NormalizedInput,
    ValidationDetail,
    ValidationNotes,
)
from .rules import (
    check_fidelity,
    check_required_fields,
    check_step_clarity,
    check_traceability,
)

logger = logging.getLogger(__name__)


class ScenarioValidator:
    """Assigns every scenario a terminal status with notes explaining it.

    Scenarios are processed sequentially and independently; input order is
    preserved. Rule violations are data, never exceptions. A scenario whose
    worst step drift exceeds ``critical_ratio`` gets one auto-correction
    attempt when a corrector is configured.
    """

    def __init__(
        self,
        analyzer: FidelityAnalyzer,
        config: ValidationConfig = ValidationConfig(),
        corrector: AutoCorrector | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.analyzer = analyzer
        self.config = config
        self.corrector = corrector if config.auto_correct else None
        self.metrics_hook = metrics_hook

    async def validate_scenarios(
        self,
        scenarios: list[GeneratedTestScenario],
        normalized_input: NormalizedInput,
        job_id: str,
        cancel_event: asyncio.Event | None = None,
    ) -> list[GeneratedTestScenario]:
        """Validate ``scenarios`` for one job.

        When ``cancel_event`` is set, the run stops after the scenario in
        flight and returns the scenarios finished so far.
        """
        start = monotonic()
        log = logging.LoggerAdapter(
            logger,
            {
                "job_id": job_id,
                "parent_jira_issue_id": normalized_input.metadata.parent_jira_issue_id,
            },
        )
        log.debug("Starting scenario validation: job=%s, scenarios=%d", job_id, len(scenarios))

        source_keywords = self.analyzer.extract_keywords(normalized_input.normalized_text)
        results: list[GeneratedTestScenario] = []

        for scenario in scenarios:
            if cancel_event is not None and cancel_event.is_set():
                log.warning(
                    "Validation cancelled: job=%s, processed=%d of %d",
                    job_id,
                    len(results),
                    len(scenarios),
                )
                break

            result = await self._validate_one(scenario, normalized_input, source_keywords, log)
            self.metrics_hook.increment(
                names.VALIDATION_SCENARIOS_TOTAL,
                labels={"status": result.validation_status or "unknown"},
            )
            results.append(result)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.VALIDATION_DURATION, elapsed_ms)

        counts = summarize(results)
        log.info(
            "Validation completed: job=%s, total=%d, validated=%d, needs_review=%d",
            job_id,
            len(results),
            counts.get("validated", 0),
            counts.get("needs_review", 0),
        )
        return results

    async def _validate_one(
        self,
        scenario: GeneratedTestScenario,
        normalized_input: NormalizedInput,
        source_keywords: list[str],
        log: logging.LoggerAdapter,
    ) -> GeneratedTestScenario:
        issues = check_required_fields(scenario)
        issues += self._check_clarity(scenario)

        finding = check_fidelity(scenario.test_steps, source_keywords, self.analyzer)
        if finding.issue:
            issues.append(finding.issue)
        self.metrics_hook.record_gauge(names.FIDELITY_DRIFT_RATIO, finding.max_ratio)

        issues += check_traceability(
            scenario, normalized_input.metadata.parent_jira_issue_id
        )

        notes = scenario.validation_notes
        if finding.max_ratio > self.analyzer.config.critical_ratio:
            notes = notes.with_flag(
                ValidationDetail(
                    ratio=finding.max_ratio,
                    problematic_steps=finding.problematic_steps,
                )
            )
            log.warning(
                "Scenario %s needs auto-correction: drift=%.2f, steps=%s",
                scenario.test_id,
                finding.max_ratio,
                finding.problematic_steps,
            )

            corrected = await self._try_correction(scenario, normalized_input, notes, log)
            if corrected is not None:
                return corrected

        if issues:
            log.warning(
                "Scenario failed validation: test_id=%s, name=%s, issues=%s",
                scenario.test_id,
                scenario.test_name,
                issues,
            )
            return scenario.model_copy(
                update={
                    "validation_status": "needs_review",
                    "validation_notes": ValidationNotes(
                        issues=tuple(issues), flags=notes.flags
                    ),
                }
            )

        log.debug("Scenario passed validation: test_id=%s", scenario.test_id)
        return scenario.model_copy(
            update={
                "validation_status": "validated",
                "validation_notes": ValidationNotes(flags=notes.flags),
            }
        )

    async def _try_correction(
        self,
        scenario: GeneratedTestScenario,
        normalized_input: NormalizedInput,
        notes: ValidationNotes,
        log: logging.LoggerAdapter,
    ) -> GeneratedTestScenario | None:
        if self.corrector is None:
            log.debug("No corrector configured, skipping auto-correction")
            return None

        corrected = await self.corrector.correct(scenario, normalized_input, notes)
        if corrected is None:
            return None

        # A rewrite may break the step shape or reintroduce placeholders, and
        # it never repairs scenario-level traceability
        regressions = (
            check_required_fields(corrected)
            + self._check_clarity(corrected)
            + check_traceability(
                corrected, normalized_input.metadata.parent_jira_issue_id
            )
        )
        if regressions:
            log.warning(
                "Discarding auto-correction for %s, rewritten scenario fails rules: %s",
                scenario.test_id,
                regressions,
            )
            return None

        return corrected

    def _check_clarity(self, scenario: GeneratedTestScenario) -> list[str]:
        return check_step_clarity(
            scenario.test_steps,
            self.analyzer.vocabulary.action_verbs,
            self.config.min_action_length,
            self.config.placeholder_markers,
        )


def summarize(scenarios: list[GeneratedTestScenario]) -> dict[str, int]:
    """Count scenarios per validation status."""
    return dict(Counter(s.validation_status or "unknown" for s in scenarios))


async def validate_scenarios(
    scenarios: list[GeneratedTestScenario],
    normalized_input: NormalizedInput,
    job_id: str,
    *,
    corrector: AutoCorrector | None = None,
    cancel_event: asyncio.Event | None = None,
) -> list[GeneratedTestScenario]:
    """Validate with default settings; see :class:`ScenarioValidator`."""
    validator = ScenarioValidator(FidelityAnalyzer(), corrector=corrector)
    return await validator.validate_scenarios(
        scenarios, normalized_input, job_id, cancel_event=cancel_event
    )
