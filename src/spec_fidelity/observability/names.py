# src/spec_fidelity/observability/names.py

"""Standard metric names for spec-fidelity observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSING_DURATION = "parsing_duration"

# Counters
PARSING_ERRORS_TOTAL = "parsing_errors_total"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"


# ============================================================================
# Validation Metrics
# ============================================================================

# Duration
VALIDATION_DURATION = "validation_duration"

# Counters (labelled with terminal status)
VALIDATION_SCENARIOS_TOTAL = "validation_scenarios_total"

# Gauges (maximum per-step drift of the last validated scenario)
FIDELITY_DRIFT_RATIO = "fidelity_drift_ratio"


# ============================================================================
# Auto-correction Metrics
# ============================================================================

# Counters
CORRECTION_ATTEMPTS_TOTAL = "correction_attempts_total"
CORRECTION_ACCEPTED_TOTAL = "correction_accepted_total"
CORRECTION_REJECTED_TOTAL = "correction_rejected_total"
