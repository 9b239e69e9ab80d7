from concurrent.futures import ThreadPoolExecutor

from spec_fidelity.observability import InMemoryMetricsHook, names


class TestInMemoryMetricsHook:
    def test_counters_are_keyed_by_labels(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment(names.VALIDATION_SCENARIOS_TOTAL, labels={"status": "validated"})
        hook.increment(names.VALIDATION_SCENARIOS_TOTAL, labels={"status": "validated"})
        hook.increment(names.VALIDATION_SCENARIOS_TOTAL, labels={"status": "needs_review"})

        assert hook.count(names.VALIDATION_SCENARIOS_TOTAL, {"status": "validated"}) == 2
        assert hook.total(names.VALIDATION_SCENARIOS_TOTAL) == 3
        assert hook.count("missing") == 0

    def test_gauge_keeps_last_value(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_gauge(names.FIDELITY_DRIFT_RATIO, 0.2)
        hook.record_gauge(names.FIDELITY_DRIFT_RATIO, 0.7)

        assert hook.gauge(names.FIDELITY_DRIFT_RATIO) == 0.7
        assert hook.gauge("missing") is None

    def test_latencies_are_sampled(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_latency(names.PARSING_DURATION, 12.5, {"source_type": "pdf"})
        hook.record_latency(names.PARSING_DURATION, 7.5, {"source_type": "pdf"})

        key = (names.PARSING_DURATION, (("source_type", "pdf"),))
        assert hook.latencies[key] == [12.5, 7.5]

    def test_thread_safe_increments(self) -> None:
        hook = InMemoryMetricsHook()

        with ThreadPoolExecutor(max_workers=8) as pool:
            for _ in range(1000):
                pool.submit(hook.increment, names.CHUNKING_CHUNKS_CREATED)

        assert hook.count(names.CHUNKING_CHUNKS_CREATED) == 1000
