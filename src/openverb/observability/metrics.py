"""Prometheus metrics for verb dispatch and manifest validation."""

import time

from prometheus_client import REGISTRY, Counter, Histogram, generate_latest


# ============================================================================
# CORE METRICS
# ============================================================================

verb_executions_total = Counter(
    "openverb_verb_executions_total",
    "Total number of verb executions",
    ["verb_id", "outcome"],  # outcome: ok, declined, unknown, fault, invalid
)

verb_latency = Histogram(
    "openverb_verb_latency_seconds",
    "Time to execute a verb handler",
    ["verb_id"],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 5.0],
)

manifest_violations_total = Counter(
    "openverb_manifest_violations_total",
    "Total number of manifest violations reported by the validator",
    ["source"],
)


class MetricsContext:
    """
    Context manager for timing a verb execution.

    Example:
        with MetricsContext("ui.nav.go"):
            await handler(payload)
    """

    def __init__(self, verb_id: str):
        self.verb_id = verb_id
        self.start_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.perf_counter() - self.start_time
        verb_latency.labels(verb_id=self.verb_id).observe(duration)
        return False


# ============================================================================
# METRICS COLLECTOR
# ============================================================================


class MetricsCollector:
    """Records verb and validator metrics and exposes them to Prometheus."""

    def record_execution(self, verb_id: str, outcome: str):
        verb_executions_total.labels(verb_id=verb_id, outcome=outcome).inc()

    def record_violations(self, source: str, count: int):
        if count:
            manifest_violations_total.labels(source=source).inc(count)

    def get_metrics(self) -> bytes:
        """
        Get metrics in Prometheus format.

        Returns:
            Metrics as bytes in Prometheus exposition format
        """
        return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()
