"""
Tests for OpenTelemetry tracing and Prometheus metrics around verb dispatch.

Verifies setup/shutdown, span attributes and the no-op path when tracing
is off.
"""

import pytest
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from prometheus_client import REGISTRY

import openverb.observability.tracing as tracing_module
from openverb import create_verb_handlers, execute_verb
from openverb.observability import (
    create_span,
    dispatch_span,
    get_current_span,
    get_tracer,
    is_tracing_enabled,
    metrics_collector,
    setup_tracing,
    shutdown_tracing,
)


@pytest.fixture
def exporter():
    """Tracing on, with finished spans collected in memory"""
    setup_tracing("test-service")
    memory = InMemorySpanExporter()
    tracing_module._tracer_provider.add_span_processor(SimpleSpanProcessor(memory))
    yield memory
    shutdown_tracing()


class TestTracingSetup:
    """Test tracing setup and configuration"""

    def test_setup_tracing(self):
        tracer = setup_tracing("test-service", console_export=False)

        assert tracer is not None
        assert get_tracer() is tracer
        assert is_tracing_enabled()

        shutdown_tracing()

    def test_shutdown_disables_tracing(self):
        setup_tracing("test-service")
        shutdown_tracing()

        assert not is_tracing_enabled()
        with pytest.raises(RuntimeError, match="Tracing not initialized"):
            get_tracer()

    def test_dispatch_span_noop_when_off(self):
        shutdown_tracing()

        with dispatch_span("ui.nav.go") as span:
            assert span is None


class TestSpans:
    """Test span creation and attributes"""

    def test_create_span_attributes(self, exporter):
        with create_span("test_operation", {"verb.id": "ui.nav.go", "skipped": None}) as current:
            assert get_current_span() is current

        (span,) = exporter.get_finished_spans()
        assert span.name == "test_operation"
        assert span.attributes["verb.id"] == "ui.nav.go"
        assert "skipped" not in span.attributes

    def test_create_span_records_exception(self, exporter):
        with pytest.raises(ValueError):
            with create_span("failing"):
                raise ValueError("boom")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR

    @pytest.mark.asyncio
    async def test_execute_verb_emits_span(self, exporter):
        registry = create_verb_handlers({"ui.nav.back": lambda payload: {"success": True}})

        await execute_verb(registry, "ui.nav.back")

        spans = exporter.get_finished_spans()
        assert [s.name for s in spans] == ["verb.execute"]
        assert spans[0].attributes["verb.id"] == "ui.nav.back"

    @pytest.mark.asyncio
    async def test_handler_fault_still_returns_result(self, exporter):
        def failing(payload):
            raise RuntimeError("down")

        result = await execute_verb({"ui.nav.back": failing}, "ui.nav.back")

        assert result == {"error": "down"}
        (span,) = exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR
        assert span.status.description == "down"
        assert [e.name for e in span.events] == ["exception"]

    @pytest.mark.asyncio
    async def test_declined_result_is_not_an_error_span(self, exporter):
        await execute_verb({"ui.nav.back": lambda payload: {"success": False}}, "ui.nav.back")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code != StatusCode.ERROR


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetrics:
    """Test dispatch outcome counters"""

    @pytest.mark.asyncio
    async def test_outcomes_counted(self):
        registry = create_verb_handlers(
            {
                "metrics.ok": lambda payload: {"success": True},
                "metrics.declined": lambda payload: {"success": False},
            }
        )
        before_ok = _sample("openverb_verb_executions_total", verb_id="metrics.ok", outcome="ok")
        before_declined = _sample(
            "openverb_verb_executions_total", verb_id="metrics.declined", outcome="declined"
        )
        before_unknown = _sample(
            "openverb_verb_executions_total", verb_id="metrics.missing", outcome="unknown"
        )

        await execute_verb(registry, "metrics.ok")
        await execute_verb(registry, "metrics.declined")
        await execute_verb(registry, "metrics.missing")

        assert _sample(
            "openverb_verb_executions_total", verb_id="metrics.ok", outcome="ok"
        ) == before_ok + 1
        assert _sample(
            "openverb_verb_executions_total", verb_id="metrics.declined", outcome="declined"
        ) == before_declined + 1
        assert _sample(
            "openverb_verb_executions_total", verb_id="metrics.missing", outcome="unknown"
        ) == before_unknown + 1

    def test_exposition_format(self):
        metrics_collector.record_violations("metrics-test.json", 2)

        output = metrics_collector.get_metrics()

        assert b"openverb_manifest_violations_total" in output
