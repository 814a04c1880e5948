"""
Observability module: OpenTelemetry tracing and Prometheus metrics for verb
dispatch.
"""

from .tracing import (
    setup_tracing,
    shutdown_tracing,
    create_span,
    dispatch_span,
    get_current_span,
    get_tracer,
    is_tracing_enabled,
    record_span_error,
)
from .metrics import MetricsContext, MetricsCollector, metrics_collector

__all__ = [
    'setup_tracing',
    'shutdown_tracing',
    'create_span',
    'dispatch_span',
    'get_current_span',
    'get_tracer',
    'is_tracing_enabled',
    'record_span_error',
    'MetricsContext',
    'MetricsCollector',
    'metrics_collector',
]
