"""
Performance Monitoring
Prometheus-based metrics collection
"""

from canvas_assist.core.tracing import trace_operation, trace_operation_async
from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
    "trace_operation",
    "trace_operation_async",
]
