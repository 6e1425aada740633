"""
Metrics Collection
Prometheus metrics for command interpretation and field synchronisation.
"""

from prometheus_client import CollectorRegistry, Counter, Histogram, REGISTRY, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the assistant.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else REGISTRY

        # Command metrics
        self.commands_total = Counter(
            "canvas_commands_total",
            "Total number of interpreted commands",
            ["source"],
            registry=self.registry,
        )
        self.fallbacks_total = Counter(
            "canvas_fallbacks_total",
            "Total number of heuristic fallbacks",
            ["reason"],
            registry=self.registry,
        )

        # Model metrics
        self.model_calls_total = Counter(
            "canvas_model_calls_total",
            "Total number of model API calls",
            ["model", "status"],
            registry=self.registry,
        )
        self.model_duration = Histogram(
            "canvas_model_duration_seconds",
            "Model API call duration in seconds",
            ["model"],
            buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
            registry=self.registry,
        )

        # Synchroniser metrics
        self.field_writes_total = Counter(
            "canvas_field_writes_total",
            "Total number of field writes to components",
            registry=self.registry,
        )
        self.style_changes_total = Counter(
            "canvas_style_changes_total",
            "Total number of style properties applied",
            ["operation"],
            registry=self.registry,
        )
        self.notify_errors_total = Counter(
            "canvas_notify_errors_total",
            "Total number of host/observer notification failures",
            ["target"],
            registry=self.registry,
        )

    def record_command(self, source: str) -> None:
        """Record an interpreted command by result source."""
        self.commands_total.labels(source=source).inc()

    def record_fallback(self, reason: str) -> None:
        """Record a fallback to heuristic inference."""
        self.fallbacks_total.labels(reason=reason).inc()

    def record_model_call(self, model: str, status: str, duration: float) -> None:
        """Record a model API call."""
        self.model_calls_total.labels(model=model, status=status).inc()
        self.model_duration.labels(model=model).observe(duration)

    def record_field_write(self) -> None:
        """Record a field write."""
        self.field_writes_total.inc()

    def record_style_change(self, operation: str) -> None:
        """Record a style add/remove."""
        self.style_changes_total.labels(operation=operation).inc()

    def record_notify_error(self, target: str) -> None:
        """Record a swallowed notification failure."""
        self.notify_errors_total.labels(target=target).inc()

    def export(self) -> bytes:
        """Export metrics in Prometheus text format."""
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector()
