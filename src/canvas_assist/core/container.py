"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from canvas_assist.clients import GeminiClient, GeminiConfig
from canvas_assist.fields import FieldRegistry
from canvas_assist.interpreter import CommandInterpreter, ContextBuilder
from canvas_assist.monitoring import MetricsCollector, metrics_collector
from canvas_assist.session import EditorSession
from canvas_assist.sync import StateSynchronizer
from .config import Settings, get_settings
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_model_client(settings: Settings, metrics: MetricsCollector) -> GeminiClient | None:
    """Model client, or None when no credential is configured."""
    if not settings.has_model_credential:
        logger.info("model_disabled", reason="no_credential")
        return None
    return GeminiClient(GeminiConfig.from_settings(settings), metrics=metrics)


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings, metrics: MetricsCollector | None = None) -> None:
        self.settings = settings
        self.metrics = metrics or metrics_collector

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_metrics(self) -> MetricsCollector:
        return self.metrics

    @singleton
    @provider
    def provide_field_registry(self) -> FieldRegistry:
        """Provide field registry with the built-in tables."""
        return FieldRegistry()

    @singleton
    @provider
    def provide_synchronizer(self, metrics: MetricsCollector) -> StateSynchronizer:
        return StateSynchronizer(metrics=metrics)

    @singleton
    @provider
    def provide_interpreter(self, settings: Settings, metrics: MetricsCollector) -> CommandInterpreter:
        """Provide command interpreter with all dependencies."""
        return CommandInterpreter(
            client=build_model_client(settings, metrics),
            context_builder=ContextBuilder(max_markup_length=settings.max_markup_length),
            metrics=metrics,
            timeout=settings.model_timeout,
            max_command_length=settings.max_command_length,
        )

    @provider
    def provide_session(
        self,
        interpreter: CommandInterpreter,
        synchronizer: StateSynchronizer,
        registry: FieldRegistry,
    ) -> EditorSession:
        """Provide a fresh editor session."""
        return EditorSession(interpreter, synchronizer, registry)


def create_container(
    settings: Settings | None = None, metrics: MetricsCollector | None = None
) -> Injector:
    """Create configured injector; applies the logging settings first."""
    settings = settings or get_settings()
    configure_logging(settings)
    return Injector([CoreModule(settings, metrics)])
