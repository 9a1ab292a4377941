"""
Composition root: single place where concrete implementations are wired.

Builds settings, tracer provider, processors and the submission handler from
config. No DI container library, explicit wiring only. Processor and exporter
selection is driven by settings (PROCESSORS, TRACE_EXPORTER).
"""

from opentelemetry.sdk.trace import TracerProvider

from seedling.app.config.settings import Settings
from seedling.app.constants import TRACER_NAME
from seedling.app.handlers.create_config import (
    CreateConfigHandler,
    new_handler,
    with_processors,
    with_tracer,
)
from seedling.app.infrastructure.processing.factory import create_processors
from seedling.app.infrastructure.tracing.factory import create_tracer_provider
from seedling.app.ports.processor import Processor


class AppDependencies:
    """Holds wired dependencies and their lifecycle. Built only in composition root."""

    def __init__(
        self,
        *,
        settings: Settings,
        tracer_provider: TracerProvider,
        processors: list[Processor],
        config_handler: CreateConfigHandler,
    ) -> None:
        self._settings = settings
        self._tracer_provider = tracer_provider
        self._processors = processors
        self._config_handler = config_handler
        self._closed = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def tracer_provider(self) -> TracerProvider:
        return self._tracer_provider

    @property
    def processors(self) -> list[Processor]:
        return self._processors

    @property
    def config_handler(self) -> CreateConfigHandler:
        return self._config_handler

    def close(self) -> None:
        if self._closed:
            return
        self._tracer_provider.force_flush()
        self._tracer_provider.shutdown()
        self._closed = True


def create_app_dependencies(settings: Settings | None = None) -> AppDependencies:
    """
    Composition root: build all app dependencies in one place.
    Caller owns lifecycle (close).
    """
    _settings = settings or Settings()
    tracer_provider = create_tracer_provider(_settings)
    processors = create_processors(_settings)
    handler = new_handler(
        with_tracer(tracer_provider.get_tracer(TRACER_NAME)),
        with_processors(*processors),
    )

    return AppDependencies(
        settings=_settings,
        tracer_provider=tracer_provider,
        processors=processors,
        config_handler=handler,
    )
