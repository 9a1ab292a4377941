from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from seedling.app.domain.processing_context import ProcessingContext
from seedling.app.handlers.create_config import new_handler, with_processors, with_tracer
from seedling.app.ports.config_stream import ConfigStream
from seedling.app.routers.config import config_router
from seedling.app.routers.health import health_router

YAML = {"Content-Type": "application/yaml"}


class RecordingProcessor:
    """Implements Processor for tests; records calls and optionally drains the body."""

    def __init__(self, *, read_body: bool = False, raise_on_process: BaseException | None = None) -> None:
        self.called = False
        self.calls = 0
        self.contexts: list[ProcessingContext] = []
        self.bodies: list[bytes] = []
        self._read_body = read_body
        self._raise_on_process = raise_on_process

    async def process(self, ctx: ProcessingContext, body: ConfigStream) -> None:
        self.called = True
        self.calls += 1
        self.contexts.append(ctx)
        if self._read_body:
            self.bodies.append(await body.read())
        if self._raise_on_process is not None:
            raise self._raise_on_process


class CancellationRecorder:
    """Implements Processor for tests; records what ctx.cancelled() reported before and after reading."""

    def __init__(self) -> None:
        self.before: bool | None = None
        self.after: bool | None = None
        self.body: bytes = b""

    async def process(self, ctx: ProcessingContext, body: ConfigStream) -> None:
        self.before = await ctx.cancelled()
        self.body = await body.read()
        self.after = await ctx.cancelled()


@pytest.fixture()
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture()
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture()
def tracer(tracer_provider: TracerProvider):
    return tracer_provider.get_tracer("config")


@pytest.fixture()
def make_app(tracer):
    """Build an app wired like the composition root, with the given processors and a test tracer."""

    def _make(*processors: Any) -> FastAPI:
        app = FastAPI()
        app.state.config_handler = new_handler(with_tracer(tracer), with_processors(*processors))
        app.include_router(health_router)
        app.include_router(config_router)
        return app

    return _make


@pytest.fixture()
def test_app(make_app) -> FastAPI:
    return make_app()
