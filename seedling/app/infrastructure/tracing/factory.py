"""Tracer provider factory: selects the span exporter from config."""
from __future__ import annotations

from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SimpleSpanProcessor

from seedling.app.config.settings import Settings
from seedling.app.core import SERVICE_VERSION as VERSION


def create_tracer_provider(settings: Settings) -> TracerProvider:
    """Build a provider for this service. The caller owns shutdown; nothing is installed globally."""
    resource = Resource.create({SERVICE_NAME: settings.service_name, SERVICE_VERSION: VERSION})
    provider = TracerProvider(resource=resource)
    backend = settings.trace_exporter.strip().lower()

    if backend == "none":
        return provider

    if backend == "console":
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        return provider

    if backend == "otlp":
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otlp_endpoint)))
        return provider

    raise ValueError(f"Unsupported trace exporter: {backend}")
