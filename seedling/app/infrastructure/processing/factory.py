"""Processor factory: builds the processor chain from config."""
from __future__ import annotations

from seedling.app.config.settings import Settings
from seedling.app.ports.processor import Processor
from seedling.app.infrastructure.processing.inmemory.in_memory_processor import InMemoryProcessor
from seedling.app.infrastructure.processing.logging.logging_processor import LoggingProcessor


def create_processor(backend: str, settings: Settings) -> Processor:
    backend = backend.strip().lower()

    if backend == "logging":
        return LoggingProcessor(max_bytes=settings.max_logged_bytes)

    if backend == "inmemory":
        return InMemoryProcessor()

    raise ValueError(f"Unsupported processor backend: {backend}")


def create_processors(settings: Settings) -> list[Processor]:
    return [create_processor(backend, settings) for backend in settings.processor_backends]
