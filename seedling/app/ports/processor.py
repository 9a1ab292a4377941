"""Port: configuration processor contract. Implementations live in infrastructure."""
from __future__ import annotations

from typing import Protocol

from seedling.app.domain.processing_context import ProcessingContext
from seedling.app.ports.config_stream import ConfigStream


class Processor(Protocol):
    """Consumes a submitted configuration. Raising any Exception signals failure."""

    async def process(self, ctx: ProcessingContext, body: ConfigStream) -> None: ...
