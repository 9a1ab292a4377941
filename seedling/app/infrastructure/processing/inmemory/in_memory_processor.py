"""In-memory processor for testing and local mode.
Keeps every received payload in process memory; nothing survives a restart.
"""
from __future__ import annotations

from uuid import UUID

from seedling.app.domain.processing_context import ProcessingContext
from seedling.app.ports.config_stream import ConfigStream


class InMemoryProcessor:
    def __init__(self) -> None:
        self.received: list[tuple[UUID, bytes]] = []

    async def process(self, ctx: ProcessingContext, body: ConfigStream) -> None:
        payload = await body.read()
        self.received.append((ctx.config_id, payload))
