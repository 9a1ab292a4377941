"""Domain value object for per-submission processing context. Passed to every Processor."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable
from uuid import UUID

from opentelemetry import trace
from opentelemetry.context import Context


async def _never_cancelled() -> bool:
    return False


@dataclass(frozen=True)
class ProcessingContext:
    """Per-submission context.

    trace_context holds the CreateConfig span, so spans started by a processor
    with `tracer.start_as_current_span(..., context=ctx.trace_context)` nest
    under it. is_disconnected is polled by cancelled(); processors doing long
    work should check it between steps.
    """

    config_id: UUID
    started_at: datetime
    trace_context: Context
    is_disconnected: Callable[[], Awaitable[bool]] = _never_cancelled

    @property
    def span(self) -> trace.Span:
        return trace.get_current_span(self.trace_context)

    async def cancelled(self) -> bool:
        return await self.is_disconnected()
