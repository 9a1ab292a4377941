"""Processor that logs a submission's size without interpreting it."""
from __future__ import annotations

from typing import Any

from loguru import logger
from starlette.requests import ClientDisconnect

from seedling.app.core import SERVICE_NAME
from seedling.app.domain.errors import SubmissionCancelledError
from seedling.app.domain.processing_context import ProcessingContext
from seedling.app.ports.config_stream import ConfigStream


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class LoggingProcessor:
    """
    Reads at most max_bytes of the payload and logs how much it saw.

    Leaves the rest of the stream unread, so processors registered after it
    still see the tail of the body.
    """

    def __init__(self, *, max_bytes: int = 4096) -> None:
        self._max_bytes = max_bytes

    async def process(self, ctx: ProcessingContext, body: ConfigStream) -> None:
        try:
            head = await body.read(self._max_bytes) if self._max_bytes > 0 else b""
        except ClientDisconnect as exc:
            raise SubmissionCancelledError(f"submission {ctx.config_id} cancelled by client") from exc

        # Only meaningful once the body is fully read; earlier the transport is not polled.
        if await ctx.cancelled():
            raise SubmissionCancelledError(f"submission {ctx.config_id} cancelled by client")

        ctx.span.set_attribute("logged_bytes", len(head))
        _log(
            "config_logged",
            id=str(ctx.config_id),
            bytes_read=len(head),
            truncated=len(head) >= self._max_bytes > 0,
        )
