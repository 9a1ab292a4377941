"""Response writing for the CreateConfig span.

The span stays open until the response bytes have been sent, so write failures
are recorded on the same span that covers the request.
"""
from __future__ import annotations

from typing import Any

from loguru import logger
from opentelemetry.trace import Span, Status, StatusCode
from starlette.responses import PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from seedling.app.constants import MediaType, ResponseMessage, SpanStatusDescription
from seedling.app.core import SERVICE_NAME
from seedling.app.schemas.config import CreateConfigResponse


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


class TracedJSONResponse(Response):
    """JSON response that ends its span once sent, recording any write failure."""

    media_type = MediaType.JSON

    def __init__(self, content: str, *, status_code: int, span: Span) -> None:
        super().__init__(content=content, status_code=status_code)
        self._span = span

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except Exception as exc:
            # Headers may already be on the wire; the trace is the only place left to report.
            self._span.record_exception(exc)
            self._span.set_status(Status(StatusCode.ERROR, SpanStatusDescription.WRITE_FAILED))
            _log("config_response_write_failed", status_code=self.status_code, error=str(exc))
        finally:
            self._span.end()


def write_response(span: Span, status_code: int, payload: CreateConfigResponse) -> Response:
    """Serialize payload for the caller. Ends the span itself only on the plain-text fallback."""
    try:
        content = payload.model_dump_json()
    except ValueError as exc:
        span.record_exception(exc)
        span.set_status(Status(StatusCode.ERROR, SpanStatusDescription.MARSHAL_FAILED))
        span.end()
        return PlainTextResponse(ResponseMessage.MARSHAL_FAILED, status_code=500)

    return TracedJSONResponse(content, status_code=status_code, span=span)
