"""
HTTP handler that accepts an OpenTelemetry Collector configuration.

Validates the request method and content type, then hands the raw body to each
registered Processor in order. The first processor failure stops dispatch.
Callers always get a CreateConfigResponse envelope; failure details go to the
CreateConfig span and the log only.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from loguru import logger
from opentelemetry import context as otel_context
from opentelemetry import propagate, trace
from opentelemetry.trace import Span, Status, StatusCode, Tracer
from starlette.requests import Request
from starlette.responses import Response

from seedling.app.constants import (
    CREATE_CONFIG_SPAN,
    TRACER_NAME,
    MediaType,
    ResponseMessage,
    SpanStatusDescription,
)
from seedling.app.core import SERVICE_NAME
from seedling.app.domain.processing_context import ProcessingContext
from seedling.app.handlers.responses import write_response
from seedling.app.infrastructure.http.request_stream import RequestBodyStream
from seedling.app.ports.processor import Processor
from seedling.app.schemas.config import CreateConfigResponse

HandlerOption = Callable[["CreateConfigHandler"], None]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class CreateConfigHandler:
    """Submission handler. Holds only read-only configuration after construction."""

    def __init__(self, *options: HandlerOption) -> None:
        self._tracer: Tracer | None = None
        self._processors: tuple[Processor, ...] = ()

        for option in options:
            option(self)

        if self._tracer is None:
            self._tracer = trace.get_tracer(TRACER_NAME)

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    @property
    def processors(self) -> tuple[Processor, ...]:
        return self._processors

    async def __call__(self, request: Request) -> Response:
        parent = propagate.extract(request.headers, context=otel_context.get_current())
        span = self._tracer.start_span(CREATE_CONFIG_SPAN, context=parent)
        try:
            status_code, payload = await self._handle(request, span, parent)
        except BaseException:
            span.end()
            raise
        return write_response(span, status_code, payload)

    async def _handle(
        self,
        request: Request,
        span: Span,
        parent: otel_context.Context,
    ) -> tuple[int, CreateConfigResponse]:
        config_id = uuid.uuid4()
        span.set_attribute("id", str(config_id))

        if request.method != "POST":
            span.set_attribute("method", request.method)
            span.set_status(Status(StatusCode.ERROR, SpanStatusDescription.INVALID_METHOD))
            _log("config_rejected", id=str(config_id), reason="invalid_request_method", method=request.method)
            return 405, CreateConfigResponse(success=False, message=ResponseMessage.INVALID_METHOD)

        content_type = request.headers.get("content-type", "")
        if content_type != MediaType.YAML:
            span.set_attribute("content-type", content_type)
            span.set_status(Status(StatusCode.ERROR, SpanStatusDescription.INVALID_CONTENT_TYPE))
            _log("config_rejected", id=str(config_id), reason="invalid_content_type", content_type=content_type)
            return 400, CreateConfigResponse(success=False, message=ResponseMessage.INVALID_CONTENT_TYPE)

        body = RequestBodyStream(request)
        ctx = ProcessingContext(
            config_id=config_id,
            started_at=datetime.now(timezone.utc),
            trace_context=trace.set_span_in_context(span, parent),
            is_disconnected=body.is_disconnected,
        )
        try:
            with trace.use_span(span, record_exception=False, set_status_on_exception=False):
                for index, processor in enumerate(self._processors):
                    try:
                        await processor.process(ctx, body)
                    except Exception as exc:
                        span.set_status(Status(StatusCode.ERROR, str(exc)))
                        _log(
                            "config_processor_failed",
                            id=str(config_id),
                            processor=type(processor).__name__,
                            position=index,
                            error=str(exc),
                        )
                        return 500, CreateConfigResponse(success=False, message=ResponseMessage.PROCESSING_FAILED)
        finally:
            await body.close()

        span.set_attribute("success", True)
        _log("config_received", id=str(config_id), processors=len(self._processors))
        return 200, CreateConfigResponse(success=True, message=ResponseMessage.RECEIVED, id=config_id)


def with_tracer(tracer: Tracer) -> HandlerOption:
    """Sets the tracer on the handler."""

    def apply(handler: CreateConfigHandler) -> None:
        handler._tracer = tracer

    return apply


def with_processors(*processors: Processor) -> HandlerOption:
    """Replaces the handler's processors; the last with_processors option wins."""

    def apply(handler: CreateConfigHandler) -> None:
        handler._processors = tuple(processors)

    return apply


def new_handler(*options: HandlerOption) -> CreateConfigHandler:
    return CreateConfigHandler(*options)
