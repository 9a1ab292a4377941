from __future__ import annotations

from fastapi import APIRouter, Request, Response

config_router = APIRouter(tags=["Config"])


async def create_config(request: Request) -> Response:
    """Submit an OpenTelemetry Collector configuration (POST, Content-Type: application/yaml).

    Registered for every method so that the handler answers non-POST requests
    with its own 405 envelope and span. The 503 below is the only answer from
    this route that bypasses the handler: without one there is no tracer or
    envelope to use.
    """
    handler = getattr(request.app.state, "config_handler", None)
    if handler is None:
        return Response(status_code=503, content="Config handler not available")
    return await handler(request)


# methods=None is a plain Starlette route that matches any method, including TRACE and extension methods.
config_router.add_route("/", create_config, methods=None, include_in_schema=False)
