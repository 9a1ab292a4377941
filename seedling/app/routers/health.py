from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from seedling.app.core import SERVICE_NAME

health_router = APIRouter(tags=["Health"])

def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")

@health_router.get(
    "/health/live",
    summary="Liveness probe",
    description="Returns 200 if the API process is running. Used to confirm the service is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/health/ready",
    summary="Readiness probe",
    description="Returns 200 only when the submission handler is wired. Used to confirm the service is ready to accept configurations.",
    responses={
        200: {"description": "Submission handler is ready."},
        503: {"description": "Submission handler not initialized."},
    },
)
async def ready(request: Request) -> Response:
    handler = getattr(request.app.state, "config_handler", None)
    if handler is None:
        _log("components_not_initialized")
        return Response(status_code=503, content="Not ready")
    return Response(status_code=200, content="OK")
