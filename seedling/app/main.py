from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from seedling.app.composition import create_app_dependencies
from seedling.app.config.settings import Settings
from seedling.app.core import SERVICE_NAME, SERVICE_VERSION
from seedling.app.core.logging import configure_logging
from seedling.app.routers.config import config_router
from seedling.app.routers.health import health_router


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _settings = settings or Settings()
        configure_logging(_settings.log_level, serialize=_settings.log_json)
        logger.bind(service_name=SERVICE_NAME, event="api_starting", processors=_settings.processor_backends).info("")
        deps = create_app_dependencies(_settings)
        app.state.settings = deps.settings
        app.state.processors = deps.processors
        app.state.config_handler = deps.config_handler
        try:
            yield
        finally:
            logger.bind(service_name=SERVICE_NAME, event="api_stopping").info("")
            deps.close()

    app = FastAPI(
        title="seedling",
        description="Accepts OpenTelemetry Collector configurations for custom collector builds.",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.include_router(health_router)
    app.include_router(config_router)
    return app


app = create_app()
