"""seedling command line."""
from __future__ import annotations

import click
from loguru import logger

from seedling.app.config.settings import Settings


@click.group()
def cli() -> None:
    """🌱 seedling is a web-based tool for building custom OTel Collector builds."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: HOST)")
@click.option("--port", default=None, type=int, help="Bind port (default: PORT)")
@click.option("--reload/--no-reload", default=False, help="Reload on code changes (development).")
def serve_cmd(host: str | None, port: int | None, reload: bool) -> None:
    """Run the configuration submission API."""
    import uvicorn

    settings = Settings()
    bind_host = host if host is not None else settings.host
    bind_port = port if port is not None else settings.port
    logger.info("starting seedling on {}:{}", bind_host, bind_port)
    uvicorn.run(
        "seedling.app.main:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


def main() -> None:
    try:
        cli()
    except Exception as e:
        logger.exception("seedling failed: {}", e)
        raise SystemExit(1)
