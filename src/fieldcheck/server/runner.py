"""Uvicorn launcher for the validation HTTP API."""

from __future__ import annotations

import logging

from fieldcheck.config import ValidationConfig, load_validation_config

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_server(config: ValidationConfig | None = None) -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    from fieldcheck.server.app import create_app

    if config is None:
        config = load_validation_config()
    configure_logging(config.log_level)

    logger.info(f"Serving rules from {config.rules_file} on {config.host}:{config.port}")
    uvicorn.run(
        create_app(config=config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
