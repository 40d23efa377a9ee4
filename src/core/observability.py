"""Logfire and standard logging setup for Genesis processes."""

import logging

import logfire

from src.core.config import Settings


def configure_observability(settings: Settings) -> None:
    """
    Configure Logfire and the root ``genesis`` logger.

    Spans are only shipped when a Logfire token is configured.
    """
    logfire.configure(
        token=settings.logfire_token or None,
        service_name=settings.logfire_service_name,
        environment=settings.logfire_environment,
        send_to_logfire="if-token-present",
        console=None if settings.logfire_console else False
    )

    logging.getLogger("genesis").setLevel(getattr(logging, settings.log_level))

    logfire.info(
        "Observability configured",
        app=settings.app_name,
        environment=settings.environment,
        version=settings.app_version
    )
