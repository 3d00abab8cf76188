"""Async client SDK for the PaySimple payment-processing API."""

import logging

from paysimple.client import PaySimpleClient
from paysimple.config import Environment, Settings
from paysimple.config import settings as default_settings
from paysimple.errors import (
    AggregateFailure,
    ConfigurationError,
    DeserializationError,
    PaySimpleError,
    RemoteError,
    TransportError,
    ValidationError,
    ValidationFailed,
)
from paysimple.validation.policy import ValidationPolicy

__version__ = "0.1.0"


def configure_logging(level: str | None = None) -> None:
    """Send SDK logs to stderr at ``level`` (defaults to PAYSIMPLE_LOG_LEVEL)."""
    level = level or default_settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


__all__ = [
    "AggregateFailure",
    "ConfigurationError",
    "DeserializationError",
    "Environment",
    "PaySimpleClient",
    "PaySimpleError",
    "RemoteError",
    "Settings",
    "TransportError",
    "ValidationError",
    "ValidationFailed",
    "ValidationPolicy",
    "configure_logging",
]
