"""Observability: structured logging via structlog."""

from disguise.observability.logging import SecretRedactor, get_logger, setup_logging

__all__ = ["SecretRedactor", "get_logger", "setup_logging"]
