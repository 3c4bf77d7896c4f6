"""Structured logging configuration using structlog.

Provides JSON logging for production and console logging for development,
with automatic context binding and redaction of skin signatures and
credentials.
"""

import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

# Sensitive key names (O(1) lookup)
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "signature",
    "signatures",
    "secret",
    "token",
    "api_key",
    "apikey",
    "mineskin_api_key",
    "auth",
    "authorization",
    "credential",
    "credentials",
    "bearer",
})

# Texture payloads are long base64 blobs; only a prefix is logged
TRUNCATED_KEYS: frozenset[str] = frozenset({"texture", "textures"})
TRUNCATE_AT = 16


class SecretRedactor:
    """Processor that redacts signatures and credentials from log events.

    Values under sensitive keys are replaced outright; texture payloads
    are cut down to a short prefix.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        """Recursively redact a dictionary."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            key_lower = key.lower()

            if key_lower in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            elif key_lower in TRUNCATED_KEYS and isinstance(value, str):
                result[key] = self._truncate(value)
            elif isinstance(value, dict):
                result[key] = self._redact_dict(value)
            elif isinstance(value, list):
                result[key] = self._redact_list(value)
            else:
                result[key] = value

        return result

    def _redact_list(self, items: list[Any]) -> list[Any]:
        result: list[Any] = []
        for item in items:
            if isinstance(item, dict):
                result.append(self._redact_dict(item))
            elif isinstance(item, list):
                result.append(self._redact_list(item))
            else:
                result.append(item)
        return result

    @staticmethod
    def _truncate(value: str) -> str:
        if len(value) <= TRUNCATE_AT:
            return value
        return f"{value[:TRUNCATE_AT]}...({len(value)} chars)"


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_secrets: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format - "json" for production, "console" for development
        redact_secrets: Whether to redact signatures and credentials
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_secrets:
        processors.append(SecretRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    level_num = level_map.get(level.upper(), 20)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
