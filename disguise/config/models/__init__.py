"""Configuration section models."""

from disguise.config.models.http import HTTPConfig
from disguise.config.models.observability import LoggingConfig, ObservabilityConfig
from disguise.config.models.providers import ProvidersConfig

__all__ = [
    "HTTPConfig",
    "LoggingConfig",
    "ObservabilityConfig",
    "ProvidersConfig",
]
