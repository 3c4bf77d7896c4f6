"""Bootstrap helper for scripts and notebooks.

Example usage:

    from disguise.bootstrap import bootstrap

    settings = bootstrap(log_level="DEBUG")
    disguise = await Disguise.builder().set_skin(player_uuid).build()
"""

from disguise.config import Settings, get_settings
from disguise.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def bootstrap(log_level: str | None = None) -> Settings:
    """Load settings and configure logging from them.

    Args:
        log_level: Override the configured log level

    Returns:
        The loaded Settings
    """
    settings = get_settings()
    logging_config = settings.observability.logging

    setup_logging(
        level=log_level or logging_config.level,
        format=logging_config.format,
        redact_secrets=logging_config.redact_secrets,
    )

    logger.info(
        "disguise_bootstrapped",
        app_name=settings.app_name,
        timeout=settings.http.timeout,
    )
    return settings
