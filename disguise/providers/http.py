"""HTTP+JSON fetch used by the built-in skin providers."""

from typing import Any

import httpx

from disguise.config import get_settings
from disguise.observability.logging import get_logger
from disguise.providers.base import MalformedResponseError, SkinLookupError

logger = get_logger(__name__)

# Statuses the identity services use for "no such profile"
ABSENT_STATUSES: frozenset[int] = frozenset({204, 404})


async def fetch_json(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    provider: str | None = None,
) -> dict[str, Any] | None:
    """GET a URL and parse its body as a JSON object.

    Args:
        url: Absolute URL to fetch
        headers: Extra request headers
        timeout: Request timeout in seconds (defaults to http.timeout)
        transport: Custom httpx transport, mainly for tests
        provider: Provider name attached to errors and logs

    Returns:
        The parsed object, or None when the service reports no profile

    Raises:
        SkinLookupError: On an unexpected HTTP status
        MalformedResponseError: If the body is not a JSON object
        httpx.HTTPError: On transport failures
    """
    settings = get_settings()
    request_headers = {
        "Accept": "application/json",
        "User-Agent": settings.http.user_agent,
    }
    if headers:
        request_headers.update(headers)

    logger.debug("skin_fetch_request", provider=provider, url=url)

    async with httpx.AsyncClient(
        timeout=timeout if timeout is not None else settings.http.timeout,
        transport=transport,
    ) as client:
        response = await client.get(url, headers=request_headers)

    # An empty body only means "no profile" on a successful response
    empty_success = response.is_success and not response.content.strip()
    if response.status_code in ABSENT_STATUSES or empty_success:
        logger.debug(
            "skin_fetch_absent",
            provider=provider,
            url=url,
            status_code=response.status_code,
        )
        return None

    if not response.is_success:
        logger.error(
            "skin_fetch_error",
            provider=provider,
            url=url,
            status_code=response.status_code,
            error=response.text,
        )
        raise SkinLookupError(
            f"{provider or 'skin'} lookup failed ({response.status_code})",
            provider=provider,
            url=url,
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise MalformedResponseError(
            "Response body is not valid JSON",
            provider=provider,
            url=url,
            status_code=response.status_code,
        ) from exc

    if data is None:
        return None
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}",
            provider=provider,
            url=url,
            status_code=response.status_code,
        )
    return data
