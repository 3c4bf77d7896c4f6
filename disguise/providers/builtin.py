"""Built-in skin providers.

Each provider absorbs its service's response shape:
- Mojang session server: flat ``properties`` array
- MineTools: the same array nested in a ``raw`` object
- MineSkin: a single ``data.texture`` object

An absent profile (no body, a null object, or a missing wrapper object)
resolves to an empty Skin for every provider. Any other unexpected shape
raises MalformedResponseError.
"""

from collections.abc import Awaitable, Callable
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from disguise.config import get_settings
from disguise.providers import http
from disguise.providers.base import Context, MalformedResponseError, SkinAPI
from disguise.skin import Skin

JSONFetcher = Callable[..., Awaitable[dict[str, Any] | None]]


def _fetcher(fetch: JSONFetcher | None) -> JSONFetcher:
    return fetch if fetch is not None else http.fetch_json


def _hex_id(value: UUID | str) -> str:
    return str(value).replace("-", "")


def _make_skin(texture: Any, signature: Any, provider: str) -> Skin:
    try:
        return Skin(texture=texture, signature=signature)
    except ValidationError as exc:
        raise MalformedResponseError(
            "Skin payload values must be strings", provider=provider
        ) from exc


def extract_properties_skin(obj: dict[str, Any] | None, provider: str = "mojang") -> Skin:
    """Extract a skin from a profile object with a ``properties`` array.

    Null entries are skipped and the last remaining entry wins. A null
    object yields an empty skin; an empty array yields empty strings.
    """
    if obj is None:
        return Skin.empty()

    properties = obj.get("properties")
    if not isinstance(properties, list):
        raise MalformedResponseError(
            "Profile has no properties array", provider=provider
        )

    texture: Any = ""
    signature: Any = ""
    for entry in properties:
        if entry is None:
            continue
        if not isinstance(entry, dict):
            raise MalformedResponseError(
                "Profile property is not an object", provider=provider
            )
        texture = entry.get("value")
        signature = entry.get("signature")

    return _make_skin(texture, signature, provider)


def extract_texture_skin(obj: dict[str, Any] | None, provider: str = "mineskin") -> Skin:
    """Extract a skin from a ``data.texture.{value,signature}`` object."""
    if obj is None:
        return Skin.empty()

    data = obj.get("data")
    if data is None:
        return Skin.empty()
    if not isinstance(data, dict):
        raise MalformedResponseError("'data' is not an object", provider=provider)

    texture = data.get("texture")
    if not isinstance(texture, dict):
        raise MalformedResponseError(
            "Response has no texture object", provider=provider
        )

    return _make_skin(texture.get("value"), texture.get("signature"), provider)


def mojang(fetch: JSONFetcher | None = None) -> SkinAPI[UUID]:
    """Create a provider backed by Mojang's session server."""

    async def provide(context: Context[UUID]) -> Skin:
        url = get_settings().providers.mojang_url.format(id=_hex_id(context.value()))
        obj = await _fetcher(fetch)(url, provider="mojang")
        return extract_properties_skin(obj, provider="mojang")

    return SkinAPI(provide, name="mojang")


def minetools(fetch: JSONFetcher | None = None) -> SkinAPI[UUID]:
    """Create a provider backed by the MineTools profile API."""

    async def provide(context: Context[UUID]) -> Skin:
        url = get_settings().providers.minetools_url.format(id=_hex_id(context.value()))
        obj = await _fetcher(fetch)(url, provider="minetools")
        if obj is None:
            return Skin.empty()
        raw = obj.get("raw")
        if raw is not None and not isinstance(raw, dict):
            raise MalformedResponseError("'raw' is not an object", provider="minetools")
        return extract_properties_skin(raw, provider="minetools")

    return SkinAPI(provide, name="minetools")


def mineskin(fetch: JSONFetcher | None = None) -> SkinAPI[str]:
    """Create a provider backed by the MineSkin texture API."""

    async def provide(context: Context[str]) -> Skin:
        settings = get_settings()
        url = settings.providers.mineskin_url.format(id=str(context.value()))
        headers: dict[str, str] = {}
        if settings.providers.mineskin_api_key is not None:
            api_key = settings.providers.mineskin_api_key.get_secret_value()
            headers["Authorization"] = f"Bearer {api_key}"
        obj = await _fetcher(fetch)(url, headers=headers, provider="mineskin")
        return extract_texture_skin(obj, provider="mineskin")

    return SkinAPI(provide, name="mineskin")


MOJANG: SkinAPI[UUID] = mojang()
MINETOOLS: SkinAPI[UUID] = minetools()
MINESKIN: SkinAPI[str] = mineskin()
