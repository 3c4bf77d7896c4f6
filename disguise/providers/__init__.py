"""Skin providers: the SkinAPI abstraction and the built-in services.

Built-ins cover the Mojang session server, MineTools and MineSkin.
"""

from disguise.providers.base import (
    Context,
    MalformedResponseError,
    SkinAPI,
    SkinLookupError,
    SkinProvider,
    ValueContext,
)
from disguise.providers.builtin import MINESKIN, MINETOOLS, MOJANG, mineskin, minetools, mojang

__all__ = [
    "Context",
    "ValueContext",
    "SkinAPI",
    "SkinProvider",
    # Errors
    "SkinLookupError",
    "MalformedResponseError",
    # Built-ins
    "MOJANG",
    "MINETOOLS",
    "MINESKIN",
    "mojang",
    "minetools",
    "mineskin",
]
