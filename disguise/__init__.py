"""Disguise: asynchronous skin resolution and disguise composition.

Resolves a player disguise (name, skin, entity shape) by fetching skin
data from interchangeable identity services and assembling an immutable
Disguise once every pending lookup has settled.
"""

from disguise.entity import Entity, EntityBuilder, EntityType
from disguise.models import Disguise, DisguiseBuilder
from disguise.providers import (
    MINESKIN,
    MINETOOLS,
    MOJANG,
    Context,
    MalformedResponseError,
    SkinAPI,
    SkinLookupError,
    ValueContext,
)
from disguise.skin import Skin

__all__ = [
    "Disguise",
    "DisguiseBuilder",
    "Skin",
    "Entity",
    "EntityBuilder",
    "EntityType",
    # Providers
    "SkinAPI",
    "Context",
    "ValueContext",
    "MOJANG",
    "MINETOOLS",
    "MINESKIN",
    # Errors
    "SkinLookupError",
    "MalformedResponseError",
]
