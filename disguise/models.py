"""Disguise value object and its builder.

Usage:
    disguise = await (
        Disguise.builder()
        .set_name("Notch")
        .set_skin(UUID("069a79f4-44e9-4726-a5be-fca90e38aaf5"))
        .set_entity_type(EntityType.ZOMBIE)
        .build()
    )
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from disguise.entity import Entity, EntityBuilder, EntityType
from disguise.observability.logging import get_logger
from disguise.providers.base import Context, SkinAPI
from disguise.providers.builtin import MOJANG
from disguise.skin import Skin

logger = get_logger(__name__)

V = TypeVar("V")


class Disguise(BaseModel):
    """Name, skin and entity shown in place of a player's real identity."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Replacement display name")
    skin: Skin | None = Field(default=None, description="Replacement skin")
    entity: Entity | None = Field(default=None, description="Replacement entity")

    @classmethod
    def builder(cls) -> "DisguiseBuilder":
        """Return a new builder."""
        return DisguiseBuilder()

    def is_empty(self) -> bool:
        """Whether the disguise changes nothing."""
        return not self.has_name() and not self.has_skin() and not self.has_entity()

    def has_name(self) -> bool:
        return self.name is not None and self.name != ""

    def has_skin(self) -> bool:
        return self.skin is not None and self.skin.is_valid()

    def has_entity(self) -> bool:
        return self.entity is not None and self.entity.is_valid()

    @property
    def texture(self) -> str | None:
        """Texture of the replacement skin, if any."""
        if self.skin is None:
            return None
        return self.skin.texture

    @property
    def signature(self) -> str | None:
        """Signature of the replacement skin, if any."""
        if self.skin is None:
            return None
        return self.skin.signature


def _discard(future: "asyncio.Future[Skin]") -> None:
    """Retrieve the outcome of a superseded lookup so it is never unobserved."""
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.debug("superseded_skin_lookup_failed", error=str(exc))


class DisguiseBuilder:
    """Mutable, single-owner accumulator for a Disguise.

    Skin setters are last-write-wins: a superseded lookup keeps running
    but its result is never used. Provider-backed setters start the lookup
    right away, so they must be called while an event loop is running.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._entity: Entity | None = None
        self._skin: Skin | None = None
        self._pending: asyncio.Future[Skin] | None = None

    def set_name(self, name: str | None) -> "DisguiseBuilder":
        """Set the replacement name. An empty string is stored as-is."""
        self._name = name
        return self

    def set_skin(self, uuid: UUID) -> "DisguiseBuilder":
        """Look up the skin of a player UUID on the Mojang session server."""
        return self.set_skin_from(MOJANG, uuid)

    def set_skin_from(self, api: SkinAPI[V], value: V) -> "DisguiseBuilder":
        """Look up a skin with the given provider."""
        self._set_pending(api.of(value))
        return self

    def set_skin_context(self, api: SkinAPI[V], context: Context[V]) -> "DisguiseBuilder":
        """Look up a skin with the given provider and context."""
        self._set_pending(api.of_context(context))
        return self

    def set_textures(self, texture: str | None, signature: str | None) -> "DisguiseBuilder":
        """Use a known texture/signature pair without any lookup."""
        return self.set_skin_data(Skin(texture=texture, signature=signature))

    def set_skin_data(self, skin: Skin | None) -> "DisguiseBuilder":
        """Use a known skin without any lookup."""
        self._supersede()
        self._skin = skin
        return self

    def set_entity(self, entity: Entity | None) -> "DisguiseBuilder":
        self._entity = entity
        return self

    def configure_entity(
        self, configure: Callable[[EntityBuilder], EntityBuilder]
    ) -> "DisguiseBuilder":
        """Build the entity by applying configure to a fresh EntityBuilder."""
        self._entity = configure(EntityBuilder()).build()
        return self

    def set_entity_type(self, entity_type: EntityType) -> "DisguiseBuilder":
        return self.configure_entity(lambda builder: builder.set_type(entity_type))

    def build(self) -> Awaitable[Disguise]:
        """Finalize the disguise once the pending skin lookup settles.

        The pending lookup is captured now; name and entity are read when
        it resolves. If no lookup is pending the returned awaitable
        completes without suspending. A failed lookup fails the build with
        the same exception.
        """
        return self._finalize(self._pending, self._skin)

    async def _finalize(
        self, pending: "asyncio.Future[Skin] | None", skin: Skin | None
    ) -> Disguise:
        if pending is not None:
            skin = await pending
        return Disguise(name=self._name, skin=skin, entity=self._entity)

    def _set_pending(self, future: "asyncio.Future[Skin]") -> None:
        self._supersede()
        self._skin = None
        self._pending = future

    def _supersede(self) -> None:
        if self._pending is not None:
            self._pending.add_done_callback(_discard)
            self._pending = None
