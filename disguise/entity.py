"""Entity descriptors: the shape a disguised player is shown as."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntityType(str, Enum):
    """Entity kinds a player can be disguised as."""

    PLAYER = "player"
    ZOMBIE = "zombie"
    SKELETON = "skeleton"
    CREEPER = "creeper"
    SPIDER = "spider"
    ENDERMAN = "enderman"
    VILLAGER = "villager"
    IRON_GOLEM = "iron_golem"
    COW = "cow"
    PIG = "pig"
    SHEEP = "sheep"
    CHICKEN = "chicken"
    WOLF = "wolf"
    CAT = "cat"
    ARMOR_STAND = "armor_stand"


class Entity(BaseModel):
    """Immutable entity descriptor."""

    model_config = ConfigDict(frozen=True)

    type: EntityType | None = Field(default=None, description="Entity kind")

    def is_valid(self) -> bool:
        return self.type is not None


class EntityBuilder:
    """Mutable builder for Entity descriptors."""

    def __init__(self) -> None:
        self._type: EntityType | None = None

    def set_type(self, entity_type: EntityType) -> "EntityBuilder":
        self._type = entity_type
        return self

    def build(self) -> Entity:
        return Entity(type=self._type)
