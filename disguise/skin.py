"""Skin value type: a texture/signature pair."""

from pydantic import BaseModel, ConfigDict, Field


class Skin(BaseModel):
    """Visual appearance of a player.

    Missing data is represented by absent values rather than errors: a
    skin with no texture or no signature is simply not valid.
    """

    model_config = ConfigDict(frozen=True)

    texture: str | None = Field(default=None, description="Base64 texture payload")
    signature: str | None = Field(default=None, description="Signature of the texture payload")

    @classmethod
    def empty(cls) -> "Skin":
        """Return a skin with neither texture nor signature."""
        return cls()

    def is_valid(self) -> bool:
        """Whether both texture and signature are present and non-empty."""
        return bool(self.texture) and bool(self.signature)
