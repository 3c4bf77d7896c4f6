"""Skin provider configuration models."""

from pydantic import BaseModel, Field, SecretStr, field_validator


class ProvidersConfig(BaseModel):
    """URL templates and credentials for the built-in skin providers.

    Templates must contain an ``{id}`` placeholder.
    """

    mojang_url: str = Field(
        default="https://sessionserver.mojang.com/session/minecraft/profile/{id}?unsigned=false",
        description="Mojang session server profile URL",
    )
    minetools_url: str = Field(
        default="https://api.minetools.eu/profile/{id}",
        description="MineTools profile URL",
    )
    mineskin_url: str = Field(
        default="https://api.mineskin.org/get/uuid/{id}",
        description="MineSkin texture URL",
    )
    mineskin_api_key: SecretStr | None = Field(
        default=None,
        description="MineSkin API key (prefer env var)",
    )

    @field_validator("mojang_url", "minetools_url", "mineskin_url")
    @classmethod
    def require_placeholder(cls, value: str) -> str:
        if "{id}" not in value:
            raise ValueError("URL template must contain an {id} placeholder")
        return value
