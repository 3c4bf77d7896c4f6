"""HTTP client configuration model."""

from pydantic import BaseModel, Field


class HTTPConfig(BaseModel):
    """Settings shared by every provider request."""

    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds",
    )
    user_agent: str = Field(
        default="disguise/0.1.0",
        description="User-Agent header sent to identity services",
    )
