# src/htmlwalker/model.py
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from htmlwalker.managers.config_manager import config_manager

DEFAULT_ACCEPT = "text/html"
DEFAULT_CACHE_NAME = "rest-calls"


class HttpSettings(BaseModel):
    """Options for the HTTP client a loader fetches remote documents with."""
    timeout: float = 30.0
    user_agent: str = "htmlwalker/0.1"
    accept: str = DEFAULT_ACCEPT

    @field_validator('timeout')
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @classmethod
    def from_config(cls) -> "HttpSettings":
        """Builds the settings from the 'http' section of the configuration."""
        section = config_manager.get_section("http")
        return cls(**{k: v for k, v in section.items() if v is not None})


class CachedResponse(BaseModel):
    """A response body stored in the local cache."""
    key: str
    url: str
    accept: str = DEFAULT_ACCEPT
    status_code: int = 200
    body: str
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
