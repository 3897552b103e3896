"""
Client configuration for the Groq Python SDK.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import GroqConfigError

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_TIMEOUT = 60.0

CHAT_COMPLETIONS_ENDPOINT = "/chat/completions"
TRANSCRIPTIONS_ENDPOINT = "/audio/transcriptions"
TRANSLATIONS_ENDPOINT = "/audio/translations"
MODELS_ENDPOINT = "/models"

# Vision models
VISION_MODEL_90B = "llama-3.2-90b-vision-preview"
VISION_MODEL_11B = "llama-3.2-11b-vision-preview"

# Size limits
MAX_IMAGE_SIZE_MB = 20
MAX_BASE64_SIZE_MB = 4

API_KEY_ENV = "GROQ_API_KEY"
BASE_URL_ENV = "GROQ_BASE_URL"


class GroqConfig(BaseModel):
    """
    Immutable settings shared by every call a client makes.

    Attributes:
        api_key: Secret used for the ``Authorization: Bearer`` header
        base_url: API root that endpoint paths are appended to
        max_base64_size_mb: Upper bound for embedded base64 images
        timeout: Request timeout in seconds
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    max_base64_size_mb: int = MAX_BASE64_SIZE_MB
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("api_key")
    @classmethod
    def _check_api_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("api_key must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, **overrides) -> "GroqConfig":
        """
        Build a config from ``GROQ_API_KEY`` and ``GROQ_BASE_URL``.

        Args:
            **overrides: Fields that take precedence over the environment

        Returns:
            GroqConfig

        Raises:
            GroqConfigError: If no API key is available
        """
        api_key = overrides.pop("api_key", None) or os.environ.get(API_KEY_ENV)
        if not api_key:
            raise GroqConfigError(
                f"No API key provided. Set the {API_KEY_ENV} environment variable."
            )
        base_url: Optional[str] = overrides.pop("base_url", None) or os.environ.get(BASE_URL_ENV)
        if base_url:
            overrides["base_url"] = base_url
        return cls(api_key=api_key, **overrides)

    def full_url(self, endpoint: str) -> str:
        """Return the complete URL for an endpoint path."""
        return f"{self.base_url}{endpoint}"
