"""
Main client for the Groq Python SDK.
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from .api import Audio, Chat, Models, ToolsAPI, Vision
from .config import GroqConfig
from .exceptions import GroqConfigError
from .transport import BaseTransport


def resolve_config(
    api_key: Optional[str] = None,
    config: Optional[GroqConfig] = None,
    **overrides,
) -> GroqConfig:
    """
    Pick the configuration for a new client.

    An explicit ``config`` wins; otherwise ``api_key`` and ``overrides`` are
    combined with ``GROQ_API_KEY`` / ``GROQ_BASE_URL`` from the environment.
    """
    if config is not None:
        return config
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        return GroqConfig.from_env(api_key=api_key, **overrides)
    except ValidationError as e:
        raise GroqConfigError(f"Invalid configuration: {e}") from e


class Groq:
    """
    Main Groq client.

    Example:
        >>> with Groq(api_key="gsk_...") as client:
        ...     reply = client.chat.text(
        ...         model="llama-3.3-70b-versatile",
        ...         user_message="Hello!",
        ...     )
        >>> print(reply)

    Attributes:
        chat: Chat completions, plain and streaming
        audio: Transcriptions and translations
        vision: Vision completions
        models: Model listing
        tools: Tool-calling conversations
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[GroqConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the Groq client.

        Args:
            api_key: API key (default: ``GROQ_API_KEY``)
            base_url: API root (default: ``GROQ_BASE_URL`` or the public host)
            timeout: Request timeout in seconds
            config: Complete configuration, overriding the other arguments
            http_client: Custom httpx client; closed together with this client
        """
        self.config = resolve_config(api_key, config, base_url=base_url, timeout=timeout)
        self.transport = BaseTransport(self.config, http_client=http_client)

        self.chat = Chat(self.transport)
        self.audio = Audio(self.transport)
        self.vision = Vision(self.chat.completions, self.config.max_base64_size_mb)
        self.models = Models(self.transport)
        self.tools = ToolsAPI(self.chat.completions)

    @property
    def closed(self) -> bool:
        return self.transport.closed

    def close(self) -> None:
        """Close the client connection."""
        self.transport.close()

    def __enter__(self) -> "Groq":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def create_client(
    api_key: Optional[str] = None,
    config: Optional[GroqConfig] = None,
    http_client: Optional[httpx.Client] = None,
) -> Groq:
    """
    Create a Groq client.

    Args:
        api_key: API key; read from the environment when omitted
        config: Complete configuration
        http_client: Custom httpx client

    Returns:
        Groq
    """
    return Groq(api_key=api_key, config=config, http_client=http_client)
