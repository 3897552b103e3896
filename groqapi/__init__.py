"""
groqapi - Python client for the Groq OpenAI-compatible API.

Chat completions (plain and streaming), audio transcription and
translation, vision completions, tool calling and model listing, with both
sync and async clients.
"""

__version__ = "0.1.0"

from .async_client import AsyncGroq
from .builders import (
    build_chat_request,
    build_simple_chat_request,
    build_tool_response_message,
    build_tools_request,
    build_vision_request_with_base64,
    build_vision_request_with_url,
    extract_content_from_chunk,
    extract_content_from_completion,
)
from .client import Groq, create_client
from .config import GroqConfig
from .exceptions import (
    GroqAPIError,
    GroqAuthenticationError,
    GroqClientClosedError,
    GroqConfigError,
    GroqConnectionError,
    GroqError,
    GroqFileNotFoundError,
    GroqNotFoundError,
    GroqPermissionError,
    GroqRateLimitError,
    GroqResponseError,
    GroqServerError,
    GroqStreamError,
    GroqTimeoutError,
    GroqToolConversationError,
    GroqValidationError,
)
from .types import (
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    FunctionDefinition,
    ImageContentPart,
    Model,
    ModelList,
    TextContentPart,
    Tool,
    ToolCall,
    Transcription,
)

__all__ = [
    # Version
    "__version__",
    # Main clients
    "Groq",
    "AsyncGroq",
    "create_client",
    "GroqConfig",
    # Request builders
    "build_chat_request",
    "build_simple_chat_request",
    "build_tool_response_message",
    "build_tools_request",
    "build_vision_request_with_base64",
    "build_vision_request_with_url",
    "extract_content_from_chunk",
    "extract_content_from_completion",
    # Exceptions
    "GroqError",
    "GroqConfigError",
    "GroqConnectionError",
    "GroqTimeoutError",
    "GroqClientClosedError",
    "GroqAPIError",
    "GroqAuthenticationError",
    "GroqPermissionError",
    "GroqNotFoundError",
    "GroqRateLimitError",
    "GroqServerError",
    "GroqValidationError",
    "GroqFileNotFoundError",
    "GroqResponseError",
    "GroqStreamError",
    "GroqToolConversationError",
    # Types
    "ChatCompletion",
    "ChatCompletionChunk",
    "ChatMessage",
    "FunctionDefinition",
    "ImageContentPart",
    "Model",
    "ModelList",
    "TextContentPart",
    "Tool",
    "ToolCall",
    "Transcription",
]
