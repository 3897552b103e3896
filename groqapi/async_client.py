"""
Async client for the Groq Python SDK.
"""

import inspect
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence

import httpx

from .api import AudioFile, audio_files, audio_form, tool_conversation_error
from .builders import (
    build_chat_request,
    build_simple_chat_request,
    build_tools_request,
    build_vision_request_with_base64,
    build_vision_request_with_url,
    extract_content_from_chunk,
    extract_content_from_completion,
)
from .client import resolve_config
from .config import (
    CHAT_COMPLETIONS_ENDPOINT,
    MODELS_ENDPOINT,
    TRANSCRIPTIONS_ENDPOINT,
    TRANSLATIONS_ENDPOINT,
    VISION_MODEL_90B,
    GroqConfig,
)
from .images import (
    encode_image_file,
    validate_base64_size,
    validate_image_url,
    validate_vision_model,
)
from .tools import first_choice_message, get_tool_calls, match_tool_calls
from .transport import AsyncTransport
from .types import Tool


class AsyncChatCompletions:
    """Async chat completions API."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.transport = transport

    async def create(self, request_data: Dict[str, Any]) -> Dict[str, Any]:
        """Create an async chat completion."""
        return await self.transport.post(CHAT_COMPLETIONS_ENDPOINT, json_data=request_data)

    def create_stream(self, request_data: Dict[str, Any]) -> AsyncIterator[Dict[str, Any]]:
        """Create an async streaming chat completion."""
        return self.transport.stream(CHAT_COMPLETIONS_ENDPOINT, json_data=request_data)


class AsyncChat:
    """Async chat API."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.completions = AsyncChatCompletions(transport)

    async def send(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> Dict[str, Any]:
        request_data = build_simple_chat_request(model, user_message, system_message, temperature)
        return await self.completions.create(request_data)

    async def text(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> str:
        response = await self.send(model, user_message, system_message, temperature)
        return extract_content_from_completion(response) or ""

    def send_stream(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> AsyncIterator[Dict[str, Any]]:
        request_data = build_simple_chat_request(model, user_message, system_message, temperature)
        return self.completions.create_stream(request_data)

    async def text_stream(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> AsyncIterator[str]:
        async for chunk in self.send_stream(model, user_message, system_message, temperature):
            yield extract_content_from_chunk(chunk) or ""


class AsyncTranscriptions:
    """Async speech-to-text API."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.transport = transport

    async def create(
        self,
        file: AudioFile,
        filename: str,
        model: str,
        prompt: Optional[str] = None,
        response_format: str = "json",
        language: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Async transcribe audio."""
        return await self.transport.post_multipart(
            TRANSCRIPTIONS_ENDPOINT,
            data=audio_form(model, prompt, response_format, language, temperature),
            files=audio_files(file, filename),
        )


class AsyncTranslations:
    """Async speech-to-English-text API."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.transport = transport

    async def create(
        self,
        file: AudioFile,
        filename: str,
        model: str,
        prompt: Optional[str] = None,
        response_format: str = "json",
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Async translate audio into English text."""
        return await self.transport.post_multipart(
            TRANSLATIONS_ENDPOINT,
            data=audio_form(model, prompt, response_format, None, temperature),
            files=audio_files(file, filename),
        )


class AsyncAudio:
    """Async audio API."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.transcriptions = AsyncTranscriptions(transport)
        self.translations = AsyncTranslations(transport)


class AsyncVision:
    """Async vision completions."""

    def __init__(self, completions: AsyncChatCompletions, max_base64_size_mb: int) -> None:
        self.completions = completions
        self.max_base64_size_mb = max_base64_size_mb

    async def create(self, request_data: Dict[str, Any]) -> Dict[str, Any]:
        validate_vision_model(request_data)
        return await self.completions.create(request_data)

    async def create_with_image_url(
        self,
        image_url: str,
        prompt: str,
        model: str = VISION_MODEL_90B,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        validate_image_url(image_url)
        return await self.create(
            build_vision_request_with_url(image_url, prompt, model, temperature)
        )

    async def create_with_base64_image(
        self,
        image_path: str,
        prompt: str,
        model: str = VISION_MODEL_90B,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        base64_image = encode_image_file(image_path)
        validate_base64_size(base64_image, self.max_base64_size_mb)
        return await self.create(
            build_vision_request_with_base64(base64_image, prompt, model, temperature)
        )


class AsyncModels:
    """Async models API."""

    def __init__(self, transport: AsyncTransport) -> None:
        self.transport = transport

    async def list(self) -> Dict[str, Any]:
        """Async list available models."""
        return await self.transport.get(MODELS_ENDPOINT)


class AsyncToolsAPI:
    """
    Async tool-calling conversations.

    Tool callbacks may be plain functions or coroutine functions.
    """

    def __init__(self, completions: AsyncChatCompletions) -> None:
        self.completions = completions

    async def run_conversation(
        self,
        user_prompt: str,
        tools: Sequence[Tool],
        model: str,
        system_message: str,
    ) -> str:
        """Async version of :meth:`groqapi.api.ToolsAPI.run_conversation`."""
        try:
            messages: List[Dict[str, Any]] = [
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_prompt},
            ]

            response = await self.completions.create(build_tools_request(model, messages, tools))
            response_message = first_choice_message(response)
            tool_calls = get_tool_calls(response_message)

            if not tool_calls:
                return (response_message or {}).get("content") or ""

            messages.append(response_message)
            for invocation in match_tool_calls(tool_calls, tools):
                result = invocation.tool.function.execute(invocation.arguments)
                if inspect.isawaitable(result):
                    result = await result
                messages.append(invocation.response_message(result))

            second_response = await self.completions.create(build_chat_request(model, messages))
            return extract_content_from_completion(second_response) or ""
        except Exception as e:
            raise tool_conversation_error(e) from e


class AsyncGroq:
    """
    Async Groq client.

    Example:
        >>> async with AsyncGroq(api_key="gsk_...") as client:
        ...     reply = await client.chat.text(
        ...         model="llama-3.3-70b-versatile",
        ...         user_message="Hello!",
        ...     )
        ...     print(reply)

    Attributes:
        chat: Async chat completions, plain and streaming
        audio: Async transcriptions and translations
        vision: Async vision completions
        models: Async model listing
        tools: Async tool-calling conversations
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[GroqConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize async Groq client.

        Args:
            api_key: API key (default: ``GROQ_API_KEY``)
            base_url: API root
            timeout: Request timeout in seconds
            config: Complete configuration, overriding the other arguments
            http_client: Custom httpx async client
        """
        self.config = resolve_config(api_key, config, base_url=base_url, timeout=timeout)
        self.transport = AsyncTransport(self.config, http_client=http_client)

        self.chat = AsyncChat(self.transport)
        self.audio = AsyncAudio(self.transport)
        self.vision = AsyncVision(self.chat.completions, self.config.max_base64_size_mb)
        self.models = AsyncModels(self.transport)
        self.tools = AsyncToolsAPI(self.chat.completions)

    @property
    def closed(self) -> bool:
        return self.transport.closed

    async def close(self) -> None:
        """Close the async client connection."""
        await self.transport.close()

    async def __aenter__(self) -> "AsyncGroq":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
