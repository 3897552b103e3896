"""
Resource APIs of the Groq client.

Provides chat, audio, vision, models and tool-calling endpoints grouped the
way OpenAI-style SDKs group them. Every operation returns the parsed JSON
body of the response.
"""

from typing import IO, Any, Dict, Iterator, List, Optional, Sequence, Union

from .builders import (
    build_chat_request,
    build_simple_chat_request,
    build_tools_request,
    build_vision_request_with_base64,
    build_vision_request_with_url,
    extract_content_from_chunk,
    extract_content_from_completion,
)
from .config import (
    CHAT_COMPLETIONS_ENDPOINT,
    MODELS_ENDPOINT,
    TRANSCRIPTIONS_ENDPOINT,
    TRANSLATIONS_ENDPOINT,
    VISION_MODEL_90B,
)
from .exceptions import GroqToolConversationError
from .images import (
    encode_image_file,
    validate_base64_size,
    validate_image_url,
    validate_vision_model,
)
from .tools import first_choice_message, get_tool_calls, match_tool_calls
from .transport import BaseTransport
from .types import Tool

AudioFile = Union[bytes, IO[bytes]]


def audio_form(
    model: str,
    prompt: Optional[str] = None,
    response_format: Optional[str] = "json",
    language: Optional[str] = None,
    temperature: Optional[float] = None,
) -> Dict[str, str]:
    """Multipart form fields for an audio request; None values are omitted."""
    fields = {
        "model": model,
        "prompt": prompt,
        "response_format": response_format,
        "language": language,
        "temperature": None if temperature is None else str(temperature),
    }
    return {key: value for key, value in fields.items() if value is not None}


def audio_files(file: AudioFile, filename: str) -> Dict[str, Any]:
    content = file if isinstance(file, bytes) else file.read()
    return {"file": (filename, content)}


def tool_conversation_error(e: Exception) -> GroqToolConversationError:
    return GroqToolConversationError(f"Error in tool conversation: {e}")


class ChatCompletions:
    """Chat completions API."""

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport

    def create(self, request_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a chat completion.

        Args:
            request_data: Request body, e.g. from ``build_chat_request``

        Returns:
            Parsed JSON response
        """
        return self.transport.post(CHAT_COMPLETIONS_ENDPOINT, json_data=request_data)

    def create_stream(self, request_data: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
        """
        Create a streaming chat completion.

        ``stream`` is forced to true. The returned iterator yields one parsed
        chunk per ``data:`` line and can be consumed once.
        """
        return self.transport.stream(CHAT_COMPLETIONS_ENDPOINT, json_data=request_data)


class Chat:
    """Chat API with shorthand helpers for single-turn conversations."""

    def __init__(self, transport: BaseTransport) -> None:
        self.completions = ChatCompletions(transport)

    def send(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> Dict[str, Any]:
        """Send a user message (and optional system message)."""
        request_data = build_simple_chat_request(model, user_message, system_message, temperature)
        return self.completions.create(request_data)

    def text(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> str:
        """Like :meth:`send` but return only the reply text."""
        response = self.send(model, user_message, system_message, temperature)
        return extract_content_from_completion(response) or ""

    def send_stream(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> Iterator[Dict[str, Any]]:
        request_data = build_simple_chat_request(model, user_message, system_message, temperature)
        return self.completions.create_stream(request_data)

    def text_stream(
        self,
        model: str,
        user_message: str,
        system_message: Optional[str] = None,
        temperature: float = 0.7,
    ) -> Iterator[str]:
        """Stream reply text fragments; chunks without content yield ``""``."""
        for chunk in self.send_stream(model, user_message, system_message, temperature):
            yield extract_content_from_chunk(chunk) or ""


class Transcriptions:
    """Speech-to-text API."""

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport

    def create(
        self,
        file: AudioFile,
        filename: str,
        model: str,
        prompt: Optional[str] = None,
        response_format: str = "json",
        language: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Transcribe audio.

        Args:
            file: Audio bytes or a binary file object
            filename: Name reported for the upload
            model: Model ID to use
            prompt: Optional text guiding the transcription
            response_format: Output format
            language: Optional ISO-639-1 language of the audio
            temperature: Optional sampling temperature

        Returns:
            Parsed JSON response
        """
        return self.transport.post_multipart(
            TRANSCRIPTIONS_ENDPOINT,
            data=audio_form(model, prompt, response_format, language, temperature),
            files=audio_files(file, filename),
        )


class Translations:
    """Speech-to-English-text API."""

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport

    def create(
        self,
        file: AudioFile,
        filename: str,
        model: str,
        prompt: Optional[str] = None,
        response_format: str = "json",
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Translate audio into English text."""
        return self.transport.post_multipart(
            TRANSLATIONS_ENDPOINT,
            data=audio_form(model, prompt, response_format, None, temperature),
            files=audio_files(file, filename),
        )


class Audio:
    """Audio API."""

    def __init__(self, transport: BaseTransport) -> None:
        self.transcriptions = Transcriptions(transport)
        self.translations = Translations(transport)


class Vision:
    """Vision completions on top of the chat completions endpoint."""

    def __init__(self, completions: ChatCompletions, max_base64_size_mb: int) -> None:
        self.completions = completions
        self.max_base64_size_mb = max_base64_size_mb

    def create(self, request_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a vision completion.

        Raises:
            GroqValidationError: If the request model is not vision-capable
        """
        validate_vision_model(request_data)
        return self.completions.create(request_data)

    def create_with_image_url(
        self,
        image_url: str,
        prompt: str,
        model: str = VISION_MODEL_90B,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Describe or query a remote image."""
        validate_image_url(image_url)
        return self.create(build_vision_request_with_url(image_url, prompt, model, temperature))

    def create_with_base64_image(
        self,
        image_path: str,
        prompt: str,
        model: str = VISION_MODEL_90B,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Describe or query a local image, embedded as base64.

        Raises:
            GroqFileNotFoundError: If ``image_path`` does not exist
            GroqValidationError: If the encoded image exceeds the size limit
        """
        base64_image = encode_image_file(image_path)
        validate_base64_size(base64_image, self.max_base64_size_mb)
        return self.create(build_vision_request_with_base64(base64_image, prompt, model, temperature))


class Models:
    """Models API."""

    def __init__(self, transport: BaseTransport) -> None:
        self.transport = transport

    def list(self) -> Dict[str, Any]:
        """
        List available models.

        Returns:
            Parsed JSON with a ``data`` array of model descriptors
        """
        return self.transport.get(MODELS_ENDPOINT)


class ToolsAPI:
    """Tool-calling conversations."""

    def __init__(self, completions: ChatCompletions) -> None:
        self.completions = completions

    def run_conversation(
        self,
        user_prompt: str,
        tools: Sequence[Tool],
        model: str,
        system_message: str,
    ) -> str:
        """
        Run one round of tool calling and return the final reply text.

        The first request offers ``tools``. If the model asks for tool calls,
        each matching tool's callback runs with the call's argument string,
        and the conversation including the results is sent again without
        tools. Calls naming an unknown tool are skipped.

        Raises:
            GroqToolConversationError: Wrapping any failure along the way
        """
        try:
            messages: List[Dict[str, Any]] = [
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_prompt},
            ]

            response = self.completions.create(build_tools_request(model, messages, tools))
            response_message = first_choice_message(response)
            tool_calls = get_tool_calls(response_message)

            if not tool_calls:
                return (response_message or {}).get("content") or ""

            messages.append(response_message)
            for invocation in match_tool_calls(tool_calls, tools):
                result = invocation.tool.function.execute(invocation.arguments)
                messages.append(invocation.response_message(result))

            second_response = self.completions.create(build_chat_request(model, messages))
            return extract_content_from_completion(second_response) or ""
        except Exception as e:
            raise tool_conversation_error(e) from e
