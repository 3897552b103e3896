"""
Request body builders for the Groq Python SDK.

Pure functions: no I/O, no validation. Callers check vision models, image
URLs and base64 sizes with :mod:`groqapi.images` before sending.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from .types import ChatMessage, Tool

Message = Union[Dict[str, Any], ChatMessage]

DEFAULT_TEMPERATURE = 0.7
BASE64_IMAGE_PREFIX = "data:image/jpeg;base64,"


def _message_dict(message: Message) -> Dict[str, Any]:
    if isinstance(message, ChatMessage):
        return message.to_dict()
    return message


def build_chat_request(
    model: str,
    messages: Sequence[Message],
    temperature: float = DEFAULT_TEMPERATURE,
) -> Dict[str, Any]:
    """
    Build a chat request from an already-assembled conversation.

    Args:
        model: Model ID to use
        messages: Ordered conversation history
        temperature: Sampling temperature

    Returns:
        Request body with ``model``, ``messages`` and ``temperature``
    """
    return {
        "model": model,
        "messages": [_message_dict(m) for m in messages],
        "temperature": temperature,
    }


def build_simple_chat_request(
    model: str,
    user_message: str,
    system_message: Optional[str] = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> Dict[str, Any]:
    """
    Build a chat request from a user message and an optional system message.

    The system message, when given, comes first.
    """
    messages: List[Dict[str, Any]] = []
    if system_message is not None:
        messages.append({"role": "system", "content": system_message})
    messages.append({"role": "user", "content": user_message})
    return build_chat_request(model, messages, temperature)


def _build_vision_request(
    url: str,
    prompt: str,
    model: str,
    temperature: Optional[float],
) -> Dict[str, Any]:
    request_data: Dict[str, Any] = {
        "model": model,
        "messages": [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "image_url", "image_url": {"url": url}},
                ],
            }
        ],
    }
    if temperature is not None:
        request_data["temperature"] = temperature
    return request_data


def build_vision_request_with_url(
    image_url: str,
    prompt: str,
    model: str,
    temperature: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Build a vision request referencing a remote image.

    Args:
        image_url: URL of the image, used verbatim
        prompt: Text prompt sent alongside the image
        model: Vision model to use
        temperature: Sampling temperature, omitted when None

    Returns:
        Request body with a single two-part user message
    """
    return _build_vision_request(image_url, prompt, model, temperature)


def build_vision_request_with_base64(
    base64_image: str,
    prompt: str,
    model: str,
    temperature: Optional[float] = None,
) -> Dict[str, Any]:
    """Build a vision request embedding a base64-encoded JPEG image."""
    return _build_vision_request(
        f"{BASE64_IMAGE_PREFIX}{base64_image}", prompt, model, temperature
    )


def build_tools_request(
    model: str,
    messages: Sequence[Message],
    tools: Sequence[Tool],
    temperature: float = DEFAULT_TEMPERATURE,
) -> Dict[str, Any]:
    """
    Build a chat request that offers tools to the model.

    Tool choice is left to the model (``"auto"``).
    """
    return {
        "model": model,
        "messages": [_message_dict(m) for m in messages],
        "tools": [tool.to_dict() for tool in tools],
        "tool_choice": "auto",
        "temperature": temperature,
    }


def build_tool_response_message(
    tool_call_id: str,
    function_name: str,
    function_result: str,
) -> Dict[str, Any]:
    """Build the ``tool`` message answering the tool call ``tool_call_id``."""
    return {
        "tool_call_id": tool_call_id,
        "role": "tool",
        "name": function_name,
        "content": function_result,
    }


def _first_choice(response: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not response:
        return None
    choices = response.get("choices")
    if not choices:
        return None
    return choices[0]


def extract_content_from_completion(response: Optional[Dict[str, Any]]) -> Optional[str]:
    """Return the first choice's message content, or None."""
    choice = _first_choice(response)
    if choice is None:
        return None
    return (choice.get("message") or {}).get("content")


def extract_content_from_chunk(chunk: Optional[Dict[str, Any]]) -> Optional[str]:
    """Return the first choice's delta content of a stream chunk, or None."""
    choice = _first_choice(chunk)
    if choice is None:
        return None
    return (choice.get("delta") or {}).get("content")
