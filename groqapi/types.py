"""
Type definitions for the Groq Python SDK.

Pydantic models for requests and responses of the OpenAI-compatible API.
Client operations return plain parsed JSON; these models give typed access
via ``Model.model_validate(response)``.
"""

from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Messages
# ============================================================================


class TextContentPart(BaseModel):
    """Text part of a multi-part message."""

    type: Literal["text"] = "text"
    text: str


class ImageURL(BaseModel):
    """Location of an image: a remote URL or a ``data:`` URI."""

    url: str


class ImageContentPart(BaseModel):
    """Image part of a multi-part message."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


ContentPart = Union[TextContentPart, ImageContentPart]


class FunctionCall(BaseModel):
    """Function name and JSON-encoded arguments chosen by the model."""

    name: str
    arguments: str


class ToolCall(BaseModel):
    """A tool invocation requested by the model."""

    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


class ChatMessage(BaseModel):
    """A message in a chat conversation."""

    model_config = ConfigDict(extra="allow")

    role: Literal["system", "user", "assistant", "tool"]
    content: Optional[Union[str, List[ContentPart]]] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for a request body, dropping unset fields."""
        return self.model_dump(exclude_none=True)


# ============================================================================
# Tools
# ============================================================================


ToolCallback = Callable[[str], Union[str, Awaitable[str]]]


class FunctionDefinition(BaseModel):
    """
    A locally executable function offered to the model.

    ``execute`` receives the JSON-encoded arguments chosen by the model and
    returns a JSON-encoded result. It is never sent over the wire.
    """

    name: str
    description: str
    parameters: Dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}, "required": []}
    )
    execute: ToolCallback = Field(exclude=True, repr=False)


class Tool(BaseModel):
    """A tool definition for tool-enabled chat requests."""

    type: Literal["function"] = "function"
    function: FunctionDefinition

    @classmethod
    def from_function(
        cls,
        name: str,
        description: str,
        execute: ToolCallback,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> "Tool":
        """Shorthand for ``Tool(function=FunctionDefinition(...))``."""
        function = FunctionDefinition(
            name=name,
            description=description,
            execute=execute,
            **({"parameters": parameters} if parameters is not None else {}),
        )
        return cls(function=function)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation (without the callback)."""
        return {
            "type": self.type,
            "function": {
                "name": self.function.name,
                "description": self.function.description,
                "parameters": self.function.parameters,
            },
        }


# ============================================================================
# Responses
# ============================================================================


class ChatCompletionChoice(BaseModel):
    """A choice in a chat completion response."""

    index: int = 0
    message: ChatMessage
    finish_reason: Optional[str] = None


class ChatCompletionChunkDelta(BaseModel):
    """Delta content in a streaming chunk."""

    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None


class ChatCompletionChunkChoice(BaseModel):
    """A choice in a streaming chat completion chunk."""

    index: int = 0
    delta: ChatCompletionChunkDelta
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    """Token usage statistics."""

    model_config = ConfigDict(extra="allow")

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletion(BaseModel):
    """Chat completion response."""

    id: str
    object: Literal["chat.completion"] = "chat.completion"
    created: int
    model: str
    choices: List[ChatCompletionChoice]
    usage: Optional[Usage] = None


class ChatCompletionChunk(BaseModel):
    """Streaming chat completion chunk."""

    id: str
    object: Literal["chat.completion.chunk"] = "chat.completion.chunk"
    created: int
    model: str
    choices: List[ChatCompletionChunkChoice]


class Model(BaseModel):
    """Model information."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: Literal["model"] = "model"
    created: Optional[int] = None
    owned_by: Optional[str] = None
    active: Optional[bool] = None
    context_window: Optional[int] = None


class ModelList(BaseModel):
    """List of models."""

    object: Literal["list"] = "list"
    data: List[Model]


class Transcription(BaseModel):
    """Transcription or translation result in ``json`` response format."""

    model_config = ConfigDict(extra="allow")

    text: str
