"""
Pytest configuration and fixtures for groqapi tests.
"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from groqapi import AsyncGroq, Groq

API_KEY = "test-api-key"
BASE_URL = "https://api.test.local/openai/v1"


class FakeGroqAPI:
    """Scripted stand-in for the Groq API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []

    def add_json(self, payload: Any, status_code: int = 200) -> None:
        self._responses.append(httpx.Response(status_code, json=payload))

    def add_text(self, text: str, status_code: int = 200) -> None:
        self._responses.append(httpx.Response(status_code, content=text.encode()))

    def add_error(self, exc: Exception) -> None:
        self._responses.append(exc)

    def json_body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def completion(content: Optional[str], tool_calls: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """A chat completion response body."""
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "llama-3.3-70b-versatile",
        "choices": [
            {
                "index": 0,
                "message": message,
                "finish_reason": "tool_calls" if tool_calls else "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 8, "total_tokens": 18},
    }


def chunk(content: Optional[str]) -> Dict[str, Any]:
    """A streaming chunk body."""
    delta = {} if content is None else {"content": content}
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion.chunk",
        "created": 1677652288,
        "model": "llama-3.3-70b-versatile",
        "choices": [{"index": 0, "delta": delta, "finish_reason": None}],
    }


def sse_body(*fragments: Dict[str, Any]) -> str:
    lines = [f"data: {json.dumps(f)}\n\n" for f in fragments]
    lines.append("data: [DONE]\n\n")
    return "".join(lines)


@pytest.fixture
def fake_api() -> FakeGroqAPI:
    return FakeGroqAPI()


@pytest.fixture
def client(fake_api):
    """A sync client wired to the fake API."""
    http_client = httpx.Client(transport=httpx.MockTransport(fake_api))
    groq = Groq(api_key=API_KEY, base_url=BASE_URL, http_client=http_client)
    yield groq
    groq.close()


@pytest.fixture
async def async_client(fake_api):
    """An async client wired to the fake API."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api))
    groq = AsyncGroq(api_key=API_KEY, base_url=BASE_URL, http_client=http_client)
    yield groq
    await groq.close()
