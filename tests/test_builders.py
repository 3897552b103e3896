"""
Tests for request builders and content extractors.
"""
from unittest.mock import MagicMock

from groqapi import ChatMessage, Tool
from groqapi.builders import (
    build_chat_request,
    build_simple_chat_request,
    build_tool_response_message,
    build_tools_request,
    build_vision_request_with_base64,
    build_vision_request_with_url,
    extract_content_from_chunk,
    extract_content_from_completion,
)

from conftest import chunk, completion


class TestChatRequests:
    """Tests for chat request builders."""

    def test_chat_request_preserves_message_order(self):
        messages = [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello"},
            {"role": "user", "content": "Bye"},
        ]

        request = build_chat_request("llama-3.3-70b-versatile", messages, temperature=0.2)

        assert set(request) == {"model", "messages", "temperature"}
        assert request["model"] == "llama-3.3-70b-versatile"
        assert request["messages"] == messages
        assert request["temperature"] == 0.2

    def test_chat_request_default_temperature(self):
        request = build_chat_request("m", [{"role": "user", "content": "Hi"}])
        assert request["temperature"] == 0.7

    def test_chat_request_accepts_typed_messages(self):
        request = build_chat_request("m", [ChatMessage(role="user", content="Hi")])
        assert request["messages"] == [{"role": "user", "content": "Hi"}]

    def test_simple_chat_request_without_system_message(self):
        request = build_simple_chat_request("m", "What is Python?")

        assert request["messages"] == [{"role": "user", "content": "What is Python?"}]

    def test_simple_chat_request_with_system_message(self):
        request = build_simple_chat_request("m", "What is Python?", "You are terse.", 0.1)

        assert len(request["messages"]) == 2
        assert request["messages"][0] == {"role": "system", "content": "You are terse."}
        assert request["messages"][1] == {"role": "user", "content": "What is Python?"}
        assert request["temperature"] == 0.1


class TestVisionRequests:
    """Tests for vision request builders."""

    def test_vision_request_with_url(self):
        url = "https://example.com/cat.jpg"

        request = build_vision_request_with_url(url, "Describe this", "llama-3.2-90b-vision-preview")

        assert request["model"] == "llama-3.2-90b-vision-preview"
        assert "temperature" not in request
        (message,) = request["messages"]
        assert message["role"] == "user"
        content = message["content"]
        assert len(content) == 2
        assert content[0] == {"type": "text", "text": "Describe this"}
        assert content[1]["type"] == "image_url"
        assert content[1]["image_url"]["url"] == url

    def test_vision_request_with_base64(self):
        request = build_vision_request_with_base64(
            "aGVsbG8=", "What is this?", "llama-3.2-11b-vision-preview", temperature=0.3
        )

        content = request["messages"][0]["content"]
        assert content[0]["text"] == "What is this?"
        assert content[1]["image_url"]["url"] == "data:image/jpeg;base64,aGVsbG8="
        assert request["temperature"] == 0.3


class TestToolRequests:
    """Tests for tool request builders."""

    def test_tools_request(self):
        callback = MagicMock(return_value="{}")
        tool = Tool.from_function(
            name="get_weather",
            description="Get the weather",
            parameters={"type": "object", "properties": {"city": {"type": "string"}}},
            execute=callback,
        )
        messages = [{"role": "user", "content": "Weather in Paris?"}]

        request = build_tools_request("m", messages, [tool])

        assert request["messages"] == messages
        assert request["tool_choice"] == "auto"
        assert request["temperature"] == 0.7
        assert request["tools"] == [
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "description": "Get the weather",
                    "parameters": {"type": "object", "properties": {"city": {"type": "string"}}},
                },
            }
        ]
        callback.assert_not_called()

    def test_tool_without_parameters_gets_empty_schema(self):
        tool = Tool.from_function("now", "Current time", execute=lambda args: "{}")
        assert tool.to_dict()["function"]["parameters"] == {
            "type": "object",
            "properties": {},
            "required": [],
        }

    def test_tool_response_message(self):
        message = build_tool_response_message("call_1", "get_weather", '{"temp": 21}')

        assert message == {
            "tool_call_id": "call_1",
            "role": "tool",
            "name": "get_weather",
            "content": '{"temp": 21}',
        }


class TestExtractors:
    """Tests for content extraction helpers."""

    def test_extract_content_from_completion(self):
        assert extract_content_from_completion(completion("Hello")) == "Hello"

    def test_extract_content_from_completion_missing(self):
        assert extract_content_from_completion(None) is None
        assert extract_content_from_completion({"choices": []}) is None
        assert extract_content_from_completion(completion(None)) is None

    def test_extract_content_from_chunk(self):
        assert extract_content_from_chunk(chunk("Hel")) == "Hel"
        assert extract_content_from_chunk(chunk(None)) is None
