"""
Tests for response decoding, SSE parsing and transport behavior.
"""
import httpx
import pytest

from groqapi import GroqConfig
from groqapi.exceptions import (
    GroqAPIError,
    GroqAuthenticationError,
    GroqClientClosedError,
    GroqConnectionError,
    GroqNotFoundError,
    GroqRateLimitError,
    GroqResponseError,
    GroqServerError,
    GroqStreamError,
    GroqTimeoutError,
)
from groqapi.transport import AsyncTransport, BaseTransport, decode_response, is_sse_done, parse_sse_line

from conftest import API_KEY, BASE_URL, FakeGroqAPI


class TestDecodeResponse:
    """Tests for the error-decoding contract."""

    def test_success_returns_body_unchanged(self):
        body = '{"id": "x", "choices": [], "nested": {"a": [1, 2]}}'
        assert decode_response(200, body) == {"id": "x", "choices": [], "nested": {"a": [1, 2]}}

    def test_null_error_field_on_success_is_not_an_error(self):
        body = '{"error": null, "choices": []}'
        assert decode_response(200, body) == {"error": None, "choices": []}

    def test_embedded_error_on_success_status(self):
        body = '{"error": {"message": "model overloaded", "type": "server_error", "code": "overloaded"}}'

        with pytest.raises(GroqAPIError) as exc_info:
            decode_response(200, body)

        error = exc_info.value
        assert "model overloaded" in str(error)
        assert error.message == "API error: model overloaded"
        assert error.status_code == 200
        assert error.error_type == "server_error"
        assert error.error_code == "overloaded"

    def test_embedded_error_without_message(self):
        with pytest.raises(GroqAPIError, match="Unknown error"):
            decode_response(400, '{"error": {}}')

    @pytest.mark.parametrize(
        "status_code, exc_type",
        [
            (401, GroqAuthenticationError),
            (404, GroqNotFoundError),
            (429, GroqRateLimitError),
            (503, GroqServerError),
            (400, GroqAPIError),
        ],
    )
    def test_embedded_error_maps_status(self, status_code, exc_type):
        body = '{"error": {"message": "nope", "type": "invalid_request_error"}}'

        with pytest.raises(exc_type) as exc_info:
            decode_response(status_code, body)

        assert exc_info.value.status_code == status_code
        assert "nope" in exc_info.value.message

    def test_numeric_error_code_becomes_text(self):
        with pytest.raises(GroqAPIError) as exc_info:
            decode_response(400, '{"error": {"message": "bad", "code": 42}}')
        assert exc_info.value.error_code == "42"

    def test_failure_status_without_error_object(self):
        with pytest.raises(GroqServerError) as exc_info:
            decode_response(502, "Bad Gateway")

        assert exc_info.value.message == "API request failed: Bad Gateway"
        assert exc_info.value.status_code == 502

    def test_success_with_invalid_json(self):
        with pytest.raises(GroqResponseError):
            decode_response(200, "<html>oops</html>")

    def test_success_with_non_object_json(self):
        with pytest.raises(GroqResponseError):
            decode_response(200, "[1, 2]")

    def test_empty_body(self):
        assert decode_response(204, "") == {}


class TestSSEParsing:
    def test_data_line(self):
        assert parse_sse_line('data: {"a": 1}') == {"a": 1}

    def test_non_data_lines_are_ignored(self):
        assert parse_sse_line("not-data: ignored") is None
        assert parse_sse_line("") is None
        assert parse_sse_line(": keep-alive") is None

    def test_done_sentinel(self):
        assert is_sse_done("data: [DONE]")
        assert not is_sse_done('data: {"a": 1}')

    def test_malformed_data_line(self):
        with pytest.raises(GroqStreamError):
            parse_sse_line("data: {not json")


@pytest.fixture
def transport(fake_api):
    config = GroqConfig(api_key=API_KEY, base_url=BASE_URL)
    http_client = httpx.Client(transport=httpx.MockTransport(fake_api))
    transport = BaseTransport(config, http_client=http_client)
    yield transport
    transport.close()


class TestBaseTransport:
    def test_auth_header_and_url(self, transport, fake_api: FakeGroqAPI):
        fake_api.add_json({"object": "list", "data": []})

        transport.get("/models")

        request = fake_api.requests[0]
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        assert str(request.url) == f"{BASE_URL}/models"

    def test_stream_yields_data_fragments_until_done(self, transport, fake_api):
        fake_api.add_text('data: {"a":1}\ndata: [DONE]\nnot-data: ignored\n')

        fragments = list(transport.stream("/chat/completions", {"model": "m"}))

        assert fragments == [{"a": 1}]

    def test_stream_ignores_lines_after_done(self, transport, fake_api):
        fake_api.add_text('event: ping\n\ndata: {"a":1}\n\ndata: [DONE]\n\ndata: {"b":2}\n')

        assert list(transport.stream("/chat/completions", {})) == [{"a": 1}]

    def test_stream_forces_stream_flag_on_a_copy(self, transport, fake_api):
        fake_api.add_text("data: [DONE]\n")
        request_data = {"model": "m", "stream": False}

        list(transport.stream("/chat/completions", request_data))

        assert fake_api.json_body()["stream"] is True
        assert request_data["stream"] is False

    def test_stream_is_lazy(self, transport, fake_api):
        fake_api.add_text("data: [DONE]\n")

        stream = transport.stream("/chat/completions", {})

        assert fake_api.requests == []
        list(stream)
        assert len(fake_api.requests) == 1

    def test_stream_error_status(self, transport, fake_api):
        fake_api.add_json({"error": {"message": "slow down", "type": "rate_limit"}}, status_code=429)

        with pytest.raises(GroqRateLimitError, match="slow down"):
            list(transport.stream("/chat/completions", {}))

    def test_timeout_is_mapped(self, transport, fake_api):
        fake_api.add_error(httpx.ReadTimeout("read timed out"))

        with pytest.raises(GroqTimeoutError):
            transport.get("/models")

    def test_connect_error_is_mapped(self, transport, fake_api):
        fake_api.add_error(httpx.ConnectError("connection refused"))

        with pytest.raises(GroqConnectionError):
            transport.post("/chat/completions", {})

    def test_closed_transport_refuses_calls(self, transport, fake_api):
        transport.close()

        assert transport.closed
        with pytest.raises(GroqClientClosedError):
            transport.get("/models")
        with pytest.raises(GroqClientClosedError):
            transport.stream("/chat/completions", {})
        assert fake_api.requests == []

    def test_close_is_idempotent(self, transport):
        transport.close()
        transport.close()
        assert transport.closed

    def test_stream_opened_before_close_fails_on_iteration(self, transport, fake_api):
        fake_api.add_text("data: [DONE]\n\n")
        stream = transport.stream("/chat/completions", {})

        transport.close()

        with pytest.raises(GroqClientClosedError):
            list(stream)
        assert fake_api.requests == []


@pytest.fixture
async def async_transport(fake_api):
    config = GroqConfig(api_key=API_KEY, base_url=BASE_URL)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api))
    transport = AsyncTransport(config, http_client=http_client)
    yield transport
    await transport.close()


class TestAsyncTransport:
    @pytest.mark.asyncio
    async def test_stream_yields_data_fragments(self, async_transport, fake_api):
        fake_api.add_text('data: {"id": "1"}\n\ndata: [DONE]\n\n')

        fragments = [f async for f in async_transport.stream("/chat/completions", {})]

        assert fragments == [{"id": "1"}]

    @pytest.mark.asyncio
    async def test_stream_opened_before_close_fails_on_iteration(self, async_transport, fake_api):
        fake_api.add_text("data: [DONE]\n\n")
        stream = async_transport.stream("/chat/completions", {})

        await async_transport.close()

        with pytest.raises(GroqClientClosedError):
            [f async for f in stream]
        assert fake_api.requests == []
