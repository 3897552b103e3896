"""
Transport layer for the Groq Python SDK.

Handles authenticated HTTP communication, error decoding and SSE parsing.
"""

import json
import logging
from typing import Any, AsyncIterator, Dict, Iterator, Mapping, Optional

import httpx

from .config import GroqConfig
from .exceptions import (
    GroqClientClosedError,
    GroqConnectionError,
    GroqResponseError,
    GroqStreamError,
    GroqTimeoutError,
    raise_for_status,
)

logger = logging.getLogger(__name__)

SSE_DATA_PREFIX = "data: "
SSE_DONE = "[DONE]"


def _build_headers(api_key: str) -> Dict[str, str]:
    """Build common HTTP headers."""
    return {"Authorization": f"Bearer {api_key}"}


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def decode_response(status_code: int, body: str) -> Dict[str, Any]:
    """
    Turn a raw HTTP response into parsed JSON or an exception.

    An ``error`` object in the body wins over the status code: it is raised
    even on a 2xx response. Without one, any non-2xx status raises with the
    raw body text.
    """
    try:
        payload = json.loads(body) if body.strip() else None
    except json.JSONDecodeError:
        payload = None

    if isinstance(payload, dict) and payload.get("error") is not None:
        error = payload["error"]
        if isinstance(error, dict):
            error_message = error.get("message") or "Unknown error"
            error_type = _as_text(error.get("type"))
            error_code = _as_text(error.get("code"))
        else:
            error_message = str(error) if error else "Unknown error"
            error_type = error_code = None
        raise_for_status(
            status_code,
            f"API error: {error_message}",
            error_type=error_type,
            error_code=error_code,
            response=payload,
        )

    if not 200 <= status_code < 300:
        raise_for_status(
            status_code,
            f"API request failed: {body}",
            response=payload if isinstance(payload, dict) else None,
        )

    if payload is None:
        if status_code == 204 or not body.strip():
            return {}
        raise GroqResponseError(f"Response is not valid JSON: {body[:200]!r}", status_code=status_code)
    if not isinstance(payload, dict):
        raise GroqResponseError(
            f"Expected a JSON object, got {type(payload).__name__}", status_code=status_code
        )
    return payload


def parse_sse_line(line: str) -> Optional[Dict[str, Any]]:
    """
    Parse one line of an SSE body.

    Returns the decoded fragment for ``data: {...}`` lines and None for any
    line that carries no fragment. Callers check for the ``[DONE]`` sentinel
    with :func:`is_sse_done` first.

    Raises:
        GroqStreamError: If a ``data:`` payload is not a JSON object
    """
    if not line.startswith(SSE_DATA_PREFIX):
        return None
    data = line[len(SSE_DATA_PREFIX):].rstrip("\r")
    try:
        fragment = json.loads(data)
    except json.JSONDecodeError as e:
        raise GroqStreamError(f"Failed to parse stream fragment {data!r}: {e}") from e
    if not isinstance(fragment, dict):
        raise GroqStreamError(f"Stream fragment is not a JSON object: {data!r}")
    return fragment


def is_sse_done(line: str) -> bool:
    """True for the ``data: [DONE]`` terminator line."""
    return line.startswith(SSE_DATA_PREFIX) and line[len(SSE_DATA_PREFIX):].strip() == SSE_DONE


def _streaming_body(json_data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    body = dict(json_data or {})
    body["stream"] = True
    return body


class BaseTransport:
    """Synchronous transport for Groq API communication."""

    def __init__(
        self,
        config: GroqConfig,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config
        self.headers = _build_headers(config.api_key)
        self.client = http_client or httpx.Client(timeout=config.timeout)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise GroqClientClosedError()

    def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Make a request and decode the response."""
        self._ensure_open()
        logger.debug("%s %s", method, path)
        try:
            response = self.client.request(
                method,
                self.config.full_url(path),
                json=json_data,
                headers=self.headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise GroqTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise GroqConnectionError(f"Failed to connect: {e}") from e
        except httpx.HTTPError as e:
            raise GroqConnectionError(f"HTTP error: {e}") from e

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return decode_response(response.status_code, response.text)

    def _stream(self, method: str, path: str, json_data: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
        """Stream fragments from an SSE response."""
        self._ensure_open()
        try:
            with self.client.stream(
                method,
                self.config.full_url(path),
                json=json_data,
                headers=self.headers,
            ) as response:
                if not response.is_success:
                    response.read()
                    decode_response(response.status_code, response.text)

                for line in response.iter_lines():
                    if is_sse_done(line):
                        logger.debug("Stream %s finished", path)
                        break
                    fragment = parse_sse_line(line)
                    if fragment is not None:
                        yield fragment

        except httpx.TimeoutException as e:
            raise GroqTimeoutError(f"Stream timed out: {e}") from e
        except httpx.ConnectError as e:
            raise GroqConnectionError(f"Failed to connect: {e}") from e
        except httpx.HTTPError as e:
            raise GroqConnectionError(f"HTTP error: {e}") from e

    def get(self, path: str, **kwargs: Any) -> Dict[str, Any]:
        """GET request."""
        return self._request("GET", path, **kwargs)

    def post(
        self, path: str, json_data: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> Dict[str, Any]:
        """POST request with a JSON body."""
        return self._request("POST", path, json_data=json_data, **kwargs)

    def post_multipart(
        self,
        path: str,
        data: Dict[str, str],
        files: Dict[str, Any],
    ) -> Dict[str, Any]:
        """POST request with a multipart form body."""
        return self._request("POST", path, data=data, files=files)

    def stream(
        self, path: str, json_data: Optional[Dict[str, Any]] = None
    ) -> Iterator[Dict[str, Any]]:
        """
        Streaming POST request.

        ``stream`` is always set to true on a copy of ``json_data``. The
        returned iterator is lazy and can be consumed once.
        """
        self._ensure_open()
        logger.debug("POST %s (stream)", path)
        return self._stream("POST", path, _streaming_body(json_data))

    def close(self) -> None:
        """Close the client. Later calls raise GroqClientClosedError."""
        if not self._closed:
            self._closed = True
            self.client.close()

    def __enter__(self) -> "BaseTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncTransport:
    """Async transport for Groq API communication."""

    def __init__(
        self,
        config: GroqConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config
        self.headers = _build_headers(config.api_key)
        self.client = http_client or httpx.AsyncClient(timeout=config.timeout)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise GroqClientClosedError()

    async def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Make an async request and decode the response."""
        self._ensure_open()
        logger.debug("%s %s", method, path)
        try:
            response = await self.client.request(
                method,
                self.config.full_url(path),
                json=json_data,
                headers=self.headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise GroqTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise GroqConnectionError(f"Failed to connect: {e}") from e
        except httpx.HTTPError as e:
            raise GroqConnectionError(f"HTTP error: {e}") from e

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return decode_response(response.status_code, response.text)

    async def _stream(
        self, method: str, path: str, json_data: Dict[str, Any]
    ) -> AsyncIterator[Dict[str, Any]]:
        """Stream fragments from an SSE response."""
        self._ensure_open()
        try:
            async with self.client.stream(
                method,
                self.config.full_url(path),
                json=json_data,
                headers=self.headers,
            ) as response:
                if not response.is_success:
                    await response.aread()
                    decode_response(response.status_code, response.text)

                async for line in response.aiter_lines():
                    if is_sse_done(line):
                        logger.debug("Stream %s finished", path)
                        break
                    fragment = parse_sse_line(line)
                    if fragment is not None:
                        yield fragment

        except httpx.TimeoutException as e:
            raise GroqTimeoutError(f"Stream timed out: {e}") from e
        except httpx.ConnectError as e:
            raise GroqConnectionError(f"Failed to connect: {e}") from e
        except httpx.HTTPError as e:
            raise GroqConnectionError(f"HTTP error: {e}") from e

    async def get(self, path: str, **kwargs: Any) -> Dict[str, Any]:
        """Async GET request."""
        return await self._request("GET", path, **kwargs)

    async def post(
        self, path: str, json_data: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> Dict[str, Any]:
        """Async POST request with a JSON body."""
        return await self._request("POST", path, json_data=json_data, **kwargs)

    async def post_multipart(
        self,
        path: str,
        data: Dict[str, str],
        files: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Async POST request with a multipart form body."""
        return await self._request("POST", path, data=data, files=files)

    def stream(
        self, path: str, json_data: Optional[Dict[str, Any]] = None
    ) -> AsyncIterator[Dict[str, Any]]:
        """Async streaming POST request."""
        self._ensure_open()
        logger.debug("POST %s (stream)", path)
        return self._stream("POST", path, _streaming_body(json_data))

    async def close(self) -> None:
        """Close the async client. Later calls raise GroqClientClosedError."""
        if not self._closed:
            self._closed = True
            await self.client.aclose()

    async def __aenter__(self) -> "AsyncTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
