"""
Exception classes for the Groq Python SDK.
"""

from typing import Any, Dict, Optional


class GroqError(Exception):
    """Base exception for Groq SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class GroqConfigError(GroqError):
    """Invalid or missing client configuration."""

    pass


class GroqConnectionError(GroqError):
    """Error connecting to the Groq API."""

    def __init__(self, message: str = "Failed to connect to the Groq API") -> None:
        super().__init__(message)


class GroqTimeoutError(GroqError):
    """Request to the Groq API timed out."""

    def __init__(self, message: str = "Request timed out") -> None:
        super().__init__(message)


class GroqClientClosedError(GroqError):
    """The client was used after being closed."""

    def __init__(self, message: str = "Client has been closed") -> None:
        super().__init__(message)


class GroqAPIError(GroqError):
    """Error reported by the Groq API.

    Carries the HTTP status plus the ``type`` and ``code`` fields of an
    upstream ``error`` object when the server sent one.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        error_code: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response=response)
        self.error_type = error_type
        self.error_code = error_code


class GroqAuthenticationError(GroqAPIError):
    """Authentication error."""


class GroqPermissionError(GroqAPIError):
    """Permission denied error."""


class GroqNotFoundError(GroqAPIError):
    """Resource not found error."""


class GroqRateLimitError(GroqAPIError):
    """Rate limit exceeded error."""


class GroqServerError(GroqAPIError):
    """Server error."""


class GroqValidationError(GroqError):
    """Request rejected client-side before any network call."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class GroqFileNotFoundError(GroqError, FileNotFoundError):
    """A local file referenced by a request does not exist."""

    def __init__(self, message: str) -> None:
        GroqError.__init__(self, message)


class GroqResponseError(GroqError):
    """The API answered with a body that could not be decoded."""

    pass


class GroqStreamError(GroqError):
    """Streaming error."""

    pass


class GroqToolConversationError(GroqError):
    """Failure anywhere in a tool-calling round trip.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=-1)

    def __str__(self) -> str:
        return self.message


def raise_for_status(
    status_code: int,
    message: str,
    error_type: Optional[str] = None,
    error_code: Optional[str] = None,
    response: Optional[Dict[str, Any]] = None,
) -> None:
    """Raise the exception matching an HTTP status code."""
    kwargs = {
        "status_code": status_code,
        "error_type": error_type,
        "error_code": error_code,
        "response": response,
    }
    if status_code == 401:
        raise GroqAuthenticationError(message, **kwargs)
    elif status_code == 403:
        raise GroqPermissionError(message, **kwargs)
    elif status_code == 404:
        raise GroqNotFoundError(message, **kwargs)
    elif status_code == 429:
        raise GroqRateLimitError(message, **kwargs)
    elif status_code >= 500:
        raise GroqServerError(message, **kwargs)
    raise GroqAPIError(message, **kwargs)
