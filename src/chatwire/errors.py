"""Error types raised by the chat client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

STREAM_NOT_SUPPORTED_MESSAGE = "streaming is not supported with this method, please use a streaming client"
INVALID_MODEL_MESSAGE = "this model is not supported with this method, please use the completions endpoint instead"


class ChatwireError(Exception):
    """Base class for chatwire errors."""


class StreamNotSupportedError(ChatwireError, ValueError):
    """Streaming was requested on the non-streaming entry point."""

    def __init__(self, message: str = STREAM_NOT_SUPPORTED_MESSAGE) -> None:
        super().__init__(message)


class InvalidModelForEndpointError(ChatwireError, ValueError):
    """The model is not offered at the requested endpoint."""

    def __init__(self, message: str = INVALID_MODEL_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class APIError(ChatwireError):
    status_code: int
    message: str
    type: str | None = None
    param: str | None = None
    code: Any = None
    request_id: str | None = None

    def __str__(self) -> str:
        return f"APIError(status={self.status_code}, type={self.type}, message={self.message})"


@dataclass
class RequestError(ChatwireError):
    status_code: int
    response_text: str
    request_id: str | None = None

    def __str__(self) -> str:
        return f"RequestError(status={self.status_code}, request_id={self.request_id})"


def error_from_response(status_code: int, payload: Any, text: str, request_id: str | None) -> ChatwireError:
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        return RequestError(status_code=status_code, response_text=text, request_id=request_id)
    return APIError(
        status_code=status_code,
        message=str(error.get("message") or ""),
        type=error.get("type"),
        param=error.get("param"),
        code=error.get("code"),
        request_id=request_id,
    )
