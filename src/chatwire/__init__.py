"""Typed client for the chat-completions HTTP API."""

from chatwire.client import ChatClient, create_client
from chatwire.config import ClientConfig
from chatwire.content import Content, encode_content
from chatwire.encoding import build_request_body, dumps_request
from chatwire.endpoints import CHAT_COMPLETIONS_SUFFIX, check_endpoint_supports_model, full_url
from chatwire.errors import (
    APIError,
    ChatwireError,
    InvalidModelForEndpointError,
    RequestError,
    StreamNotSupportedError,
)
from chatwire.types import (
    CHAT_ROLES,
    ROLE_ASSISTANT,
    ROLE_SYSTEM,
    ROLE_USER,
    ChatCompletionChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    Usage,
)

__all__ = [
    "APIError",
    "CHAT_COMPLETIONS_SUFFIX",
    "CHAT_ROLES",
    "ChatClient",
    "ChatCompletionChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatwireError",
    "ClientConfig",
    "Content",
    "InvalidModelForEndpointError",
    "ROLE_ASSISTANT",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "RequestError",
    "StreamNotSupportedError",
    "Usage",
    "build_request_body",
    "check_endpoint_supports_model",
    "create_client",
    "dumps_request",
    "encode_content",
    "full_url",
]
