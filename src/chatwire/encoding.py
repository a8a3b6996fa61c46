"""Request body building and JSON serialization."""

from __future__ import annotations

import json
from typing import Any

from chatwire.content import Content
from chatwire.types import ChatCompletionRequest, ChatMessage

_OPTIONAL_FIELDS = (
    "max_tokens",
    "temperature",
    "top_p",
    "n",
    "stream",
    "stop",
    "presence_penalty",
    "frequency_penalty",
    "logit_bias",
    "user",
)


def build_request_body(request: ChatCompletionRequest) -> dict[str, Any]:
    body: dict[str, Any] = {
        "model": request.model,
        "messages": [_message_body(message) for message in request.messages],
    }

    # Zero values (0, 0.0, False, "", [], {}) are left off the wire.
    for key in _OPTIONAL_FIELDS:
        value = getattr(request, key)
        if value:
            body[key] = value

    return body


def dumps_request(request: ChatCompletionRequest) -> str:
    return dumps(build_request_body(request))


def dumps(payload: Any) -> str:
    """Serialize ``payload`` to compact ASCII JSON.

    :class:`Content` values are written through the surrogate-pair content
    encoder; everything else uses ``json.dumps`` with ``ensure_ascii``.
    Non-finite floats raise ``ValueError``.
    """
    if isinstance(payload, Content):
        return payload.to_json()
    if isinstance(payload, dict):
        items = (f"{json.dumps(str(key), ensure_ascii=True)}:{dumps(value)}" for key, value in payload.items())
        return "{" + ",".join(items) + "}"
    if isinstance(payload, (list, tuple)):
        return "[" + ",".join(dumps(item) for item in payload) + "]"
    return json.dumps(payload, ensure_ascii=True, allow_nan=False, separators=(",", ":"))


def _message_body(message: ChatMessage) -> dict[str, Any]:
    body = message.to_dict()
    body["content"] = Content(message.content)
    return body
