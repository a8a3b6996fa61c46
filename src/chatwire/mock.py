"""Offline transport for exercising the client without network access."""

from __future__ import annotations

import hashlib
import json
from typing import Any

import httpx

from chatwire.types import ROLE_ASSISTANT, ROLE_USER

MOCK_BASE_URL = "https://mock.chatwire.invalid/v1"
MOCK_CREATED = 1677858242


def build_mock_transport(*, reply_text: str | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        messages = body.get("messages") or []
        text = reply_text if reply_text is not None else _echo_text(messages)
        payload = {
            "id": f"chatcmpl-mock-{_stable_digest(body)[:12]}",
            "object": "chat.completion",
            "created": MOCK_CREATED,
            "model": body.get("model", ""),
            "choices": [
                {
                    "index": 0,
                    "message": {"role": ROLE_ASSISTANT, "content": text},
                    "finish_reason": "stop",
                }
            ],
            "usage": _mock_usage(messages, text),
        }
        return httpx.Response(200, json=payload, headers={"x-request-id": "mock"})

    return httpx.MockTransport(handler)


def _echo_text(messages: list[dict[str, Any]]) -> str:
    for message in reversed(messages):
        if message.get("role") == ROLE_USER:
            return f"Echo: {message.get('content', '')}"
    return "Echo: (no user message)"


def _stable_digest(body: dict[str, Any]) -> str:
    canonical = json.dumps(body, sort_keys=True, separators=(",", ":"), ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def _mock_usage(messages: list[dict[str, Any]], text: str) -> dict[str, int]:
    prompt_text = " ".join(str(message.get("content", "")) for message in messages)
    prompt_tokens = max(1, len(prompt_text) // 4)
    completion_tokens = max(1, len(text) // 4)
    return {
        "prompt_tokens": prompt_tokens,
        "completion_tokens": completion_tokens,
        "total_tokens": prompt_tokens + completion_tokens,
    }
