from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from chatwire.client import ChatClient
from chatwire.config import ClientConfig

TEST_BASE_URL = "https://api.test/v1"

REPLY_PAYLOAD: dict[str, Any] = {
    "id": "x",
    "object": "chat.completion",
    "created": 1,
    "model": "m",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "hi"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 5, "completion_tokens": 1, "total_tokens": 6},
}


class RecordingHandler:
    def __init__(self, responder: Callable[[httpx.Request], Any]) -> None:
        self._responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        return self._responder(request)


@pytest.fixture
def make_client() -> Callable[..., tuple[ChatClient, RecordingHandler]]:
    def _make(
        responder: Callable[[httpx.Request], Any] | None = None,
        *,
        organization: str | None = None,
    ) -> tuple[ChatClient, RecordingHandler]:
        handler = RecordingHandler(responder or (lambda request: httpx.Response(200, json=REPLY_PAYLOAD)))
        config = ClientConfig(api_key="sk-test", base_url=TEST_BASE_URL, organization=organization)
        return ChatClient(config, transport=httpx.MockTransport(handler)), handler

    return _make


@pytest.fixture
def reply_payload() -> dict[str, Any]:
    return dict(REPLY_PAYLOAD)
