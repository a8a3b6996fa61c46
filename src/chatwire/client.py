"""Chat-completions client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from chatwire.config import ClientConfig
from chatwire.encoding import dumps_request
from chatwire.endpoints import CHAT_COMPLETIONS_SUFFIX, check_endpoint_supports_model, full_url
from chatwire.errors import InvalidModelForEndpointError, StreamNotSupportedError, error_from_response
from chatwire.types import ChatCompletionRequest, ChatCompletionResponse

logger = logging.getLogger(__name__)


class ChatClient:
    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig.from_env()
        self._client = httpx.AsyncClient(timeout=self._config.timeout_s, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Send a single non-streaming chat completion request.

        Precondition failures raise before any network I/O. Transport,
        status and decoding errors propagate to the caller unchanged.
        Cancel the awaiting task (or use ``asyncio.timeout``) to abort the
        exchange.
        """
        if request.stream:
            raise StreamNotSupportedError()
        if not check_endpoint_supports_model(CHAT_COMPLETIONS_SUFFIX, request.model):
            raise InvalidModelForEndpointError()
        if not request.messages:
            raise ValueError("ChatCompletionRequest.messages must not be empty.")

        http_request = self.build_request("POST", self.full_url(CHAT_COMPLETIONS_SUFFIX, request.model), request)
        payload = await self.send_request(http_request)
        return ChatCompletionResponse.from_dict(payload)

    def full_url(self, suffix: str, model: str) -> str:
        return full_url(self._config.base_url, suffix, model)

    def build_request(self, method: str, url: str, request: ChatCompletionRequest) -> httpx.Request:
        body = dumps_request(request).encode("ascii")
        logger.debug(
            "Dispatching %s %s model=%s messages=%d bytes=%d",
            method,
            url,
            request.model,
            len(request.messages),
            len(body),
        )
        return self._client.build_request(method, url, content=body, headers=self._headers())

    async def send_request(self, http_request: httpx.Request) -> Any:
        response = await self._client.send(http_request)
        request_id = _extract_request_id(response.headers)

        if response.status_code < 200 or response.status_code >= 300:
            logger.warning(
                "Chat completion failed status=%s request_id=%s",
                response.status_code,
                request_id,
            )
            try:
                payload = response.json()
            except ValueError:
                payload = None
            raise error_from_response(response.status_code, payload, response.text, request_id)

        return response.json()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._config.api_key:
            headers["Authorization"] = f"Bearer {self._config.api_key}"
        if self._config.organization:
            headers["OpenAI-Organization"] = self._config.organization
        return headers

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def create_client(mode: str, **kwargs: Any) -> ChatClient:
    if mode == "mock":
        from chatwire.mock import MOCK_BASE_URL, build_mock_transport

        return ChatClient(
            ClientConfig(api_key=None, base_url=MOCK_BASE_URL),
            transport=build_mock_transport(**kwargs),
        )
    if mode == "openai":
        return ChatClient(ClientConfig.from_env(**kwargs))
    raise ValueError(f"Unsupported client mode: {mode}")


def _extract_request_id(headers: httpx.Headers) -> str | None:
    return headers.get("x-request-id")
