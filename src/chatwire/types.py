"""Core request/response types for the chat-completions endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

CHAT_ROLES = (ROLE_SYSTEM, ROLE_USER, ROLE_ASSISTANT)


@dataclass
class ChatMessage:
    role: str
    content: str
    # Not in the official API reference, but accepted by the endpoint.
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "role": self.role,
            "content": self.content,
        }
        if self.name:
            payload["name"] = self.name
        return payload

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatMessage":
        content = data.get("content")
        return cls(
            role=str(data.get("role") or ""),
            content="" if content is None else str(content),
            name=str(data.get("name") or ""),
        )


@dataclass
class ChatCompletionRequest:
    model: str
    messages: list[ChatMessage]
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    stream: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    user: str = ""


@dataclass
class ChatCompletionChoice:
    index: int
    message: ChatMessage
    finish_reason: str

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ChatCompletionChoice":
        data = data or {}
        return cls(
            index=int(data.get("index") or 0),
            message=ChatMessage.from_dict(data.get("message") or {}),
            finish_reason=str(data.get("finish_reason") or ""),
        )


@dataclass
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Usage":
        data = data or {}
        return cls(
            prompt_tokens=int(data.get("prompt_tokens") or 0),
            completion_tokens=int(data.get("completion_tokens") or 0),
            total_tokens=int(data.get("total_tokens") or 0),
        )


@dataclass
class ChatCompletionResponse:
    id: str
    object: str
    created: int
    model: str
    choices: list[ChatCompletionChoice]
    usage: Usage
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def text(self) -> str:
        if not self.choices:
            return ""
        return self.choices[0].message.content

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatCompletionResponse":
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}.")
        return cls(
            id=str(data.get("id") or ""),
            object=str(data.get("object") or ""),
            created=int(data.get("created") or 0),
            model=str(data.get("model") or ""),
            choices=[ChatCompletionChoice.from_dict(item) for item in data.get("choices") or []],
            usage=Usage.from_dict(data.get("usage")),
            raw=data,
        )
