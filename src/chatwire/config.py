"""Client configuration resolved from arguments and the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    organization: str | None = None
    timeout_s: float | None = None

    def to_dict(self) -> dict:
        return {
            "api_key_present": bool(self.api_key),
            "base_url": self.base_url,
            "organization": self.organization,
            "timeout_s": self.timeout_s,
        }

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        organization: str | None = None,
        timeout_s: float | None = None,
    ) -> "ClientConfig":
        resolved_timeout = timeout_s
        if resolved_timeout is None:
            resolved_timeout = _parse_timeout(os.getenv("CHATWIRE_TIMEOUT_S"))
        return cls(
            api_key=api_key or os.getenv("OPENAI_API_KEY") or None,
            base_url=base_url or os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL,
            organization=organization or os.getenv("OPENAI_ORG_ID") or None,
            timeout_s=resolved_timeout,
        )


def default_model() -> str:
    return os.getenv("CHATWIRE_DEFAULT_MODEL") or DEFAULT_MODEL


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"CHATWIRE_TIMEOUT_S must be a number, got {raw!r}.") from exc
    if value <= 0:
        return None
    return value
