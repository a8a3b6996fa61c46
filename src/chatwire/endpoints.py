"""Endpoint paths and model compatibility."""

from __future__ import annotations

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"
COMPLETIONS_SUFFIX = "/completions"

GPT4 = "gpt-4"
GPT4_0314 = "gpt-4-0314"
GPT4_32K = "gpt-4-32k"
GPT4_32K_0314 = "gpt-4-32k-0314"
GPT3_5_TURBO = "gpt-3.5-turbo"
GPT3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
GPT3_TEXT_DAVINCI_003 = "text-davinci-003"
GPT3_TEXT_DAVINCI_002 = "text-davinci-002"
GPT3_TEXT_DAVINCI_001 = "text-davinci-001"
GPT3_TEXT_CURIE_001 = "text-curie-001"
GPT3_TEXT_BABBAGE_001 = "text-babbage-001"
GPT3_TEXT_ADA_001 = "text-ada-001"
GPT3_DAVINCI_INSTRUCT_BETA = "davinci-instruct-beta"
GPT3_DAVINCI = "davinci"
GPT3_CURIE_INSTRUCT_BETA = "curie-instruct-beta"
GPT3_CURIE = "curie"
GPT3_ADA = "ada"
GPT3_BABBAGE = "babbage"
CODEX_CODE_DAVINCI_002 = "code-davinci-002"
CODEX_CODE_CUSHMAN_001 = "code-cushman-001"
CODEX_CODE_DAVINCI_001 = "code-davinci-001"

DISABLED_MODELS_FOR_ENDPOINTS: dict[str, frozenset[str]] = {
    COMPLETIONS_SUFFIX: frozenset(
        {
            GPT3_5_TURBO,
            GPT3_5_TURBO_0301,
            GPT4,
            GPT4_0314,
            GPT4_32K,
            GPT4_32K_0314,
        }
    ),
    CHAT_COMPLETIONS_SUFFIX: frozenset(
        {
            CODEX_CODE_DAVINCI_002,
            CODEX_CODE_CUSHMAN_001,
            CODEX_CODE_DAVINCI_001,
            GPT3_TEXT_DAVINCI_003,
            GPT3_TEXT_DAVINCI_002,
            GPT3_TEXT_CURIE_001,
            GPT3_TEXT_BABBAGE_001,
            GPT3_TEXT_ADA_001,
            GPT3_TEXT_DAVINCI_001,
            GPT3_DAVINCI_INSTRUCT_BETA,
            GPT3_DAVINCI,
            GPT3_CURIE_INSTRUCT_BETA,
            GPT3_CURIE,
            GPT3_ADA,
            GPT3_BABBAGE,
        }
    ),
}


def check_endpoint_supports_model(suffix: str, model: str) -> bool:
    """Unknown endpoints and unknown models are allowed."""
    return model not in DISABLED_MODELS_FOR_ENDPOINTS.get(suffix, frozenset())


def full_url(base_url: str, suffix: str, model: str | None = None) -> str:
    # The URL does not depend on the model.
    return f"{base_url.rstrip('/')}{suffix}"
