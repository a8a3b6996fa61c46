"""CLI entrypoint for chatwire."""

from __future__ import annotations

import asyncio
import logging

import httpx
import typer

from chatwire.client import create_client
from chatwire.config import default_model
from chatwire.content import encode_content
from chatwire.encoding import dumps_request
from chatwire.endpoints import CHAT_COMPLETIONS_SUFFIX, check_endpoint_supports_model
from chatwire.env import load_dotenv
from chatwire.errors import ChatwireError
from chatwire.logging_config import setup_logging
from chatwire.types import ROLE_SYSTEM, ROLE_USER, ChatCompletionRequest, ChatCompletionResponse, ChatMessage
from chatwire.ui.render import (
    render_banner,
    render_error,
    render_info,
    render_response,
    render_success,
    render_warning,
)

app = typer.Typer(add_completion=False, help="Typed client for the chat-completions API.")

logger = logging.getLogger(__name__)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """chatwire command line."""
    load_dotenv()
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("encode")
def encode(text: str = typer.Argument(..., help="Message content to encode.")) -> None:
    """Print the wire encoding of a message content string."""
    typer.echo(encode_content(text))


@app.command("dry-run")
def dry_run(
    message: str = typer.Option(..., "--message", "-m", help="User message content."),
    model: str = typer.Option(None, "--model", help="Model identifier."),
    system: str = typer.Option(None, "--system", "-s", help="Optional system message."),
    temperature: float = typer.Option(0.0, "--temperature", "-t"),
    max_tokens: int = typer.Option(0, "--max-tokens"),
) -> None:
    """Build and print the exact request body without network access."""
    request = _build_request(message, model, system, temperature=temperature, max_tokens=max_tokens)
    if not check_endpoint_supports_model(CHAT_COMPLETIONS_SUFFIX, request.model):
        render_warning(f"Model '{request.model}' is not offered at {CHAT_COMPLETIONS_SUFFIX}.")
    try:
        body = dumps_request(request)
    except ValueError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc
    typer.echo(body)


@app.command("chat")
def chat(
    message: str = typer.Option(..., "--message", "-m", help="User message content."),
    model: str = typer.Option(None, "--model", help="Model identifier."),
    system: str = typer.Option(None, "--system", "-s", help="Optional system message."),
    temperature: float = typer.Option(0.0, "--temperature", "-t"),
    max_tokens: int = typer.Option(0, "--max-tokens"),
    mock: bool = typer.Option(False, "--mock", help="Use the offline mock transport."),
) -> None:
    """Send one chat completion request and render the reply."""
    request = _build_request(message, model, system, temperature=temperature, max_tokens=max_tokens)
    mode = "mock" if mock else "openai"
    render_banner("chatwire", f"{request.model} · {mode}")
    try:
        response = asyncio.run(_send(mode, request))
    except (ChatwireError, ValueError) as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        render_error(f"Transport error: {exc}")
        raise typer.Exit(code=1) from exc

    render_response(response)
    if response.choices:
        render_success("Completed.")
    else:
        render_info("Reply contained no choices.")


async def _send(mode: str, request: ChatCompletionRequest) -> ChatCompletionResponse:
    async with create_client(mode) as client:
        logger.debug("Client config %s", client.config.to_dict())
        return await client.create_chat_completion(request)


def _build_request(
    message: str,
    model: str | None,
    system: str | None,
    *,
    temperature: float,
    max_tokens: int,
) -> ChatCompletionRequest:
    messages = []
    if system:
        messages.append(ChatMessage(role=ROLE_SYSTEM, content=system))
    messages.append(ChatMessage(role=ROLE_USER, content=message))
    resolved_model = model or default_model()
    logger.debug("Built request model=%s messages=%d", resolved_model, len(messages))
    return ChatCompletionRequest(
        model=resolved_model,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
