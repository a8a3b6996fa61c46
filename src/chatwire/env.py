"""Minimal .env loader for the chatwire CLI."""

from __future__ import annotations

import os
from pathlib import Path


def load_dotenv(path: str | Path = ".env", *, override: bool = False) -> list[str]:
    """Copy ``KEY=value`` pairs from ``path`` into ``os.environ``.

    Returns the keys that were set. Existing variables win unless
    ``override`` is true.
    """
    env_path = Path(path)
    try:
        text = env_path.read_text(encoding="utf-8")
    except OSError:
        return []

    loaded: list[str] = []
    for line in text.splitlines():
        parsed = _parse_line(line)
        if parsed is None:
            continue
        key, value = parsed
        if key in os.environ and not override:
            continue
        os.environ[key] = value
        loaded.append(key)
    return loaded


def _parse_line(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None
    if stripped.startswith("export "):
        stripped = stripped[len("export ") :]
    key, value = stripped.split("=", 1)
    key = key.strip()
    value = value.strip()
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    elif " #" in value:
        value = value.split(" #", 1)[0].rstrip()
    if value == "":
        return None
    return key, value
