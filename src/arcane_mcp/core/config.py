from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

from arcane_mcp.client import ArcaneClient

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    host: str
    api_key: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load Arcane host and API key from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    host = os.getenv("ARCANE_HOST", "").strip()
    api_key = os.getenv("ARCANE_API_KEY", "").strip()
    return host, api_key


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be > 0")
    return value


def load_settings(*, use_dotenv: bool = True) -> Settings:
    host, api_key = load_env_config(use_dotenv=use_dotenv)
    if not host or not api_key:
        raise ValueError("Missing ARCANE_HOST or ARCANE_API_KEY in environment.")
    return Settings(
        host=host,
        api_key=api_key,
        timeout_seconds=_env_float("ARCANE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        log_level=os.getenv("ARCANE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
        or DEFAULT_LOG_LEVEL,
    )


def create_client_from_env(**kwargs) -> ArcaneClient:
    """Create an ArcaneClient from environment variables."""
    settings = load_settings()
    kwargs.setdefault("timeout_seconds", settings.timeout_seconds)
    return ArcaneClient(host=settings.host, api_key=settings.api_key, **kwargs)


__all__ = [
    "Settings",
    "load_env_config",
    "load_settings",
    "create_client_from_env",
]
