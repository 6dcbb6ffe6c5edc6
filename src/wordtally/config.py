"""Configuration loading utilities for wordtally."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_INT_KEYS = {"api_port", "workers", "default_limit"}
_STR_KEYS = {"log_level", "api_host"}


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    default_limit: int | None = None


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("WORDTALLY_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int | None] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 1,
        "default_limit": None,
    }
    defaults.update(_load_profile(profile_path))

    log_level = os.getenv("WORDTALLY_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("WORDTALLY_API_HOST", str(defaults["api_host"]))
    api_port = _parse_int("WORDTALLY_API_PORT", os.getenv("WORDTALLY_API_PORT"), defaults["api_port"])
    workers = _parse_int("WORDTALLY_WORKERS", os.getenv("WORDTALLY_WORKERS"), defaults["workers"])
    raw_limit = os.getenv("WORDTALLY_DEFAULT_LIMIT")
    if raw_limit is None and defaults["default_limit"] is None:
        default_limit = None
    else:
        default_limit = _parse_int("WORDTALLY_DEFAULT_LIMIT", raw_limit, defaults["default_limit"])
        if default_limit < 1:
            raise ValueError(f"WORDTALLY_DEFAULT_LIMIT must be positive, got {default_limit}")

    return AppConfig(
        env=env,
        log_level=log_level,
        api_host=api_host,
        api_port=api_port,
        workers=workers,
        default_limit=default_limit,
    )


def configure_logging(config: AppConfig) -> None:
    """Route log records to stderr at the configured level."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"log_level must be a logging level name, got {config.log_level!r}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int] = {}
    for key, raw in payload.items():
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key in _STR_KEYS:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_int(name: str, raw: str | None, default: object) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
