"""Configuration management for exaclient.

Reads and writes TOML config at ~/.config/exaclient/config.toml.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from exaclient.api.client import BASE_URL, DEFAULT_TIMEOUT

CONFIG_DIR = Path.home() / ".config" / "exaclient"
CONFIG_PATH = CONFIG_DIR / "config.toml"
API_KEY_ENV = "EXAROTON_API_KEY"


@dataclass
class ApiConfig:
    api_key: str = ""
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class ExaclientConfig:
    api: ApiConfig = field(default_factory=ApiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _read_file() -> dict:
    if not CONFIG_PATH.exists():
        return {}
    try:
        with open(CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def _section(data: dict, name: str) -> dict:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def _str(section: dict, key: str, default: str) -> str:
    value = section.get(key, default)
    return value if isinstance(value, str) else default


def _timeout(section: dict) -> float:
    try:
        timeout = float(section.get("timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def load_config() -> ExaclientConfig:
    """Load config from TOML file, returning defaults if missing or corrupt.

    Values of the wrong type fall back to their defaults one by one.
    ``EXAROTON_API_KEY`` in the environment wins over the stored key.
    """
    data = _read_file()
    api_data = _section(data, "api")
    logging_data = _section(data, "logging")

    api_key = os.environ.get(API_KEY_ENV) or _str(api_data, "api_key", "")

    return ExaclientConfig(
        api=ApiConfig(
            api_key=api_key,
            base_url=_str(api_data, "base_url", BASE_URL),
            timeout=_timeout(api_data),
        ),
        logging=LoggingConfig(
            level=_str(logging_data, "level", "WARNING").upper(),
        ),
    )


def save_config(config: ExaclientConfig) -> None:
    """Write config to TOML file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)

    data = {
        "api": {
            "api_key": config.api.api_key,
            "base_url": config.api.base_url,
            "timeout": config.api.timeout,
        },
        "logging": {
            "level": config.logging.level,
        },
    }

    with open(CONFIG_PATH, "wb") as f:
        tomli_w.dump(data, f)
    os.chmod(CONFIG_PATH, 0o600)


def has_api_key() -> bool:
    """Quick check if an API key is configured."""
    config = load_config()
    return bool(config.api.api_key)
