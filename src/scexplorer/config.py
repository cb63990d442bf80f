"""
Configuration for the explorer client.

Values come from the process environment, falling back to
~/.scexplorer/.env (loaded with python-dotenv), then to defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ScExplorerError


# Default config directory
SCEXPLORER_DIR = Path.home() / ".scexplorer"
SCEXPLORER_ENV = SCEXPLORER_DIR / ".env"

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT = 30.0

API_URL_VAR = "SCEXPLORER_API_URL"
TIMEOUT_VAR = "SCEXPLORER_TIMEOUT"


class ConfigError(ScExplorerError):
    exit_code = 4


@dataclass(frozen=True)
class ApiConfig:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"{TIMEOUT_VAR} must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_VAR} must be positive, got {raw!r}")
    return timeout


def load_config(env_path: Optional[Path] = None) -> ApiConfig:
    """
    Load client configuration.

    Args:
        env_path: Path to .env file (default: ~/.scexplorer/.env)

    Returns:
        ApiConfig with URL and timeout resolved

    Raises:
        ConfigError: If SCEXPLORER_TIMEOUT is not a positive number
    """
    env_path = env_path or SCEXPLORER_ENV

    # Real environment wins over the file
    if env_path.exists():
        load_dotenv(env_path, override=False)

    api_url = os.environ.get(API_URL_VAR) or DEFAULT_API_URL
    raw_timeout = os.environ.get(TIMEOUT_VAR)
    timeout = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT

    return ApiConfig(api_url=api_url.rstrip("/"), timeout=timeout)


def save_config_value(key: str, value: str, env_path: Optional[Path] = None) -> Path:
    """
    Write or update a single KEY=value line in the .env file.

    Returns:
        Path to the saved .env file
    """
    env_path = env_path or SCEXPLORER_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                existing[k.strip()] = v.strip()

    existing[key] = value

    lines = [f"{k}={v}" for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path
