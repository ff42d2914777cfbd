"""Environment variable parsing and dotenv loading helpers.

"""

from __future__ import annotations

import os
import re
from pathlib import Path

_DOTENV_ALLOWED_KEY = re.compile(r"^[A-Z][A-Z0-9_]*_(TOKEN|TOKEN_ENV)$")

def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default

def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default

def load_dotenv_files(config_dir: Path) -> None:
    """Load token variables from ``config_dir/.env``.

    Only keys that look like tokens (``*_TOKEN``) or token mappings
    (``*_TOKEN_ENV``) are loaded, and variables already present in the
    environment are never overwritten.

    Args:
        config_dir (Path): Directory holding the configuration file.
    """
    _load_dotenv_file(config_dir / ".env")

def _is_allowed_dotenv_key(key: str) -> bool:
    return bool(_DOTENV_ALLOWED_KEY.match(key))

def _load_dotenv_file(path: Path) -> None:
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("\"'")
        if key and _is_allowed_dotenv_key(key) and key not in os.environ:
            os.environ[key] = value
