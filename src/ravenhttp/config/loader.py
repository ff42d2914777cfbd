"""Configuration loading and resolver helpers.

"""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from ravenhttp.config.defaults import DEFAULT_CONFIG
from ravenhttp.utils import deep_merge, env_float, env_int, load_dotenv_files

_FORBIDDEN_AUTH_KEYS: set[str] = {"token", "bot_token", "authorization"}
_ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "RAVENHTTP_BASE_URL": ("http", "base_url"),
    "RAVENHTTP_TRANSPORT": ("http", "transport"),
    "RAVENHTTP_USER_AGENT": ("http", "user_agent"),
    "RAVENHTTP_LOG_LEVEL": ("logging", "level"),
    "RAVENHTTP_LOG_DIR": ("logging", "dir"),
}
LOGGER = logging.getLogger("ravenhttp.config")

def load_config(config_path: str | Path) -> Tuple[Dict[str, Any], Path]:
    """Load config.

    Args:
        config_path (str | Path): Path to a YAML configuration file.

    Returns:
        Tuple[Dict[str, Any], Path]: Merged configuration and the resolved
        config path.

    Raises:
        FileNotFoundError: The config file does not exist.
        ValueError: The file is not a YAML mapping or carries credentials.

    Side Effects / I/O:
        - Reads the config file and a sibling ``.env`` file when present.
        - Environment variables override values from the file.
    """
    path = Path(config_path).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}

    if not isinstance(loaded, dict):
        raise ValueError("Config must be a YAML object.")
    _validate_forbidden_auth_yaml_keys(loaded)

    load_dotenv_files(path.parent)
    cfg = deep_merge(deepcopy(DEFAULT_CONFIG), loaded)
    _apply_env_overrides(cfg)
    LOGGER.debug(f"[config] loaded path={path} transport={cfg['http'].get('transport')}")
    return cfg, path


def config_from_env() -> Dict[str, Any]:
    """Default configuration with environment overrides applied."""
    cfg = deepcopy(DEFAULT_CONFIG)
    _apply_env_overrides(cfg)
    return cfg


def resolve_log_level(cfg: Dict[str, Any]) -> int:
    raw = str((cfg.get("logging", {}) or {}).get("level") or "INFO").strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        LOGGER.warning("Unknown logging.level `%s`; using INFO.", raw)
        return logging.INFO
    return level


def _validate_forbidden_auth_yaml_keys(loaded: Dict[str, Any]) -> None:
    auth_cfg = loaded.get("auth", {})
    if not isinstance(auth_cfg, dict):
        return
    forbidden_keys = [key for key in _FORBIDDEN_AUTH_KEYS if key in auth_cfg]
    if not forbidden_keys:
        return
    joined = ", ".join(f"`auth.{key}`" for key in sorted(forbidden_keys))
    raise ValueError(
        f"Forbidden credential field(s) in YAML: {joined}. "
        "Tokens must be sourced only from environment variables (see `auth.token_env`)."
    )


def _apply_env_overrides(cfg: Dict[str, Any]) -> None:
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        section_cfg = cfg.setdefault(section, {})
        if not isinstance(section_cfg, dict):
            section_cfg = {}
            cfg[section] = section_cfg
        value = _env_str(env_name)
        if value is not None:
            section_cfg[key] = value

    http_cfg = cfg.setdefault("http", {})
    http_cfg["api_version"] = env_int("RAVENHTTP_API_VERSION", http_cfg.get("api_version", 9))
    timeout = http_cfg.get("timeout")
    if timeout is not None:
        http_cfg["timeout"] = env_float("RAVENHTTP_TIMEOUT", float(timeout))
    else:
        http_cfg["timeout"] = env_float("RAVENHTTP_TIMEOUT", 0.0) or None


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value in {None, ""}:
        return None
    return value.strip()
