"""Typed client settings resolved from a configuration mapping.

"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ravenhttp.config.defaults import DEFAULT_CONFIG, DEFAULT_USER_AGENT
from ravenhttp.transport import TRANSPORTS


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_CONFIG["http"]["base_url"]
    api_version: int = DEFAULT_CONFIG["http"]["api_version"]
    timeout: Optional[float] = DEFAULT_CONFIG["http"]["timeout"]
    user_agent: str = DEFAULT_USER_AGENT
    transport: str = DEFAULT_CONFIG["http"]["transport"]
    default_headers: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    token_env: str = DEFAULT_CONFIG["auth"]["token_env"]

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/v{self.api_version}"

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "ClientConfig":
        """Build settings from a loaded configuration mapping.

        Args:
            cfg: Mapping shaped like ``DEFAULT_CONFIG``; missing keys fall back
                to defaults.

        Returns:
            ClientConfig: Normalized settings.

        Raises:
            ValueError: If ``http.transport`` names an unknown transport,
                ``http.api_version`` is not a positive integer, or
                ``http.default_headers`` is not an ASCII mapping.
        """
        http_cfg = cfg.get("http", {}) or {}
        auth_cfg = cfg.get("auth", {}) or {}

        transport = str(http_cfg.get("transport") or "httpx").strip().lower()
        if transport not in TRANSPORTS:
            raise ValueError(f"http.transport must be one of: {', '.join(TRANSPORTS)} (got `{transport}`)")

        try:
            api_version = int(http_cfg.get("api_version", cls.api_version))
        except (TypeError, ValueError):
            api_version = 0
        if api_version <= 0:
            raise ValueError("http.api_version must be a positive integer.")

        timeout_raw = http_cfg.get("timeout", cls.timeout)
        timeout = None if timeout_raw in {None, ""} else float(timeout_raw)

        headers_cfg = http_cfg.get("default_headers") or {}
        if not isinstance(headers_cfg, dict):
            raise ValueError("http.default_headers must be a mapping of header name to value.")
        for name, value in headers_cfg.items():
            if not str(name).isascii() or not str(value).isascii():
                raise ValueError(f"http.default_headers entry `{name}` must be ASCII.")

        return cls(
            base_url=str(http_cfg.get("base_url") or cls.base_url).strip(),
            api_version=api_version,
            timeout=timeout,
            user_agent=str(http_cfg.get("user_agent") or DEFAULT_USER_AGENT),
            transport=transport,
            default_headers=tuple((str(k), str(v)) for k, v in headers_cfg.items()),
            token_env=str(auth_cfg.get("token_env") or cls.token_env).strip(),
        )

    def resolve_token(self) -> Optional[str]:
        token = str(os.getenv(self.token_env) or "").strip()
        return token or None
