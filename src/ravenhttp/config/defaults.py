"""Default configuration schema for ravenhttp.

"""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_USER_AGENT = "ravenhttp (https://github.com/ravenhttp/ravenhttp, 0.1.0)"

DEFAULT_CONFIG: Dict[str, Any] = {
    "http": {
        "base_url": "https://discord.com/api",
        "api_version": 9,
        "timeout": 10.0,
        "user_agent": DEFAULT_USER_AGENT,
        "transport": "httpx",
        "default_headers": {},
    },
    "auth": {
        "token_env": "DISCORD_TOKEN",
    },
    "logging": {
        "level": "INFO",
        "dir": "",
    },
}
