from ravenhttp.config.defaults import DEFAULT_CONFIG
from ravenhttp.config.loader import config_from_env, load_config, resolve_log_level
from ravenhttp.config.settings import ClientConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ClientConfig",
    "load_config",
    "config_from_env",
    "resolve_log_level",
]
