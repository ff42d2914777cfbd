from ravenhttp.utils.env import env_float, env_int, load_dotenv_files
from ravenhttp.utils.logging import setup_logging
from ravenhttp.utils.merge import deep_merge

__all__ = [
    "env_float",
    "env_int",
    "load_dotenv_files",
    "setup_logging",
    "deep_merge",
]
