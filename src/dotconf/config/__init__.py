"""Configuration module for dotconf.

Example:
    from dotconf.config import ConfigRepository, EnvLoader, env

    EnvLoader().load("/srv/app/.env")

    config = ConfigRepository()
    config.load_directory("/srv/app/config")
    timeout = config.int("http.timeout", 30)

    api_key = env("API_KEY", "")
"""

from dotconf.config.dotted import (
    ConfigValue,
    data_get,
    data_has,
    data_set,
    merge_recursive,
)
from dotconf.config.env_loader import (
    EnvLoader,
    Environment,
    MemoryEnvironment,
    ProcessEnvironment,
    env,
    loaded_env,
    parse_line,
    parse_value,
)
from dotconf.config.provider import ConfigServiceProvider
from dotconf.config.repository import ConfigRepository
from dotconf.config.settings import LoaderSettings

__all__ = [
    # Repository
    "ConfigRepository",
    "ConfigValue",
    "data_get",
    "data_has",
    "data_set",
    "merge_recursive",
    # .env loading
    "EnvLoader",
    "Environment",
    "MemoryEnvironment",
    "ProcessEnvironment",
    "env",
    "loaded_env",
    "parse_line",
    "parse_value",
    # Bootstrap
    "ConfigServiceProvider",
    "LoaderSettings",
]
