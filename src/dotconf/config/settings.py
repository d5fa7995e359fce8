"""Dataclass settings for the configuration bootstrap.

The names of the ``.env`` file and the config directory, and whether parsed
``.env`` values are mirrored, can be overridden per project through
prefixed environment variables.
"""

import os
from dataclasses import dataclass

from dotconf.config.repository import to_bool


@dataclass
class LoaderSettings:
    """Where configuration is read from and how ``.env`` values propagate

    Attributes:
        env_file: Name of the env file, resolved through the path resolver
        config_dir: Name of the config fragment directory (alias or path)
        set_env: Mirror parsed ``.env`` values into the loaded-values store
        set_putenv: Export parsed ``.env`` values into ``os.environ``
    """

    env_file: str = ".env"
    config_dir: str = "@config"
    set_env: bool = True
    set_putenv: bool = False

    @classmethod
    def from_env(cls, prefix: str = "DOTCONF") -> "LoaderSettings":
        """Load loader settings from environment variables

        Args:
            prefix: Environment variable prefix (e.g., DOTCONF, MYAPP)

        Environment variables:
            {prefix}_ENV_FILE: Env file name (default: .env)
            {prefix}_CONFIG_DIR: Config directory (default: @config)
            {prefix}_SET_ENV: "true"/"1"/"yes"/"on" to mirror values
            {prefix}_SET_PUTENV: same tokens, to export into os.environ
        """
        defaults = cls()
        set_env = os.environ.get(f"{prefix}_SET_ENV")
        set_putenv = os.environ.get(f"{prefix}_SET_PUTENV")
        return cls(
            env_file=os.environ.get(f"{prefix}_ENV_FILE", defaults.env_file),
            config_dir=os.environ.get(f"{prefix}_CONFIG_DIR", defaults.config_dir),
            set_env=defaults.set_env if set_env is None else to_bool(set_env),
            set_putenv=defaults.set_putenv if set_putenv is None else to_bool(set_putenv),
        )
