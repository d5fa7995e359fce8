"""Environment file loader.

Parses ``.env`` files into a flat name -> string mapping and, optionally,
mirrors each entry into an environment store.

Supported syntax, one ``NAME=value`` pair per line:

    # full-line comment
    APP_NAME=demo                 # unquoted, inline comment stripped
    GREETING="hello\\nworld"      # double quotes: \\n \\r \\t \\" \\\\ escapes
    PATTERN='^\\d+$'              # single quotes: taken verbatim
    DEBUG=(true)                  # -> "true"
    CACHE_DRIVER=null             # -> ""

No multi-line values and no ${VAR} interpolation.

Mirroring targets are injected ``Environment`` objects. By default
``set_env`` writes to the module-level ``loaded_env`` store and
``set_putenv`` writes to ``os.environ``. Both are process-wide: loaders
sharing them from several threads race, and nothing here synchronises them.
"""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from dotenv import find_dotenv

from dotconf.logger import Logger, create_logger

_DOUBLE_QUOTED = re.compile(r'"(.*)"\s*(#.*)?')
_SINGLE_QUOTED = re.compile(r"'(.*)'\s*(#.*)?")
_ESCAPE = re.compile(r'\\([nrt"\\])')
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}

SPECIAL_VALUES = {
    "true": "true",
    "(true)": "true",
    "false": "false",
    "(false)": "false",
    "null": "",
    "(null)": "",
    "empty": "",
    "(empty)": "",
}


class Environment(ABC):
    """A string-to-string environment that loaded values can be mirrored into."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key`` or None when it is not set."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


class MemoryEnvironment(Environment):
    """Dict-backed environment, useful as a mirror target and in tests."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values) if values else {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)


class ProcessEnvironment(Environment):
    """The real process environment (``os.environ``)."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value


# Values mirrored by loaders constructed with set_env=True
loaded_env = MemoryEnvironment()


def _unescape(value: str) -> str:
    return _ESCAPE.sub(lambda m: _ESCAPES[m.group(1)], value)


def parse_value(raw: str) -> str:
    """Parse the right-hand side of a ``NAME=value`` line."""
    raw = raw.strip()

    match = _DOUBLE_QUOTED.fullmatch(raw)
    if match:
        return _unescape(match.group(1))

    match = _SINGLE_QUOTED.fullmatch(raw)
    if match:
        return match.group(1)

    value = raw.split(" #", 1)[0].strip()
    return SPECIAL_VALUES.get(value.lower(), value)


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse one line into ``(name, value)``.

    Returns None for blank lines, comments and lines without ``=`` or
    without a name.
    """
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    name, raw_value = line.split("=", 1)
    name = name.strip()
    if not name:
        return None
    return name, parse_value(raw_value)


class EnvLoader:
    """Load ``.env`` files, accumulating values across calls.

    Example:
        loader = EnvLoader(set_env=True, set_putenv=False)
        if loader.load("/srv/app/.env"):
            debug = loader.get("APP_DEBUG", "false")
    """

    def __init__(
        self,
        set_env: bool = True,
        set_putenv: bool = False,
        env_store: Optional[Environment] = None,
        process_env: Optional[Environment] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Create an env loader.

        Args:
            set_env: Mirror parsed values into ``env_store``
            set_putenv: Export parsed values into ``process_env``
            env_store: Mirror target (default: module-level ``loaded_env``)
            process_env: Export target (default: ``os.environ``)
            logger: Optional logger instance
        """
        self.set_env = set_env
        self.set_putenv = set_putenv
        self.env_store = env_store if env_store is not None else loaded_env
        self.process_env = process_env if process_env is not None else ProcessEnvironment()
        self.logger = logger or create_logger(name="dotconf-env")
        self._values: Dict[str, str] = {}

    def load(self, path: Optional[Union[str, Path]] = None) -> bool:
        """Load an environment file.

        A missing or unreadable file is not an error: the method returns
        False and the parsed values are left as they were.

        Args:
            path: Path to the file; when omitted the nearest ``.env`` from
                the current directory upwards is used

        Returns:
            True if the file was read and parsed
        """
        if path is None:
            found = find_dotenv(usecwd=True)
            if not found:
                self.logger.debug("No .env file found from working directory")
                return False
            path = found

        env_path = Path(path)
        if not env_path.is_file() or not os.access(env_path, os.R_OK):
            self.logger.debug("Env file not loaded", path=str(env_path))
            return False

        try:
            # Only \n separates lines; parse_line trims a trailing \r
            lines = env_path.read_text(encoding="utf-8").split("\n")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Failed to read env file", path=str(env_path), error=str(e))
            return False

        count = 0
        for line in lines:
            parsed = parse_line(line)
            if parsed is None:
                continue
            self._store(*parsed)
            count += 1

        self.logger.debug("Env file loaded", path=str(env_path), entries=count)
        return True

    def _store(self, name: str, value: str) -> None:
        self._values[name] = value
        if self.set_env:
            self.env_store.set(name, value)
        if self.set_putenv:
            self.process_env.set(name, value)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._values

    def all(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values


def env(
    key: str,
    default: object = None,
    *,
    store: Optional[Environment] = None,
    process: Optional[Environment] = None,
) -> object:
    """Look up ``key`` in the mirrored store, then the OS environment.

    This reads process-wide state: the result reflects whatever the most
    recent mirroring ``EnvLoader.load`` (or anything else touching the
    environment) has set.

    Args:
        key: Variable name
        default: Returned when neither source has the key
        store: Mirrored values to check first (default: ``loaded_env``)
        process: OS environment to check second (default: ``os.environ``)
    """
    store = store if store is not None else loaded_env
    value = store.get(key)
    if value is not None:
        return value

    process = process if process is not None else ProcessEnvironment()
    value = process.get(key)
    if value is not None:
        return value

    return default


__all__ = [
    "Environment",
    "MemoryEnvironment",
    "ProcessEnvironment",
    "loaded_env",
    "EnvLoader",
    "env",
    "parse_line",
    "parse_value",
    "SPECIAL_VALUES",
]
