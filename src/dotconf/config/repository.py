"""Configuration repository with dot-notation access.

Example:
    from dotconf.config import ConfigRepository

    config = ConfigRepository({"app": {"debug": "yes"}})
    config.load_directory("/srv/app/config")     # app.json -> config["app"]

    config.bool("app.debug")                     # True
    config.int("database.port", 5432)
    config.set("cache.redis.host", "localhost")
"""

from __future__ import annotations

import copy
import json
import math
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotconf.config.dotted import data_get, data_has, data_set, merge_recursive
from dotconf.logger import Logger, create_logger

CONFIG_FILE_PATTERN = "*.json"
TRUTHY_STRINGS = frozenset({"true", "1", "yes", "on"})

_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _numeric_prefix(value: str) -> str:
    match = _NUMERIC_PREFIX.match(value)
    return match.group(1) if match else "0"


def to_float(value: Any, default: float = 0.0) -> float:
    """Best-effort float cast.

    Strings use their longest leading numeric prefix ("3.9kg" -> 3.9,
    "abc" -> 0.0). Containers count as 1.0 when non-empty. Objects with no
    sensible numeric reading yield ``default``.
    """
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        return float(_numeric_prefix(value))
    if isinstance(value, (list, dict)):
        return 1.0 if value else 0.0
    return default


def to_int(value: Any, default: int = 0) -> int:
    """Best-effort integer cast, truncating toward zero.

    "12abc" -> 12, "1e3" -> 1000, "abc" -> 0. Non-finite floats become 0.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        prefix = _numeric_prefix(value)
        if prefix.lstrip("+-").isdigit():
            return int(prefix)
        value = float(prefix)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if value is None:
        return 0
    if isinstance(value, (list, dict)):
        return 1 if value else 0
    return default


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in TRUTHY_STRINGS
    return bool(value)


def to_str(value: Any) -> str:
    """Stringify a config value.

    None and False become "", True becomes "1", whole floats drop their
    ".0" (8080.0 -> "8080") and containers become compact JSON.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


class ConfigRepository:
    """Nested configuration values addressed by dotted paths.

    Reads never raise: a missing path, or one that runs into a scalar before
    it is exhausted, yields the caller's default. Typed accessors coerce on a
    best-effort basis and fall back to the default instead of failing.

    ``all()`` returns a deep copy; mutating it does not change the repository.
    """

    def __init__(
        self,
        items: Optional[Mapping[str, Any]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._items: Dict[str, Any] = copy.deepcopy(dict(items)) if items else {}
        self.logger = logger or create_logger(name="dotconf-repository")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g. ``app.debug``)."""
        return data_get(self._items, key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a value using dot notation, creating intermediate levels."""
        data_set(self._items, key, value)

    def has(self, key: str) -> bool:
        return data_has(self._items, key)

    def all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._items)

    def string(self, key: str, default: str = "") -> str:
        return to_str(self.get(key, default))

    def int(self, key: str, default: int = 0) -> int:
        return to_int(self.get(key, default), default)

    def float(self, key: str, default: float = 0.0) -> float:
        return to_float(self.get(key, default), default)

    def bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean.

        Strings are true only for "true", "1", "yes" or "on" (any case);
        every other string, "maybe" included, is false.
        """
        return to_bool(self.get(key, default))

    def array(self, key: str, default: Optional[Union[list, dict]] = None) -> Union[list, dict]:
        """Get a list or dict value.

        Scalars are never wrapped; they yield ``default`` (``[]`` if omitted).
        """
        if default is None:
            default = []
        value = self.get(key, default)
        return value if isinstance(value, (list, dict)) else default

    def load_directory(self, path: Union[str, Path]) -> None:
        """Load every ``*.json`` file in ``path`` under its filename stem.

        ``config/database.json`` replaces whatever is stored under
        ``database``. Only list or dict documents are kept. A missing
        directory, an unreadable file or malformed JSON is logged and skipped.
        """
        directory = Path(path)
        if not directory.is_dir():
            self.logger.debug("Config directory not found, skipping", path=str(directory))
            return

        loaded = 0
        for file in sorted(directory.glob(CONFIG_FILE_PATTERN)):
            if not file.is_file():
                continue
            try:
                document = json.loads(file.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                self.logger.warning("Skipping unreadable config file", path=str(file), error=str(e))
                continue

            if not isinstance(document, (list, dict)):
                self.logger.debug(
                    "Discarding config file without a container value",
                    path=str(file),
                    type=type(document).__name__,
                )
                continue

            self._items[file.stem] = document
            loaded += 1

        self.logger.debug("Config directory loaded", path=str(directory), files=loaded)

    def merge(self, items: Mapping[str, Any]) -> None:
        """Deep-merge ``items``; dicts merge recursively, anything else replaces."""
        self._items = merge_recursive(self._items, copy.deepcopy(dict(items)))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __getitem__(self, key: str) -> Any:
        if not self.has(key):
            raise KeyError(key)
        return self.get(key)

    def __len__(self) -> int:
        return len(self._items)


__all__ = [
    "ConfigRepository",
    "CONFIG_FILE_PATTERN",
    "TRUTHY_STRINGS",
    "to_bool",
    "to_float",
    "to_int",
    "to_str",
]
