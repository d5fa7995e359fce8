"""Path resolution for application-relative locations.

Example:
    paths = PathResolver("/srv/app")
    paths.path(".env")      # /srv/app/.env
    paths.path("@config")   # /srv/app/config
"""

from pathlib import Path
from typing import Dict, Optional, Union

from dotconf.exceptions import ConfigurationError

DEFAULT_ALIASES: Dict[str, str] = {"@config": "config"}


class PathResolver:
    """Resolve names relative to a base directory, with ``@alias`` support."""

    def __init__(
        self,
        base_path: Union[str, Path],
        aliases: Optional[Dict[str, str]] = None,
    ) -> None:
        self.base_path = Path(base_path)
        self.aliases = dict(DEFAULT_ALIASES)
        if aliases:
            self.aliases.update(aliases)

    def path(self, name: str = "") -> Path:
        """Return the absolute-or-base-relative path for ``name``.

        Raises:
            ConfigurationError: If ``name`` is an unknown ``@alias``
        """
        if name.startswith("@"):
            alias, _, rest = name.partition("/")
            if alias not in self.aliases:
                raise ConfigurationError(
                    "UNKNOWN_PATH_ALIAS",
                    f"Unknown path alias '{alias}'",
                    {"known": sorted(self.aliases)},
                )
            name = f"{self.aliases[alias]}/{rest}" if rest else self.aliases[alias]

        candidate = Path(name)
        if candidate.is_absolute():
            return candidate
        return self.base_path / candidate if name else self.base_path
