"""Application container that owns paths and service providers."""

from pathlib import Path
from typing import Dict, List, Optional, Union

from dotconf.container import Container
from dotconf.logger import Logger, create_logger
from dotconf.paths import PathResolver
from dotconf.provider import ServiceProvider


class Application(Container):
    """A ``Container`` with a base path and a provider lifecycle.

    Example:
        app = Application("/srv/app")
        app.register(ConfigServiceProvider())
        app.boot()

        config = app.make("config")
    """

    def __init__(
        self,
        base_path: Union[str, Path],
        aliases: Optional[Dict[str, str]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__()
        self._paths = PathResolver(base_path, aliases)
        self._providers: List[ServiceProvider] = []
        self._booted = False
        self.logger = logger or create_logger(name="dotconf")
        self.instance("app", self)

    def paths(self) -> PathResolver:
        return self._paths

    def register(self, provider: ServiceProvider) -> ServiceProvider:
        """Register a provider; if the application already booted, boot it too."""
        provider.register(self)
        self._providers.append(provider)
        self.logger.debug("Service provider registered", provider=type(provider).__name__)
        if self._booted:
            provider.boot()
        return provider

    def boot(self) -> None:
        if self._booted:
            return
        for provider in self._providers:
            provider.boot()
        self._booted = True

    @property
    def booted(self) -> bool:
        return self._booted
