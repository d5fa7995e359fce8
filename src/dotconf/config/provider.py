"""Configuration service provider.

Registers a lazily-built ``ConfigRepository``: the first resolution loads
the optional ``.env`` file, then every fragment in the config directory.
"""

from typing import Optional

from dotconf.application import Application
from dotconf.config.env_loader import EnvLoader
from dotconf.config.repository import ConfigRepository
from dotconf.config.settings import LoaderSettings
from dotconf.provider import ServiceProvider


class ConfigServiceProvider(ServiceProvider):
    """Bind ``ConfigRepository`` (alias ``"config"``) and ``EnvLoader``."""

    def __init__(self, settings: Optional[LoaderSettings] = None) -> None:
        super().__init__()
        self.settings = settings or LoaderSettings.from_env()

    def register(self, app: Application) -> None:
        super().register(app)

        self.singleton(
            EnvLoader,
            lambda: EnvLoader(
                set_env=self.settings.set_env,
                set_putenv=self.settings.set_putenv,
            ),
        )
        self.singleton(ConfigRepository, self._build_repository)
        app.alias("config", ConfigRepository)

    def _build_repository(self) -> ConfigRepository:
        app = self._require_app()
        paths = app.paths()

        # A missing .env is not an error
        loader: EnvLoader = self.make(EnvLoader)
        loader.load(paths.path(self.settings.env_file))

        config = ConfigRepository()
        config.load_directory(paths.path(self.settings.config_dir))
        return config
