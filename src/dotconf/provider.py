"""Service provider base class."""

from typing import TYPE_CHECKING, Any, Hashable, Optional

from dotconf.container import Factory

if TYPE_CHECKING:
    from dotconf.application import Application


class ServiceProvider:
    """Registers a group of related bindings into an application.

    Subclasses override ``register`` (bindings only, nothing resolved) and
    optionally ``boot`` (runs after every provider has registered).
    """

    def __init__(self) -> None:
        self.app: Optional["Application"] = None

    def register(self, app: "Application") -> None:
        self.app = app

    def boot(self) -> None:
        pass

    def _require_app(self) -> "Application":
        if self.app is None:
            raise RuntimeError(f"{type(self).__name__} used before register()")
        return self.app

    def singleton(self, name: Hashable, factory: Factory) -> None:
        self._require_app().singleton(name, factory)

    def bind(self, name: Hashable, factory: Factory) -> None:
        self._require_app().bind(name, factory)

    def make(self, name: Hashable) -> Any:
        return self._require_app().make(name)
