"""Minimal dependency container.

Bindings are keyed by a string name or a class. Factories receive no
arguments; close over whatever they need.

Example:
    container = Container()
    container.singleton(ConfigRepository, lambda: ConfigRepository())
    container.alias("config", ConfigRepository)

    container.make("config") is container.make(ConfigRepository)   # True
"""

from typing import Any, Callable, Dict, Hashable, Tuple

from dotconf.exceptions import BindingResolutionError

Factory = Callable[[], Any]


def _display_name(name: Hashable) -> str:
    return getattr(name, "__qualname__", None) or str(name)


class Container:
    """Registry of factories, shared instances and aliases."""

    def __init__(self) -> None:
        self._bindings: Dict[Hashable, Tuple[Factory, bool]] = {}
        self._instances: Dict[Hashable, Any] = {}
        self._aliases: Dict[Hashable, Hashable] = {}

    def bind(self, name: Hashable, factory: Factory, shared: bool = False) -> None:
        """Register a factory, called on every ``make`` unless ``shared``."""
        self._instances.pop(name, None)
        self._bindings[name] = (factory, shared)

    def singleton(self, name: Hashable, factory: Factory) -> None:
        """Register a factory that runs once, on first resolution."""
        self.bind(name, factory, shared=True)

    def instance(self, name: Hashable, obj: Any) -> Any:
        self._bindings.pop(name, None)
        self._instances[name] = obj
        return obj

    def alias(self, alias: Hashable, name: Hashable) -> None:
        self._aliases[alias] = name

    def _resolve_name(self, name: Hashable) -> Hashable:
        seen = set()
        while name in self._aliases and name not in seen:
            seen.add(name)
            name = self._aliases[name]
        return name

    def bound(self, name: Hashable) -> bool:
        name = self._resolve_name(name)
        return name in self._bindings or name in self._instances

    def resolved(self, name: Hashable) -> bool:
        return self._resolve_name(name) in self._instances

    def make(self, name: Hashable) -> Any:
        """Resolve ``name`` to an object.

        Raises:
            BindingResolutionError: If nothing is bound under ``name``
        """
        target = self._resolve_name(name)
        if target in self._instances:
            return self._instances[target]
        if target not in self._bindings:
            raise BindingResolutionError(_display_name(name))

        factory, shared = self._bindings[target]
        obj = factory()
        if shared:
            self._instances[target] = obj
        return obj
