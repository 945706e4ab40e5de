"""Per-kind resource caches keyed by path, loaded on demand."""

from __future__ import annotations

import copy
from typing import Any, Callable, ClassVar, Generic, TypeVar

__all__ = ["ResourceManager"]

T = TypeVar("T")

Loader = Callable[[str], "T | None"]


class ResourceManager(Generic[T]):
    """Caches resources produced by ``loader``.

    The loader takes a path and returns the resource, or returns None or
    raises OSError/ValueError when it cannot load it.  ``get`` hands back
    ``empty`` for anything that cannot be loaded.
    """

    _instances: ClassVar[dict[str, ResourceManager[Any]]] = {}

    def __init__(self, loader: Callable[[str], T | None], empty: T | None = None) -> None:
        self._loader = loader
        self.empty = empty
        self._resources: dict[str, T] = {}

    @classmethod
    def instance(
        cls, name: str, loader: Callable[[str], Any] | None = None
    ) -> ResourceManager[Any]:
        """Return the shared manager called ``name``, creating it with ``loader``."""
        manager = cls._instances.get(name)
        if manager is None:
            if loader is None:
                raise ValueError(f"no resource manager named {name!r}; a loader is needed")
            manager = cls(loader)
            cls._instances[name] = manager
        return manager

    def save(self, path: str, data: T) -> None:
        """Store a copy of ``data`` under ``path`` unless something is already there."""
        if path in self._resources:
            return
        self._resources[path] = copy.copy(data)

    def load(self, resource_id: str) -> bool:
        """Load ``resource_id``; False if already cached or loading fails."""
        if resource_id in self._resources:
            return False
        try:
            resource = self._loader(resource_id)
        except (OSError, ValueError):
            return False
        if resource is None:
            return False
        self._resources[resource_id] = resource
        return True

    def unload(self, resource_id: str) -> bool:
        return self._resources.pop(resource_id, None) is not None

    def get(self, resource_id: str) -> T | None:
        """Return the cached resource, loading it first if needed."""
        if resource_id not in self._resources and not self.load(resource_id):
            return self.empty
        return self._resources[resource_id]

    def unload_all(self) -> None:
        self._resources.clear()

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)