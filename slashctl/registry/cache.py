"""
Registry Cache
Single-slot holder for the last successfully validated registry.
"""

from slashctl.registry.models import Registry


class RegistryCache:
    """
    Holds at most one Registry.

    Owned by whoever constructs the RegistryLoader. Only a fully validated
    registry is ever stored; clear() is the only way to empty it.
    """

    def __init__(self):
        self._registry: Registry | None = None

    @property
    def is_populated(self) -> bool:
        return self._registry is not None

    def get(self) -> Registry | None:
        return self._registry

    def set(self, registry: Registry) -> None:
        self._registry = registry

    def clear(self) -> None:
        self._registry = None
