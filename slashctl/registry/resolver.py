"""
Command Resolver
Look up a single command by name in the loaded registry.
"""

from slashctl.registry.loader import RegistryLoader, get_default_loader
from slashctl.registry.models import RegistryCommand


class CommandResolver:
    """Exact-match command lookup. Caching is left to the loader."""

    def __init__(self, loader: RegistryLoader):
        self.loader = loader

    def find(self, name: str) -> RegistryCommand | None:
        return self.loader.load().get(name)

    async def find_async(self, name: str) -> RegistryCommand | None:
        registry = await self.loader.load_async()
        return registry.get(name)


def find_command(name: str, loader: RegistryLoader | None = None) -> RegistryCommand | None:
    """Find a command without awaiting (development mode only). None if absent."""
    return CommandResolver(loader or get_default_loader()).find(name)


async def find_command_async(
    name: str, loader: RegistryLoader | None = None
) -> RegistryCommand | None:
    """Find a command in the local or remote registry. None if absent."""
    return await CommandResolver(loader or get_default_loader()).find_async(name)
