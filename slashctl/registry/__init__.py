"""
Registry Module
Locate, load, validate and query the command registry.
"""

from .cache import RegistryCache
from .loader import (
    RegistryLoader,
    clear_registry_cache,
    get_default_loader,
    get_registry_path,
    is_local_mode_available,
    load_registry,
    load_registry_async,
)
from .locator import RegistryLocator
from .models import (
    CommandType,
    Registry,
    RegistryCommand,
    RegistryEntryCommand,
    RemoteLinkCommand,
    filter_commands_by_type,
    is_registry_command_like,
    is_registry_entry,
    is_remote_link,
)
from .resolver import CommandResolver, find_command, find_command_async
from .validation import validate_command, validate_registry

__all__ = [
    # Models
    "CommandType",
    "Registry",
    "RegistryCommand",
    "RegistryEntryCommand",
    "RemoteLinkCommand",
    "filter_commands_by_type",
    "is_registry_command_like",
    "is_registry_entry",
    "is_remote_link",
    # Validation
    "validate_command",
    "validate_registry",
    # Loading
    "RegistryCache",
    "RegistryLocator",
    "RegistryLoader",
    "get_default_loader",
    "get_registry_path",
    "is_local_mode_available",
    "load_registry",
    "load_registry_async",
    "clear_registry_cache",
    # Lookup
    "CommandResolver",
    "find_command",
    "find_command_async",
]
