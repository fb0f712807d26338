"""
Registry Models
Typed representation of a validated registry document.

A registry command is one of two variants, distinguished by its `type` tag:
- registry_entry: content hosted by the registry itself
- remote_link: content downloaded from an arbitrary URL
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, Mapping, Union


class CommandType(str, Enum):
    """Variant tag of a registry command."""
    REGISTRY_ENTRY = "registry_entry"
    REMOTE_LINK = "remote_link"


# Tag values found in existing registry documents
TYPE_ALIASES: dict[str, CommandType] = {
    "registry_entry": CommandType.REGISTRY_ENTRY,
    "ccccctl_registry": CommandType.REGISTRY_ENTRY,
    "registry_directory": CommandType.REGISTRY_ENTRY,
    "remote_link": CommandType.REMOTE_LINK,
    "github": CommandType.REMOTE_LINK,
}


@dataclass(frozen=True)
class RegistryEntryCommand:
    """Command whose content lives in the registry's own commands directory."""
    type: ClassVar[CommandType] = CommandType.REGISTRY_ENTRY

    name: str
    author: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "name": self.name,
            "author": self.author,
            "description": self.description,
        }


@dataclass(frozen=True)
class RemoteLinkCommand:
    """Command whose content is downloaded from `url`."""
    type: ClassVar[CommandType] = CommandType.REMOTE_LINK

    name: str
    author: str
    description: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "name": self.name,
            "author": self.author,
            "description": self.description,
            "url": self.url,
        }


RegistryCommand = Union[RegistryEntryCommand, RemoteLinkCommand]


@dataclass(frozen=True)
class Registry:
    """Validated registry. Command names are unique."""
    commands: tuple[RegistryCommand, ...] = ()

    def names(self) -> list[str]:
        return [cmd.name for cmd in self.commands]

    def get(self, name: str) -> RegistryCommand | None:
        """Exact-match lookup by name."""
        for cmd in self.commands:
            if cmd.name == name:
                return cmd
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"commands": [cmd.to_dict() for cmd in self.commands]}


# ============================================================================
# Type guards
# ============================================================================

def is_registry_entry(command: RegistryCommand) -> bool:
    return command.type is CommandType.REGISTRY_ENTRY


def is_remote_link(command: RegistryCommand) -> bool:
    return command.type is CommandType.REMOTE_LINK


def is_registry_command_like(obj: Any) -> bool:
    """
    Cheap structural check over a raw mapping.

    Unlike validate_command this does not trim strings or report why
    the object was rejected.
    """
    if not isinstance(obj, Mapping):
        return False

    for key in ("name", "author", "description", "type"):
        if not isinstance(obj.get(key), str):
            return False

    tag = TYPE_ALIASES.get(obj["type"])
    if tag is None:
        return False

    if tag is CommandType.REMOTE_LINK and not isinstance(obj.get("url"), str):
        return False

    return True


def filter_commands_by_type(
    commands: Iterable[RegistryCommand],
    command_type: CommandType | str,
) -> list[RegistryCommand]:
    """Return the commands whose tag matches `command_type` (aliases allowed)."""
    if isinstance(command_type, CommandType):
        wanted = command_type
    else:
        wanted = TYPE_ALIASES.get(command_type)
    return [cmd for cmd in commands if cmd.type is wanted]
