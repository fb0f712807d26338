"""
Commands Module
Implementations of the add, list and remove subcommands.
"""

from .add import add_command
from .list_cmd import list_commands
from .remove import remove_command

__all__ = ["add_command", "list_commands", "remove_command"]
