"""
Remove Command

Delete an installed command from the project or user commands directory.
"""

from slashctl.commands.scope import resolve_use_user_dir
from slashctl.errors import CommandNotFoundLocalError
from slashctl.utils.files import (
    command_exists,
    remove_command as remove_command_file,
    scope_name,
    validate_command_name,
)


def remove_command(command_name: str, project: bool = False, user: bool = False) -> None:
    """Remove an installed command. Raises CommandNotFoundLocalError if absent."""
    use_user_dir = resolve_use_user_dir(project, user)
    validate_command_name(command_name)
    
    if not command_exists(command_name, use_user_dir):
        raise CommandNotFoundLocalError(command_name, scope_name(use_user_dir))
    
    remove_command_file(command_name, use_user_dir)
    print(f'Removed command "{command_name}"')
