"""
Add Command

Install a command from the registry into a commands directory.

Sources:
- registry_entry: the registry's own commands/<name>/<name>.md
  (copied from the local registry in development mode, downloaded otherwise)
- remote_link: the command's url (GitHub blob URLs are fetched raw)
"""

from pathlib import Path

from slashctl.commands.scope import resolve_use_user_dir
from slashctl.config import ConfigManager
from slashctl.errors import (
    CommandAlreadyExistsError,
    CommandNotFoundInRegistryError,
    InvalidCommandConfigError,
)
from slashctl.registry import (
    RegistryLoader,
    find_command_async,
    get_default_loader,
    is_registry_entry,
    is_remote_link,
)
from slashctl.utils import Logger
from slashctl.utils.files import (
    command_exists,
    copy_local_command,
    download_command,
    scope_name,
    validate_command_name,
)


async def add_command(
    command_name: str,
    name: str | None = None,
    project: bool = False,
    user: bool = False,
    loader: RegistryLoader | None = None,
    logger: Logger | None = None,
) -> Path:
    """
    Add a command from the registry.
    
    Args:
        command_name: Registry name of the command
        name: Install under a different name
        project: Install into ./.claude/commands (default)
        user: Install into ~/.claude/commands
        loader: Registry loader (default: process-wide loader)
        
    Returns:
        Path of the installed file
    """
    logger = logger or Logger()
    loader = loader or get_default_loader()
    target_name = name or command_name
    use_user_dir = resolve_use_user_dir(project, user)
    validate_command_name(target_name)
    
    command = await find_command_async(command_name, loader)
    if command is None:
        raise CommandNotFoundInRegistryError(command_name)
    
    if command_exists(target_name, use_user_dir):
        raise CommandAlreadyExistsError(target_name, scope_name(use_user_dir))
    
    if is_registry_entry(command):
        if loader.is_local_mode_available():
            source_path = loader.locator.hosted_command_path(command_name)
            logger.debug(f"Copying {command_name} from {source_path}")
            path = copy_local_command(source_path, target_name, use_user_dir)
            print(f'Added command "{target_name}" from local registry')
        else:
            base_url = ConfigManager.get_instance().get().commands_base_url
            url = f"{base_url}/{command_name}/{command_name}.md"
            logger.debug(f"Downloading {command_name} from {url}")
            path = await download_command(url, target_name, use_user_dir, timeout=loader.timeout)
            print(f'Added command "{target_name}" from GitHub registry')
    elif is_remote_link(command):
        logger.debug(f"Downloading {command_name} from {command.url}")
        path = await download_command(command.url, target_name, use_user_dir, timeout=loader.timeout)
        print(f'Added command "{target_name}" from {command.url}')
    else:
        raise InvalidCommandConfigError(command_name)
    
    return path
