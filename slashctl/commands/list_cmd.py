"""
List Command

Print every command available in the registry.
"""

from slashctl.registry import RegistryLoader, get_default_loader, is_remote_link


async def list_commands(loader: RegistryLoader | None = None, verbose: bool = False) -> int:
    """Print the registry's commands. Returns the number of commands listed."""
    loader = loader or get_default_loader()
    if verbose:
        print(f"Source: {loader.source_description()}")
    
    registry = await loader.load_async()
    
    print("Available commands:")
    print("")
    
    for command in registry.commands:
        print(f"  {command.name}")
        print(f"    Description: {command.description}")
        print(f"    Author: {command.author}")
        print(f"    Type: {command.type.value}")
        if is_remote_link(command):
            print(f"    URL: {command.url}")
        print("")
    
    return len(registry.commands)
