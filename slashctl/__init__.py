"""
slashctl
Manage custom slash commands from a shared registry.
"""

__version__ = "0.1.0"
__package_name__ = "slashctl"
