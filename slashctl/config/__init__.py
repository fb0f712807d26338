"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config
from .registry import (
    USER_AGENT,
    get_commands_base_url,
    get_http_timeout,
    get_registry_url,
    get_user_home,
)

__all__ = [
    "ConfigManager",
    "Config",
    "USER_AGENT",
    "get_registry_url",
    "get_commands_base_url",
    "get_http_timeout",
    "get_user_home",
]
