"""
Settings
Configuration management for slashctl.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from slashctl.config.registry import (
    USER_AGENT,
    get_commands_base_url,
    get_http_timeout,
    get_registry_url,
    get_user_home,
)


@dataclass
class Config:
    """Runtime configuration."""
    registry_url: str = ""
    commands_base_url: str = ""
    user_home: Path = field(default_factory=get_user_home)
    http_timeout: float = field(default_factory=get_http_timeout)
    log_level: str = "WARNING"
    user_agent: str = USER_AGENT
    
    def __post_init__(self):
        if not self.registry_url:
            self.registry_url = get_registry_url()
        if not self.commands_base_url:
            self.commands_base_url = get_commands_base_url()
    
    @property
    def user_commands_dir(self) -> Path:
        return self.user_home / "commands"


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    def load(self) -> Config:
        """Load configuration from environment (and .env, if present)."""
        load_dotenv()
        self._config = Config(
            registry_url=get_registry_url(),
            commands_base_url=get_commands_base_url(),
            user_home=get_user_home(),
            http_timeout=get_http_timeout(),
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
        )
        return self._config
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config()
        return self._config
    
    def reset(self) -> None:
        self._config = None
