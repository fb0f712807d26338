"""Tests for configuration."""

from pathlib import Path

import pytest

from slashctl.config import ConfigManager, get_commands_base_url, get_http_timeout
from slashctl.config.registry import DEFAULT_COMMANDS_URL, DEFAULT_REGISTRY_URL


class TestConfig:
    """Test Config and ConfigManager."""
    
    def test_defaults(self, tmp_path):
        config = ConfigManager.get_instance().load()
        
        assert config.registry_url == DEFAULT_REGISTRY_URL
        assert config.commands_base_url == DEFAULT_COMMANDS_URL
        assert config.http_timeout == 15.0
        assert config.user_agent == "slashctl"
        assert config.user_commands_dir == tmp_path / "home" / ".claude" / "commands"
    
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SLASHCTL_REGISTRY_URL", "https://mirror.test/registry.yml")
        monkeypatch.setenv("SLASHCTL_COMMANDS_URL", "https://mirror.test/commands/")
        monkeypatch.setenv("SLASHCTL_HTTP_TIMEOUT", "2.5")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        
        config = ConfigManager.get_instance().load()
        
        assert config.registry_url == "https://mirror.test/registry.yml"
        assert config.commands_base_url == "https://mirror.test/commands"
        assert config.http_timeout == 2.5
        assert config.log_level == "DEBUG"
    
    def test_user_home_expands_tilde(self, monkeypatch):
        monkeypatch.setenv("SLASHCTL_USER_HOME", "~/custom-claude")
        
        config = ConfigManager.get_instance().load()
        
        assert config.user_home == Path.home() / "custom-claude"
    
    def test_get_creates_default(self):
        manager = ConfigManager.get_instance()
        
        assert manager.get() is manager.get()
    
    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("SLASHCTL_HTTP_TIMEOUT", "soon")
        
        with pytest.raises(ValueError, match="SLASHCTL_HTTP_TIMEOUT"):
            get_http_timeout()
    
    def test_commands_url_trailing_slash(self, monkeypatch):
        monkeypatch.setenv("SLASHCTL_COMMANDS_URL", "https://mirror.test/c///")
        
        assert get_commands_base_url() == "https://mirror.test/c"
