"""Tests for RegistryLocator."""

from pathlib import Path

from slashctl.registry.locator import RegistryLocator


class TestRegistryLocator:
    """Test RegistryLocator."""
    
    def test_resolve_path_prefers_working_directory(self, tmp_path, registry_writer):
        """Should return the working directory candidate when it exists."""
        cwd = tmp_path / "cwd"
        install = tmp_path / "install"
        cwd_path = registry_writer(cwd)
        registry_writer(install)
        
        locator = RegistryLocator(cwd=cwd, install_root=install)
        
        assert locator.resolve_path() == cwd_path
        assert locator.is_local_mode_available()
    
    def test_resolve_path_falls_back_to_install_root(self, tmp_path, registry_writer):
        """Should use the installation-relative registry when cwd has none."""
        install_path = registry_writer(tmp_path / "install")
        
        locator = RegistryLocator(cwd=tmp_path / "cwd", install_root=tmp_path / "install")
        
        assert locator.resolve_path() == install_path
        assert locator.is_local_mode_available()
    
    def test_resolve_path_defaults_to_working_directory(self, tmp_path):
        """Should return the cwd candidate when no registry exists."""
        locator = RegistryLocator(cwd=tmp_path / "cwd", install_root=tmp_path / "install")
        
        assert locator.resolve_path() == tmp_path / "cwd" / ".registry" / "registry.yml"
        assert not locator.is_local_mode_available()
    
    def test_availability_is_not_cached(self, tmp_path, registry_writer):
        """Should reflect filesystem changes between calls."""
        locator = RegistryLocator(cwd=tmp_path, install_root=tmp_path / "install")
        assert not locator.is_local_mode_available()
        
        path = registry_writer(tmp_path)
        assert locator.is_local_mode_available()
        
        path.unlink()
        assert not locator.is_local_mode_available()
    
    def test_uses_current_working_directory_by_default(self, tmp_path):
        locator = RegistryLocator(install_root=tmp_path / "install")
        
        assert locator.cwd_candidate == Path.cwd() / ".registry" / "registry.yml"
    
    def test_hosted_command_path(self, tmp_path, registry_writer):
        registry_writer(tmp_path)
        locator = RegistryLocator(cwd=tmp_path, install_root=tmp_path / "install")
        
        assert locator.hosted_command_path("history") == (
            tmp_path / ".registry" / "commands" / "history" / "history.md"
        )
