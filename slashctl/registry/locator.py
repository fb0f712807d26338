"""
Registry Locator
Find a local registry document, if there is one.

A local registry switches slashctl into development mode. Candidates
(in priority order):
1. ./.registry/registry.yml relative to the working directory
2. .registry/registry.yml next to the installed package
"""

from pathlib import Path

REGISTRY_DIR_NAME = ".registry"
REGISTRY_FILE_NAME = "registry.yml"


def _default_install_root() -> Path:
    # slashctl/registry/locator.py -> checkout root
    return Path(__file__).resolve().parent.parent.parent


class RegistryLocator:
    """Resolves the local registry path. Never touches the filesystem beyond stat calls."""

    def __init__(self, cwd: Path | None = None, install_root: Path | None = None):
        self._cwd = cwd
        self._install_root = install_root

    @property
    def cwd_candidate(self) -> Path:
        root = self._cwd if self._cwd is not None else Path.cwd()
        return root / REGISTRY_DIR_NAME / REGISTRY_FILE_NAME

    @property
    def install_candidate(self) -> Path:
        root = self._install_root if self._install_root is not None else _default_install_root()
        return root / REGISTRY_DIR_NAME / REGISTRY_FILE_NAME

    def resolve_path(self) -> Path:
        """
        Get the local registry path.

        Returns the first candidate that exists, or the working directory
        candidate when neither does.
        """
        cwd_path = self.cwd_candidate
        if cwd_path.exists():
            return cwd_path

        install_path = self.install_candidate
        if install_path.exists():
            return install_path

        return cwd_path

    def is_local_mode_available(self) -> bool:
        """True if a local registry exists right now. Not cached."""
        return self.cwd_candidate.exists() or self.install_candidate.exists()

    def registry_dir(self) -> Path:
        """Directory holding the registry document and its commands/ tree."""
        return self.resolve_path().parent

    def hosted_command_path(self, command_name: str) -> Path:
        """Path of a registry_entry command's content in a local registry."""
        return self.registry_dir() / "commands" / command_name / f"{command_name}.md"
