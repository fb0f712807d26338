"""
Shared pytest fixtures for slashctl tests

Centralized mocking infrastructure for the registry loader, the HTTP client
and the two commands directories.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


SAMPLE_REGISTRY_YAML = """\
commands:
  - type: registry_entry
    name: history
    author: test-author
    description: Show prompt history.
  - type: remote_link
    name: example
    author: github-author
    description: Example command.
    url: https://github.com/someone/example/blob/main/.claude/commands/example.md
"""


# ============================================================================
# Mock Helpers
# ============================================================================

def make_response(status_code: int = 200, text: str = "", reason_phrase: str = "OK") -> Mock:
    """Build a stand-in for httpx.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.reason_phrase = reason_phrase
    return response


def make_async_client(*responses) -> AsyncMock:
    """
    Build a stand-in for httpx.AsyncClient used as an async context manager.

    Each response is returned by one call to get(); a further call raises.
    Pass an exception instance to have get() raise it instead.

    Usage:
        client = make_async_client(make_response(404, reason_phrase="Not Found"))
        with patch('slashctl.registry.loader.httpx.AsyncClient', return_value=client):
            ...
    """
    client = AsyncMock()
    client.get = AsyncMock(side_effect=list(responses))
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


def write_registry(root: Path, content: str = SAMPLE_REGISTRY_YAML) -> Path:
    """Write .registry/registry.yml under root and return its path."""
    path = root / ".registry" / "registry.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Run every test in its own working directory and user home.

    Also drops the process-wide loader and config so no state leaks
    between tests.
    """
    from slashctl.config import ConfigManager
    from slashctl.registry.loader import RegistryLoader

    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("SLASHCTL_USER_HOME", str(tmp_path / "home" / ".claude"))
    for var in ("SLASHCTL_REGISTRY_URL", "SLASHCTL_COMMANDS_URL", "SLASHCTL_HTTP_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)

    ConfigManager.get_instance().reset()
    RegistryLoader.reset_instance()
    yield
    ConfigManager.get_instance().reset()
    RegistryLoader.reset_instance()


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from slashctl.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def install_root(tmp_path):
    """Stand-in for the installed package location (empty by default)."""
    root = tmp_path / "install"
    root.mkdir()
    return root


@pytest.fixture
def locator(install_root):
    """Locator rooted at the test working directory."""
    from slashctl.registry.locator import RegistryLocator
    return RegistryLocator(cwd=Path.cwd(), install_root=install_root)


@pytest.fixture
def local_registry():
    """Write the sample registry into the working directory (development mode)."""
    return write_registry(Path.cwd())


@pytest.fixture
def loader(locator):
    """Loader with a fresh cache over the test locator."""
    from slashctl.registry.cache import RegistryCache
    from slashctl.registry.loader import RegistryLoader
    return RegistryLoader(
        locator=locator,
        cache=RegistryCache(),
        registry_url="https://registry.example.test/registry.yml",
    )


@pytest.fixture
def default_loader(loader):
    """Install `loader` as the process-wide loader used by module-level helpers."""
    from slashctl.registry.loader import RegistryLoader
    RegistryLoader._instance = loader
    return loader


@pytest.fixture
def project_commands_dir():
    return Path.cwd() / ".claude" / "commands"


@pytest.fixture
def user_commands_dir(tmp_path):
    return tmp_path / "home" / ".claude" / "commands"


@pytest.fixture
def registry_writer():
    """Returns write_registry(root, content=SAMPLE_REGISTRY_YAML) -> Path."""
    return write_registry


@pytest.fixture
def http_client():
    """Returns make_async_client(*responses) for patching httpx.AsyncClient."""
    return make_async_client


@pytest.fixture
def http_response():
    """Returns make_response(status_code=200, text="", reason_phrase="OK")."""
    return make_response


@pytest.fixture
def sample_yaml():
    return SAMPLE_REGISTRY_YAML
