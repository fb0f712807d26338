"""
Registry Configuration

Centralized locations for the remote registry and the commands directories.
"""

import os
from pathlib import Path

DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/codemountains/ccccctl-registry/main/registry.yml"
)
DEFAULT_COMMANDS_URL = (
    "https://raw.githubusercontent.com/codemountains/ccccctl-registry/main/commands"
)
DEFAULT_HTTP_TIMEOUT = 15.0

USER_AGENT = "slashctl"


def get_registry_url() -> str:
    """Get the remote registry document URL.
    
    Uses SLASHCTL_REGISTRY_URL env var if set.
    """
    return os.environ.get("SLASHCTL_REGISTRY_URL") or DEFAULT_REGISTRY_URL


def get_commands_base_url() -> str:
    """Get the base URL of registry-hosted command files (no trailing slash)."""
    url = os.environ.get("SLASHCTL_COMMANDS_URL") or DEFAULT_COMMANDS_URL
    return url.rstrip("/")


def get_user_home() -> Path:
    """Get the user-scope root directory.
    
    Uses SLASHCTL_USER_HOME env var if set, otherwise ~/.claude/
    """
    env_home = os.environ.get("SLASHCTL_USER_HOME")
    if env_home:
        # Expand ~ to actual home directory if present
        return Path(os.path.expanduser(env_home))
    return Path.home() / ".claude"


def get_http_timeout() -> float:
    """Get the HTTP timeout in seconds.
    
    Raises ValueError if SLASHCTL_HTTP_TIMEOUT is not a number.
    """
    raw = os.environ.get("SLASHCTL_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ValueError(
            f"SLASHCTL_HTTP_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None
