"""
Command Files

Place, find and delete command markdown files in the two commands directories:
- project: ./.claude/commands/ (default)
- user: ~/.claude/commands/
"""

import logging
import re
import shutil
from pathlib import Path

import httpx

from slashctl.config import ConfigManager
from slashctl.errors import (
    DirectoryCreateError,
    DownloadError,
    FileCopyError,
    FileWriteError,
    InvalidCommandNameError,
)

logger = logging.getLogger(__name__)

GITHUB_BLOB_PATTERN = re.compile(r"^https://github\.com/([^/]+)/([^/]+)/blob/(.+)$")


def get_commands_dir(use_user_dir: bool = False) -> Path:
    """Get the commands directory for the requested scope."""
    if use_user_dir:
        return ConfigManager.get_instance().get().user_commands_dir
    return Path.cwd() / ".claude" / "commands"


def scope_name(use_user_dir: bool) -> str:
    return "user" if use_user_dir else "project"


def ensure_commands_dir(use_user_dir: bool = False) -> Path:
    commands_dir = get_commands_dir(use_user_dir)
    try:
        commands_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(str(commands_dir), e) from e
    return commands_dir


def validate_command_name(command_name: str) -> None:
    """
    Reject names that cannot be used as a single file name.

    Raises:
        InvalidCommandNameError: empty, a path, or a relative directory reference
    """
    if (
        not command_name
        or not command_name.strip()
        or command_name in (".", "..")
        or "/" in command_name
        or "\\" in command_name
    ):
        raise InvalidCommandNameError(command_name)


def get_local_command_path(command_name: str, use_user_dir: bool = False) -> Path:
    return get_commands_dir(use_user_dir) / f"{command_name}.md"


def command_exists(command_name: str, use_user_dir: bool = False) -> bool:
    return get_local_command_path(command_name, use_user_dir).exists()


def copy_local_command(source_path: Path, command_name: str, use_user_dir: bool = False) -> Path:
    """Copy a command file from a local registry into the commands directory."""
    ensure_commands_dir(use_user_dir)
    target_path = get_local_command_path(command_name, use_user_dir)

    try:
        shutil.copyfile(source_path, target_path)
    except OSError as e:
        raise FileCopyError(str(source_path), str(target_path), e) from e

    logger.debug(f"Copied {source_path} -> {target_path}")
    return target_path


def convert_github_url_to_raw(url: str) -> str:
    """
    Rewrite a GitHub blob URL to its raw.githubusercontent.com form.

    https://github.com/user/repo/blob/branch/path/file.md
    -> https://raw.githubusercontent.com/user/repo/branch/path/file.md

    Any other URL is returned unchanged.
    """
    match = GITHUB_BLOB_PATTERN.match(url)
    if match:
        user, repo, path_with_branch = match.groups()
        return f"https://raw.githubusercontent.com/{user}/{repo}/{path_with_branch}"
    return url


async def download_command(
    url: str,
    command_name: str,
    use_user_dir: bool = False,
    timeout: float | None = None,
) -> Path:
    """Download a command file into the commands directory."""
    ensure_commands_dir(use_user_dir)
    target_path = get_local_command_path(command_name, use_user_dir)
    raw_url = convert_github_url_to_raw(url)
    config = ConfigManager.get_instance().get()

    try:
        async with httpx.AsyncClient(
            timeout=timeout if timeout is not None else config.http_timeout,
            follow_redirects=True,
        ) as client:
            response = await client.get(raw_url, headers={"User-Agent": config.user_agent})
    except httpx.RequestError as e:
        raise DownloadError(raw_url, cause=e) from e

    if not 200 <= response.status_code < 300:
        raise DownloadError(raw_url, response.status_code, response.reason_phrase)

    try:
        target_path.write_text(response.text, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(str(target_path), e) from e

    logger.debug(f"Downloaded {raw_url} -> {target_path}")
    return target_path


def remove_command(command_name: str, use_user_dir: bool = False) -> bool:
    """Delete a command file. Returns False if there was nothing to delete."""
    target_path = get_local_command_path(command_name, use_user_dir)
    if not target_path.exists():
        return False
    target_path.unlink()
    logger.debug(f"Removed {target_path}")
    return True
