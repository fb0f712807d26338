"""
Errors
Exception types raised by slashctl.

Every error carries an ErrorCode and a context dict so the CLI can report
failures uniformly and tests can assert on the kind of failure.
"""

from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Error codes for every failure slashctl can report."""
    # Registry validation
    INVALID_SHAPE = "INVALID_SHAPE"
    MISSING_COMMANDS_ARRAY = "MISSING_COMMANDS_ARRAY"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_TYPE = "INVALID_TYPE"
    DUPLICATE_NAMES = "DUPLICATE_NAMES"

    # Registry loading
    REGISTRY_NOT_FOUND = "REGISTRY_NOT_FOUND"
    REGISTRY_PARSE_FAILED = "REGISTRY_PARSE_FAILED"
    REGISTRY_FETCH_FAILED = "REGISTRY_FETCH_FAILED"
    REGISTRY_ASYNC_REQUIRED = "REGISTRY_ASYNC_REQUIRED"
    COMMAND_NOT_FOUND_IN_REGISTRY = "COMMAND_NOT_FOUND_IN_REGISTRY"

    # File system
    COMMAND_ALREADY_EXISTS = "COMMAND_ALREADY_EXISTS"
    COMMAND_NOT_FOUND_LOCAL = "COMMAND_NOT_FOUND_LOCAL"
    FILE_COPY_FAILED = "FILE_COPY_FAILED"
    FILE_WRITE_FAILED = "FILE_WRITE_FAILED"
    DIRECTORY_CREATE_FAILED = "DIRECTORY_CREATE_FAILED"

    # Network
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"

    # Configuration
    INVALID_OPTIONS_COMBINATION = "INVALID_OPTIONS_COMBINATION"
    INVALID_COMMAND_CONFIG = "INVALID_COMMAND_CONFIG"
    INVALID_COMMAND_NAME = "INVALID_COMMAND_NAME"


class SlashctlError(Exception):
    """Base class for all slashctl errors."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode | None = None, **context: Any):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context: dict[str, Any] = context

    def __str__(self) -> str:
        return self.message


# ============================================================================
# Registry
# ============================================================================

class RegistryError(SlashctlError):
    """Base class for registry loading and validation failures."""


class CommandValidationError(RegistryError):
    """A single registry command failed validation."""

    def __init__(self, message: str, index: int | None = None, **context: Any):
        super().__init__(message, index=index, **context)
        self.index = index


class InvalidShapeError(CommandValidationError):
    code = ErrorCode.INVALID_SHAPE


class MissingFieldError(CommandValidationError):
    code = ErrorCode.MISSING_FIELD

    def __init__(self, message: str, field: str, index: int | None = None):
        super().__init__(message, index=index, field=field)
        self.field = field


class InvalidTypeError(CommandValidationError):
    code = ErrorCode.INVALID_TYPE

    def __init__(self, message: str, value: str, index: int | None = None):
        super().__init__(message, index=index, value=value)
        self.value = value


class RegistryValidationError(RegistryError):
    """
    A registry document failed validation.

    `code` is the specific kind of failure (INVALID_SHAPE, MISSING_FIELD,
    DUPLICATE_NAMES, ...). `reason` is the underlying message without the
    source prefix.
    """

    def __init__(self, source: str, reason: str, code: ErrorCode, **context: Any):
        super().__init__(
            f"Registry validation failed for {source}: {reason}",
            code=code,
            source=source,
            **context,
        )
        self.source = source
        self.reason = reason


class RegistrySourceNotFoundError(RegistryError):
    code = ErrorCode.REGISTRY_NOT_FOUND

    def __init__(self, path: str):
        super().__init__(f"Registry file not found: {path}", path=path)
        self.path = path


class RegistryParseError(RegistryError):
    code = ErrorCode.REGISTRY_PARSE_FAILED

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(f"Failed to parse registry file: {path}", path=path, cause=cause)
        self.path = path
        self.cause = cause


class RegistryFetchError(RegistryError):
    code = ErrorCode.REGISTRY_FETCH_FAILED

    def __init__(
        self,
        url: str,
        status: int | None = None,
        status_text: str | None = None,
        cause: Exception | None = None,
    ):
        detail = f": {status} {status_text}" if status else ""
        super().__init__(
            f"Failed to fetch registry from {url}{detail}",
            url=url,
            status=status,
            status_text=status_text,
            cause=cause,
        )
        self.url = url
        self.status = status
        self.status_text = status_text
        self.cause = cause


class AsyncRequiredError(RegistryError):
    code = ErrorCode.REGISTRY_ASYNC_REQUIRED

    def __init__(self):
        super().__init__(
            "Registry must be loaded asynchronously in production mode. "
            "Use load_registry_async() instead."
        )


class CommandNotFoundInRegistryError(RegistryError):
    code = ErrorCode.COMMAND_NOT_FOUND_IN_REGISTRY

    def __init__(self, command_name: str):
        super().__init__(
            f'Command "{command_name}" not found in registry',
            command_name=command_name,
        )


# ============================================================================
# File system
# ============================================================================

class FileSystemError(SlashctlError):
    """Base class for local commands directory failures."""


class CommandAlreadyExistsError(FileSystemError):
    code = ErrorCode.COMMAND_ALREADY_EXISTS

    def __init__(self, command_name: str, scope: str):
        flag = " --user" if scope == "user" else ""
        super().__init__(
            f'Command "{command_name}" already exists in {scope} scope. '
            f"Please remove it first using: slashctl remove {command_name}{flag}",
            command_name=command_name,
            scope=scope,
        )


class CommandNotFoundLocalError(FileSystemError):
    code = ErrorCode.COMMAND_NOT_FOUND_LOCAL

    def __init__(self, command_name: str, scope: str):
        super().__init__(
            f'Command "{command_name}" not found in {scope} scope',
            command_name=command_name,
            scope=scope,
        )


class FileCopyError(FileSystemError):
    code = ErrorCode.FILE_COPY_FAILED

    def __init__(self, source: str, target: str, cause: Exception | None = None):
        super().__init__(
            f"Failed to copy file from {source} to {target}",
            source=source,
            target=target,
            cause=cause,
        )


class FileWriteError(FileSystemError):
    code = ErrorCode.FILE_WRITE_FAILED

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(f"Failed to write file: {path}", path=path, cause=cause)


class DirectoryCreateError(FileSystemError):
    code = ErrorCode.DIRECTORY_CREATE_FAILED

    def __init__(self, path: str, cause: Exception | None = None):
        super().__init__(f"Failed to create directory: {path}", path=path, cause=cause)


# ============================================================================
# Network
# ============================================================================

class DownloadError(SlashctlError):
    code = ErrorCode.DOWNLOAD_FAILED

    def __init__(
        self,
        url: str,
        status: int | None = None,
        status_text: str | None = None,
        cause: Exception | None = None,
    ):
        detail = f": {status} {status_text}" if status else ""
        super().__init__(
            f"Failed to download command from {url}{detail}",
            url=url,
            status=status,
            status_text=status_text,
            cause=cause,
        )
        self.status = status


# ============================================================================
# Configuration
# ============================================================================

class ConfigurationError(SlashctlError):
    """Base class for invalid invocations."""


class InvalidOptionsCombinationError(ConfigurationError):
    code = ErrorCode.INVALID_OPTIONS_COMBINATION

    def __init__(self, options: list[str]):
        super().__init__(
            f"Cannot specify both {' and '.join(options)} options",
            options=options,
        )


class InvalidCommandConfigError(ConfigurationError):
    code = ErrorCode.INVALID_COMMAND_CONFIG

    def __init__(self, command_name: str):
        super().__init__(
            f'Invalid command configuration for "{command_name}"',
            command_name=command_name,
        )


class InvalidCommandNameError(ConfigurationError):
    code = ErrorCode.INVALID_COMMAND_NAME

    def __init__(self, command_name: str):
        super().__init__(
            f'Invalid command name: "{command_name}"',
            command_name=command_name,
        )
