"""
Registry Validation
Turn parsed YAML into a typed Registry or fail with a precise error.

Fields are checked in a fixed order (name, author, description, type, url)
and the first violation wins; callers and tests rely on that order.
"""

import logging
from collections import Counter
from typing import Any, Mapping

from slashctl.errors import (
    CommandValidationError,
    ErrorCode,
    InvalidShapeError,
    InvalidTypeError,
    MissingFieldError,
    RegistryValidationError,
)
from slashctl.registry.models import (
    TYPE_ALIASES,
    CommandType,
    Registry,
    RegistryCommand,
    RegistryEntryCommand,
    RemoteLinkCommand,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "author", "description")


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_command(raw: Any, index: int | None = None) -> RegistryCommand:
    """
    Validate a single registry command.

    Args:
        raw: Parsed value of one element of `commands`
        index: Position in the sequence, used only in error messages

    Returns:
        RegistryEntryCommand or RemoteLinkCommand

    Raises:
        InvalidShapeError: raw is not a mapping
        MissingFieldError: a required string field is absent or blank
        InvalidTypeError: the type tag is not a known variant
    """
    prefix = f"Command at index {index}" if index is not None else "Command"

    if not isinstance(raw, Mapping):
        raise InvalidShapeError(f"{prefix} must be an object", index=index)

    for field_name in REQUIRED_FIELDS:
        if not _is_non_empty_string(raw.get(field_name)):
            raise MissingFieldError(
                f"{prefix} must have a non-empty {field_name}",
                field=field_name,
                index=index,
            )

    raw_type = raw.get("type")
    if not isinstance(raw_type, str):
        raise MissingFieldError(f"{prefix} must have a type", field="type", index=index)

    tag = TYPE_ALIASES.get(raw_type)

    if tag is CommandType.REGISTRY_ENTRY:
        # url is ignored for registry-hosted commands
        return RegistryEntryCommand(
            name=raw["name"],
            author=raw["author"],
            description=raw["description"],
        )

    if tag is CommandType.REMOTE_LINK:
        if not _is_non_empty_string(raw.get("url")):
            raise MissingFieldError(
                f'{prefix} with type "{raw_type}" must have a non-empty url',
                field="url",
                index=index,
            )
        return RemoteLinkCommand(
            name=raw["name"],
            author=raw["author"],
            description=raw["description"],
            url=raw["url"],
        )

    raise InvalidTypeError(
        f'{prefix} has invalid type "{raw_type}". '
        f'Must be "{CommandType.REGISTRY_ENTRY.value}" or "{CommandType.REMOTE_LINK.value}"',
        value=raw_type,
        index=index,
    )


def find_duplicate_names(names: list[str]) -> list[str]:
    """Names occurring more than once, each listed once in first-occurrence order."""
    counts = Counter(names)
    seen: set[str] = set()
    duplicates = []
    for name in names:
        if counts[name] > 1 and name not in seen:
            seen.add(name)
            duplicates.append(name)
    return duplicates


def validate_registry(raw: Any, source: str) -> Registry:
    """
    Validate a parsed registry document.

    Args:
        raw: Result of yaml.safe_load on the registry document
        source: Path or URL the document came from, used in error messages

    Returns:
        Registry with commands in document order

    Raises:
        RegistryValidationError: with `code` set to the kind of failure
    """
    if not isinstance(raw, Mapping):
        raise RegistryValidationError(
            source, "Registry must be an object", code=ErrorCode.INVALID_SHAPE
        )

    commands = raw.get("commands")
    if not isinstance(commands, list):
        raise RegistryValidationError(
            source,
            "Registry must have a 'commands' array",
            code=ErrorCode.MISSING_COMMANDS_ARRAY,
        )

    validated: list[RegistryCommand] = []
    for index, element in enumerate(commands):
        try:
            validated.append(validate_command(element, index))
        except CommandValidationError as e:
            raise RegistryValidationError(
                source, e.message, code=e.code, **e.context
            ) from e

    duplicates = find_duplicate_names([cmd.name for cmd in validated])
    if duplicates:
        raise RegistryValidationError(
            source,
            f"Duplicate command names found: {', '.join(duplicates)}",
            code=ErrorCode.DUPLICATE_NAMES,
            names=duplicates,
        )

    logger.debug(f"Validated {len(validated)} commands from {source}")
    return Registry(commands=tuple(validated))
