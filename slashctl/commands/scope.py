"""
Scope selection shared by add and remove.
"""

from slashctl.errors import InvalidOptionsCombinationError


def resolve_use_user_dir(project: bool = False, user: bool = False) -> bool:
    """
    Translate --project/--user flags into a scope. Project is the default.

    Raises:
        InvalidOptionsCombinationError: both flags were given
    """
    if project and user:
        raise InvalidOptionsCombinationError(["--project", "--user"])
    return user
