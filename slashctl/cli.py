#!/usr/bin/env python3
"""
slashctl CLI Entry Point

Handles:
- add: install a command from the registry
- remove: delete an installed command
- list: show every command in the registry
"""

import argparse
import asyncio
import sys

from slashctl import __version__, __package_name__
from slashctl.config import ConfigManager
from slashctl.errors import SlashctlError
from slashctl.utils import Logger


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slashctl",
        description="Manage custom slash commands from a shared registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  slashctl list                     Show available commands
  slashctl add history              Add to ./.claude/commands
  slashctl add history --user       Add to ~/.claude/commands
  slashctl add history -n hist      Add under a different name
  slashctl remove history           Remove from ./.claude/commands
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics on stderr (default: $LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command")

    add_parser = subparsers.add_parser(
        "add",
        help="Add a command from registry to local .claude/commands directory"
    )
    add_parser.add_argument("command_name", help="Name of the command to add")
    add_parser.add_argument(
        "--name", "-n",
        default=None,
        help="Override the command name when adding"
    )
    _add_scope_arguments(add_parser, verb="Store command in")

    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove a command from local .claude/commands directory"
    )
    remove_parser.add_argument("command_name", help="Name of the command to remove")
    _add_scope_arguments(remove_parser, verb="Remove command from")

    list_parser = subparsers.add_parser(
        "list",
        help="List all available commands in the registry"
    )
    list_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show which registry is being read"
    )

    return parser


def _add_scope_arguments(parser: argparse.ArgumentParser, verb: str) -> None:
    # Both flags are accepted so the conflict is reported by the command itself
    parser.add_argument(
        "--project", "-P",
        action="store_true",
        help=f"{verb} project .claude/commands directory (default)"
    )
    parser.add_argument(
        "--user", "-U",
        action="store_true",
        help=f"{verb} user ~/.claude/commands directory"
    )


async def run_command(args: argparse.Namespace, logger: Logger) -> None:
    """Dispatch a parsed subcommand."""
    if args.command == "add":
        from slashctl.commands import add_command
        await add_command(
            args.command_name,
            name=args.name,
            project=args.project,
            user=args.user,
            logger=logger,
        )
    elif args.command == "remove":
        from slashctl.commands import remove_command
        remove_command(args.command_name, project=args.project, user=args.user)
    elif args.command == "list":
        from slashctl.commands import list_commands
        await list_commands(verbose=args.verbose)


def _failure_message(args: argparse.Namespace, error: Exception) -> str:
    if args.command == "list":
        return f"Failed to list commands: {error}"
    return f'Failed to {args.command} command "{args.command_name}": {error}'


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ConfigManager.get_instance().load()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logger = Logger("slashctl")
    logger.set_level(args.log_level or config.log_level)

    try:
        asyncio.run(run_command(args, logger))
    except SlashctlError as e:
        logger.debug(f"{e.code.value}: {e.context}")
        print(e.message, file=sys.stderr)
        return 1
    except Exception as e:
        print(_failure_message(args, e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
