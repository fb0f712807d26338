"""
Logger
Diagnostics for slashctl on stderr. User-facing output goes to stdout.
"""

import logging
import sys
from typing import Optional


class Logger:
    """Wrapper around the slashctl logger; module loggers under slashctl.* share its handler."""

    def __init__(self, name: str = "slashctl", level: str = "WARNING"):
        self.logger = logging.getLogger(name)

        # Only add handler if none exist
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(handler)

        self.set_level(level)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def set_level(self, level: str) -> None:
        """Change the level of the logger and its handlers. Unknown names mean WARNING."""
        resolved = getattr(logging, level.upper(), logging.WARNING)
        self.logger.setLevel(resolved)
        for handler in self.logger.handlers:
            handler.setLevel(resolved)
