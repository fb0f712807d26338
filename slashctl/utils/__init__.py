"""
Utils Module
Logging and local file helpers.
"""

from .logger import Logger

__all__ = ["Logger"]
