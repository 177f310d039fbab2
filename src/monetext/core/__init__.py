"""Core infrastructure shared by the parsing and formatting packages."""

from .memo import BuildOnceCache

__all__ = ["BuildOnceCache"]
