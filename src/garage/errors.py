"""Exception hierarchy for structural failures."""

from __future__ import annotations


class GarageError(Exception):
    """Base class for errors raised by the garage package."""


class CatalogError(GarageError):
    """Raised when a rule catalog cannot be loaded or fails its schema."""

    def __init__(self, message: str, *, source: str | None = None):
        super().__init__(f"{source}: {message}" if source else message)
        self.message = message
        self.source = source


class ShareCodeError(GarageError, ValueError):
    """Raised when a draft share code cannot be decoded."""
