"""
Error taxonomy shared by the store, the lookup service and the API layer.
"""

from __future__ import annotations


class EcourtsError(Exception):
    """Base class for errors raised by the lookup service."""


class InvalidRequest(EcourtsError):
    """A required query field is missing or cannot be parsed."""

    def __init__(self, message: str = "Missing required fields") -> None:
        super().__init__(message)
        self.message = message


class StorageError(EcourtsError):
    """Reading from or writing to the record store failed."""
