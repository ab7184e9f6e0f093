from __future__ import annotations

from pathlib import Path
from typing import Optional


class PolicyDocsError(Exception):
    """Base class for failures raised by the document pipeline."""


class InvalidInputError(PolicyDocsError, ValueError):
    """Policy identifiers or HTML payload are missing or not text."""


class StorageError(PolicyDocsError):
    """Directory creation or file write failed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ConversionError(PolicyDocsError):
    """A rendering backend failed to produce a document."""

    def __init__(self, format: str, cause: BaseException):
        super().__init__(f"{format.upper()} conversion failed: {cause}")
        self.format = format
        self.cause = cause
