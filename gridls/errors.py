"""Exception types shared by the traversal, formatting and CLI layers."""

from __future__ import annotations

import os


class GridlsError(Exception):
    """Base class for listing errors."""


class FormatFailure(GridlsError):
    """A single field (timestamp, human size) could not be formatted."""


class HumanizeError(FormatFailure):
    """A byte count does not fit the human-readable field."""


class TimestampFormatError(FormatFailure):
    """A timestamp could not be converted to local calendar time."""


class FatalTraversalError(GridlsError):
    """The traversal cannot continue enumerating directories at all."""

    def __init__(self, path: bytes, cause: OSError) -> None:
        super().__init__(f"{os.fsdecode(path)}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "GridlsError",
    "FormatFailure",
    "HumanizeError",
    "TimestampFormatError",
    "FatalTraversalError",
]
