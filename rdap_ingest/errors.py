"""Exception types raised while ingesting registry documents."""

from __future__ import annotations

from pathlib import Path


class RdapIngestError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(RdapIngestError):
    """Invalid invocation: missing target directory, bad test file, ..."""


class DocumentError(RdapIngestError):
    """A single document could not be turned into records.

    These are hard errors: the owning file is dropped and the pipeline stops
    taking new work.
    """

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{self.path}: {message}"
        return message


class DocumentLoadError(DocumentError):
    pass


class DocumentDecodeError(DocumentError):
    pass


class InvalidAddressError(DocumentError):
    pass
