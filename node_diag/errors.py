"""Exceptions raised by the node diagnostic helpers."""

from __future__ import annotations


class NodeDiagError(Exception):
    """Base class for node_diag errors."""


class InvalidDurationFormat(NodeDiagError, ValueError):
    """An optional duration setting could not be parsed.

    Attributes:
        field: Name of the offending input ("lookback" or "delay")
        value: The raw string that failed to parse
    """

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"failed to parse {field} duration {value!r}")


class FileAccessError(NodeDiagError, OSError):
    """The release-metadata file is missing or unreadable."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"cannot read {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class UnrecognizedFormat(NodeDiagError, ValueError):
    """The release-metadata file has no usable ID/version fields."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        self.path = path
        self.reason = reason
        msg = reason if path is None else f"{path}: {reason}"
        super().__init__(msg)


__all__ = [
    "NodeDiagError",
    "InvalidDurationFormat",
    "FileAccessError",
    "UnrecognizedFormat",
]
