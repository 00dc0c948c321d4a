"""Errors raised by the core data structures."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """All possible error kinds."""

    FIXED_TEXT = "Fixed-size text"

    def description(self) -> str:
        """Return a human readable description of the kind."""
        return self.value

    def __str__(self) -> str:
        return self.description()


class AscotError(Exception):
    """General error carrying a kind and additional information."""

    def __init__(self, kind: ErrorKind, info: str) -> None:
        super().__init__(kind, info)
        self.kind = kind
        self.info = info

    def __str__(self) -> str:
        return f"{self.kind}: {self.info}"