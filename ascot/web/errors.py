"""Errors raised by the web server layer."""

from __future__ import annotations

import enum


class WebErrorKind(enum.Enum):
    """All possible error kinds of the web server layer."""

    SERVICE = "service error"
    NOT_FOUND_ADDRESS = "not found address"
    SERIALIZATION = "serialization"
    ASCOT_LIBRARY = "Ascot library error"
    LIGHT = "light error"
    FRIDGE = "fridge error"

    def description(self) -> str:
        """Return a human readable description of the kind."""
        return self.value

    def __str__(self) -> str:
        return self.description()


class WebError(Exception):
    """Error of the web server layer carrying a kind and information."""

    def __init__(self, kind: WebErrorKind, info: str) -> None:
        super().__init__(kind, info)
        self.kind = kind
        self.info = info

    def __str__(self) -> str:
        return f"{self.kind}: {self.info}"