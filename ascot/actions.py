"""Errors produced by actions executed on a device."""

from __future__ import annotations

import enum
from typing import Any, Optional

from .errors import AscotError
from .strings import MiniString, ShortString


class ActionErrorKind(enum.Enum):
    """Kinds of errors for an action executed on a device."""

    INVALID_DATA = "InvalidData"
    INTERNAL = "Internal"


def _mini(text: str) -> MiniString:
    try:
        return MiniString(text)
    except AscotError:
        return MiniString()


def _short(text: str) -> ShortString:
    try:
        return ShortString(text)
    except AscotError:
        return ShortString()


class ActionError(Exception):
    """An error raised by an action; texts too long become empty."""

    def __init__(
        self,
        kind: ActionErrorKind,
        description: MiniString,
        info: Optional[ShortString] = None,
    ) -> None:
        super().__init__(kind, str(description))
        self.kind = kind
        self.description = description
        self.info = info

    @classmethod
    def from_kind(cls, kind: ActionErrorKind, description: str) -> ActionError:
        """Create an error of the given kind with a textual description."""
        return cls(kind, _mini(description))

    @classmethod
    def invalid_data(cls, description: str) -> ActionError:
        """Create an error for invalid or malformed data."""
        return cls.from_kind(ActionErrorKind.INVALID_DATA, description)

    @classmethod
    def internal(cls, description: str) -> ActionError:
        """Create an error for an internal device failure."""
        return cls.from_kind(ActionErrorKind.INTERNAL, description)

    def with_info(self, info: str) -> ActionError:
        """Return a copy of the error carrying additional information."""
        return type(self)(self.kind, self.description, _short(info))

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {
            "kind": self.kind.value,
            "description": str(self.description),
            "info": None if self.info is None else str(self.info),
        }

    def __str__(self) -> str:
        text = f"{self.kind.value}: {self.description}"
        if self.info is not None:
            text += f" ({self.info})"
        return text