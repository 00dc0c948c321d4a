"""Strings with a fixed maximum size in UTF-8 bytes."""

from __future__ import annotations

from typing import ClassVar

from .errors import AscotError, ErrorKind

MINI_STRING_LENGTH = 32
SHORT_STRING_LENGTH = 64
LONG_STRING_LENGTH = 128

_CREATE_ERROR = (
    "Impossible to create a new stack string. "
    "Characters might not be UTF-8 or its length is wrong."
)
_PUSH_ERROR = "Impossible to add another stack string at the end of the current one."
_PUSH_CHAR_ERROR = "Impossible to add a char at the end of the stack string."


def _size(text: str) -> int:
    return len(text.encode("utf-8"))


class FixedString:
    """A text whose UTF-8 encoding may not exceed a fixed capacity."""

    CAPACITY: ClassVar[int]

    def __init_subclass__(cls, *, capacity: int, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.CAPACITY = capacity

    def __init__(self, text: str = "") -> None:
        if not hasattr(type(self), "CAPACITY"):
            raise TypeError("FixedString must be subclassed with a capacity")
        if _size(text) > self.CAPACITY:
            raise AscotError(ErrorKind.FIXED_TEXT, _CREATE_ERROR)
        self._text = text

    def _append(self, text: str, message: str) -> None:
        if _size(self._text) + _size(text) > self.CAPACITY:
            raise AscotError(ErrorKind.FIXED_TEXT, message)
        self._text += text

    def push(self, text: str) -> None:
        """Append a string; the content is left untouched on overflow."""
        self._append(text, _PUSH_ERROR)

    def push_char(self, c: str) -> None:
        """Append a single character."""
        if len(c) != 1:
            raise ValueError("push_char expects exactly one character")
        self._append(c, _PUSH_CHAR_ERROR)

    def is_empty(self) -> bool:
        """Check whether the string holds no text."""
        return not self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"


class MiniString(FixedString, capacity=MINI_STRING_LENGTH):
    """Very short text."""


class ShortString(FixedString, capacity=SHORT_STRING_LENGTH):
    """Short text such as a name."""


class LongString(FixedString, capacity=LONG_STRING_LENGTH):
    """Long text such as a description."""