"""Inputs accepted by a device route."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T", int, float)

_RANGE_U64 = "RangeU64"
_RANGE_F64 = "RangeF64"
_BOOL = "Bool"
_TAGS = (_RANGE_U64, _RANGE_F64, _BOOL)
_U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Range(Generic[T]):
    """An input range defined as an interval with a step and a default."""

    minimum: T
    maximum: T
    step: T
    default: T

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {
            "minimum": self.minimum,
            "maximum": self.maximum,
            "step": self.step,
            "default": self.default,
        }


@dataclass(frozen=True)
class InputType:
    """An input type: an unsigned range, a float range or a boolean."""

    tag: str
    value: Union[Range, bool]

    def __post_init__(self) -> None:
        if self.tag not in _TAGS:
            raise ValueError(f"unknown input type {self.tag!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary keyed by the type tag."""
        value = self.value.to_dict() if isinstance(self.value, Range) else self.value
        return {self.tag: value}


def _unpack(bounds: tuple) -> tuple:
    values = tuple(bounds)
    if len(values) != 4:
        raise ValueError("a range needs (minimum, maximum, step, default)")
    return values


@dataclass(frozen=True, eq=False)
class Input:
    """A route input; identity is given by its name."""

    name: str
    datatype: InputType

    @classmethod
    def range_u64(cls, name: str, bounds: tuple[int, int, int, int]) -> Input:
        """Create an unsigned integer range input."""
        values = _unpack(bounds)
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("unsigned range values must be integers")
            if not 0 <= value <= _U64_MAX:
                raise ValueError("unsigned range values must fit in 64 bits")
        return cls(name, InputType(_RANGE_U64, Range(*values)))

    @classmethod
    def range_f64(cls, name: str, bounds: tuple[float, float, float, float]) -> Input:
        """Create a floating point range input."""
        values = tuple(float(value) for value in _unpack(bounds))
        return cls(name, InputType(_RANGE_F64, Range(*values)))

    @classmethod
    def boolean(cls, name: str, default: bool) -> Input:
        """Create a boolean input with a default value."""
        return cls(name, InputType(_BOOL, bool(default)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True, eq=False)
class InputData:
    """Serializable input; identity is given by its name."""

    name: str
    datatype: InputType

    @classmethod
    def from_input(cls, source: Input) -> InputData:
        """Build the data of an input."""
        return cls(source.name, source.datatype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputData):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"name": self.name, "type": self.datatype.to_dict()}