"""Ordered sets of unique elements with a bounded size."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

MAXIMUM_ELEMENTS = 8

T = TypeVar("T")
K = TypeVar("K")


class Collection(Generic[T]):
    """Insertion-ordered set holding at most ``MAXIMUM_ELEMENTS`` elements.

    Adding an element to a full collection is silently ignored.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = {}
        for element in elements:
            self.add(element)

    def add(self, element: T) -> None:
        """Add an element unless already present or the collection is full."""
        if element in self._items or len(self._items) >= MAXIMUM_ELEMENTS:
            return
        self._items[element] = None

    def merge(self, other: Collection[T]) -> None:
        """Merge all elements of another collection into this one."""
        union = dict(self._items)
        for element in other:
            union.setdefault(element, None)
        if len(union) > MAXIMUM_ELEMENTS:
            raise OverflowError(
                f"merged collection exceeds {MAXIMUM_ELEMENTS} elements"
            )
        self._items = union

    def is_empty(self) -> bool:
        """Check whether the collection is empty."""
        return not self._items

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return set(self._items) == set(other._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class OutputCollection(Collection[T]):
    """A collection meant to be serialized."""

    @classmethod
    def convert(
        cls, other: Iterable[K], converter: Callable[[K], T]
    ) -> OutputCollection[T]:
        """Build a collection by converting every element of another one."""
        return cls(converter(element) for element in other)

    def to_list(self) -> list[Any]:
        """Serialize the elements into a list."""
        return [
            element.to_dict() if hasattr(element, "to_dict") else element
            for element in self
        ]