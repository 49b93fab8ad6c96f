from __future__ import annotations
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from linked_sequence.containers.linked.position import Position

if TYPE_CHECKING:
    from linked_sequence.containers.linked.linked_list import LinkedList

T = TypeVar("T")

class ReadOnlyLinkedList(Generic[T]):
    """
    A read-only view of a LinkedList. Prevents appending while allowing full traversal.

    The view does not copy the chain: elements appended to the wrapped container afterwards are
    visible through the view. Positions handed out by the view are those of the wrapped container
    and may be used with either.

    Elements themselves are not frozen; mutable elements must be treated immutably by convention.

    Attributes:
        _data (LinkedList[T]):
            The underlying container that this view wraps.
    """

    _data: LinkedList[T]

    def __init__(self, data: LinkedList[T]):
        self._data = data

    def start_position(self) -> Position:
        return self._data.start_position()

    def end_position(self) -> Position:
        return self._data.end_position()

    def advance(self, position: Position) -> Position:
        """
        Returns the position following `position`.

        Args:
            position (Position):
                A position issued by this view or its wrapped container.

        Returns:
            Position:
                The next position, or the end position after the last element.

        Raises:
            PreconditionViolation: If `position` is the end position.
            StalePositionError: If `position` belongs to another container.
        """
        return self._data.advance(position)

    def value_at(self, position: Position) -> T:
        return self._data.value_at(position)

    def positions(self) -> Iterator[Position]:
        return self._data.positions()

    @property
    def first(self) -> T | None:
        return self._data.first

    def __getitem__(self, position: Position) -> T:
        return self._data[position]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __repr__(self) -> str:
        return f"ReadOnlyLinkedList({list(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyLinkedList):
            return self._data == other._data
        return self._data == other
