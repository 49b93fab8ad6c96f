from __future__ import annotations
from collections.abc import Sequence
import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar, cast
import weakref

from linked_sequence.containers.linked.errors import PreconditionViolation, StalePositionError
from linked_sequence.containers.linked.node import Node
from linked_sequence.containers.linked.position import END, EndPosition, NodePosition, Position
from linked_sequence.containers.read_only.read_only_linked_list import ReadOnlyLinkedList
from linked_sequence.typeutils.element_type import ElementType, check_element

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LinkedList(Generic[T]):
    """
    A singly-linked sequence with O(1) append and position-based forward traversal.

    The container owns the head of the node chain, and through it every node. The tail is only
    held through a weak reference, which makes `append` O(1) without introducing a second owner.

    Elements are reached through positions rather than node references:

        >>> ll = LinkedList([2, 3, 4])
        >>> position = ll.start_position()
        >>> while position != ll.end_position():
        ...     print(ll[position])
        ...     position = ll.advance(position)

    `append` is the only mutator. It never moves existing nodes, so positions taken before an
    append remain valid afterwards.

    The container is not synchronized: appending concurrently with another append or with a
    traversal requires external locking.

    Attributes:
        _head (Node[T] | None):
            First node of the chain, or None when empty.

        _tail (weakref.ref[Node[T]] | None):
            Weak reference to the last node, or None when empty.

        _count (int):
            Number of nodes in the chain.

        _element_type (ElementType | None):
            If set, the type (or tuple of types) every appended element must be an instance of.
    """

    _head: Node[T] | None
    _tail: weakref.ref[Node[T]] | None
    _count: int
    _element_type: ElementType | None

    def __init__(self, source: Iterable[T] | None = None, *,
                 element_type: ElementType | None = None):
        """
        Creates a container, optionally filled from `source`.

        Args:
            source (Iterable[T] | None):
                Finite iterable whose elements are appended in iteration order.
            element_type (Type or Tuple[Type, ...] | None):
                Restricts the elements that can be appended. Checked on every append.

        Raises:
            TypeError:
                If `element_type` is set and an element of `source` does not match it.
        """
        self._head = None
        self._tail = None
        self._count = 0
        self._element_type = element_type

        if source is not None:
            for element in source:
                self.append(element)
            logger.debug("Built LinkedList of %d elements from %s",
                         self._count, type(source).__name__)

    @property
    def element_type(self) -> ElementType | None:
        return self._element_type

    @property
    def first(self) -> T | None:
        """
        The first element, or None if the container is empty.
        """
        if self._head is None:
            return None
        return self._head.element

    def append(self, value: T) -> None:
        """
        Adds `value` as the new last element.

        Args:
            value (T):
                The element to append.

        Raises:
            TypeError:
                If the container has an element type and `value` does not match it. The container
                is left unchanged.
        """
        if self._element_type is not None:
            value = check_element(self._element_type, value)

        tail = self._tail() if self._tail is not None else None
        node = Node(element=value, depth=(tail.depth if tail is not None else -1) + 1)

        if tail is None:
            self._head = node
        else:
            tail.next = node

        self._tail = weakref.ref(node)
        self._count += 1

    def start_position(self) -> Position:
        """
        Returns the position of the first element, or the end position if empty.
        """
        return self._position_of(self._head)

    def end_position(self) -> Position:
        return END

    def advance(self, position: Position) -> Position:
        """
        Returns the position following `position`.

        Args:
            position (Position):
                A position issued by this container.

        Returns:
            Position:
                The position of the next element, or the end position after the last one.

        Raises:
            PreconditionViolation:
                If `position` is the end position.
            StalePositionError:
                If `position` was not issued by this container or its node no longer exists.
        """
        node = self._node_at(position, "Cannot advance past end position")
        return self._position_of(node.next)

    def value_at(self, position: Position) -> T:
        """
        Returns the element at `position`.

        Raises:
            PreconditionViolation:
                If `position` is the end position.
            StalePositionError:
                If `position` was not issued by this container or its node no longer exists.
        """
        return self._node_at(position, "Position out of bounds").element

    def positions(self) -> Iterator[Position]:
        """
        Yields the position of every element, in traversal order.
        """
        position = self.start_position()
        end = self.end_position()
        while position != end:
            yield position
            position = self.advance(position)

    def as_read_only(self) -> ReadOnlyLinkedList[T]:
        return ReadOnlyLinkedList(self)

    def __getitem__(self, position: Position) -> T:
        return self.value_at(position)

    def __iter__(self) -> Iterator[T]:
        position = self.start_position()
        end = self.end_position()
        while position != end:
            yield self.value_at(position)
            position = self.advance(position)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return any(element == item for element in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        # strings are sequences of characters, never equal to a list of elements
        if isinstance(other, (str, bytes, bytearray)):
            return NotImplemented
        if isinstance(other, (LinkedList, Sequence)):
            # Cast is for the type checker only; elements are compared with their own __eq__
            other_ = cast(Sequence[Any], other)
            return len(self) == len(other_) and all(a == b for a, b in zip(self, other_))
        return NotImplemented

    def _position_of(self, node: Node[T] | None) -> Position:
        if node is None:
            return END
        return NodePosition(node_ref=weakref.ref(node), owner_ref=weakref.ref(self),
                            depth=node.depth)

    def _node_at(self, position: Position, end_message: str) -> Node[T]:
        if not isinstance(position, Position):
            raise TypeError(
                f"LinkedList indices must be positions, not {type(position).__name__}"
            )

        if isinstance(position, EndPosition):
            logger.debug("Precondition violated: %s", end_message)
            raise PreconditionViolation(end_message)

        node = position.node_for(self) if isinstance(position, NodePosition) else None
        if node is None:
            logger.debug("Rejected stale or foreign position %r", position)
            raise StalePositionError(f"{position!r} does not belong to this container")

        # node_for only returns nodes of this container, whose elements are T
        return cast(Node[T], node)
