from __future__ import annotations
from dataclasses import dataclass, field
import functools
from typing import Any
import weakref

from linked_sequence.containers.linked.node import Node


@functools.total_ordering
class Position:
    """
    Opaque, comparable handle denoting a location in a linked container.

    A position is either a `NodePosition`, referring to one element of the chain, or the
    `EndPosition` sentinel, denoting "one past the last element". Positions are only ever created
    by the container; callers may store, copy and compare them.

    Comparison rules:
        - Two node positions are equal iff they refer to the identical node.
        - End positions are always equal to each other.
        - A node position and an end position are never equal.
        - Node positions are ordered by the depth of their node.
        - Every node position is less than the end position; the end position is never less than
          anything.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        if isinstance(self, NodePosition) and isinstance(other, NodePosition):
            # weakref equality follows the referents, and nodes compare by identity
            return self.node_ref == other.node_ref
        return isinstance(self, EndPosition) and isinstance(other, EndPosition)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        if isinstance(self, NodePosition):
            if isinstance(other, NodePosition):
                return self.depth < other.depth
            return True
        return False


@dataclass(frozen=True, eq=False)
class NodePosition(Position):
    """
    Position of a single element.

    Holds weak references only: a position never keeps its node, or the container that issued
    it, alive.

    Attributes:
        node_ref (weakref.ref[Node[Any]]):
            The referenced node.

        owner_ref (weakref.ref[Any]):
            The container that issued this position.

        depth (int):
            Depth of the referenced node. Node depths never change after append, so the value
            stays correct for as long as the node exists.
    """
    node_ref: weakref.ref[Node[Any]] = field(repr=False)
    owner_ref: weakref.ref[Any] = field(repr=False)
    depth: int

    def __hash__(self) -> int:
        return hash((NodePosition, self.depth))

    def node_for(self, owner: object) -> Node[Any] | None:
        """
        Returns the referenced node if this position was issued by `owner` and is still live.

        Args:
            owner (object):
                The container the position is being used with.

        Returns:
            Node[Any] | None:
                The node, or None if the position is stale or belongs to another container.
        """
        if self.owner_ref() is not owner:
            return None
        return self.node_ref()


@dataclass(frozen=True, eq=False)
class EndPosition(Position):
    """
    The "one past the last element" sentinel. Never dereferenceable.
    """

    def __hash__(self) -> int:
        return hash(EndPosition)


END = EndPosition()
