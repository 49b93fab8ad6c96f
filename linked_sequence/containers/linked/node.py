from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """
    A single storage cell of a singly-linked chain.

    Each node owns the remainder of the chain through `next`. Anything else that needs to point
    at a node (the container's tail pointer, positions held by callers) does so through a weak
    reference, so the chain rooted at the container's head is the only owner.

    Nodes compare by identity: two nodes holding equal elements are still distinct cells.

    Attributes:
        element (T):
            The stored value.

        depth (int):
            Distance from the head of the chain, 0 for the head. Assigned once when the node is
            appended; the successor of a node always has `depth + 1`.

        next (Node[T] | None):
            The following node, or None for the last node of the chain.
    """
    element: T
    depth: int
    # excluded from repr, which would otherwise walk the whole chain
    next: Node[T] | None = field(default=None, repr=False)
