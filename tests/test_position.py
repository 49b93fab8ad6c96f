import copy
import pytest
from linked_sequence.containers.linked.linked_list import LinkedList
from linked_sequence.containers.linked.position import END, EndPosition, NodePosition, Position


@pytest.fixture(name="letters")
def letters_impl() -> LinkedList[str]:
    return LinkedList(["a", "b", "c"])


def test_end_positions_are_equal() -> None:
    assert END == EndPosition()
    assert not END < EndPosition()
    assert END <= EndPosition()
    assert END >= EndPosition()
    assert hash(END) == hash(EndPosition())


def test_end_is_shared_between_containers(letters: LinkedList[str]) -> None:
    assert letters.end_position() == LinkedList([1]).end_position()
    assert LinkedList().start_position() == END


def test_node_position_never_equals_end(letters: LinkedList[str]) -> None:
    start = letters.start_position()
    assert isinstance(start, NodePosition)
    assert start != END
    assert END != start


def test_node_position_is_less_than_end(letters: LinkedList[str]) -> None:
    for position in letters.positions():
        assert position < END
        assert position <= END
        assert END > position
        assert not END < position


def test_ordering_follows_depth(letters: LinkedList[str]) -> None:
    a, b, c = letters.positions()
    assert a < b < c
    assert c > a
    assert a <= a
    assert not b < a
    assert sorted([c, a, b]) == [a, b, c]


def test_positions_compare_by_node_identity() -> None:
    first = LinkedList(["same"])
    second = LinkedList(["same"])
    assert first.start_position() != second.start_position()
    assert first.start_position() == first.start_position()


def test_positions_are_hashable(letters: LinkedList[str]) -> None:
    positions = set(letters.positions())
    positions.add(letters.start_position())
    positions.add(END)
    positions.add(letters.end_position())
    assert len(positions) == 4


def test_positions_are_copyable(letters: LinkedList[str]) -> None:
    start = letters.start_position()
    assert copy.copy(start) == start
    assert copy.copy(END) == END


def test_positions_are_immutable(letters: LinkedList[str]) -> None:
    start = letters.start_position()
    with pytest.raises(AttributeError):
        start.depth = 5  # type: ignore[misc]


def test_repr_hides_references(letters: LinkedList[str]) -> None:
    assert repr(letters.start_position()) == "NodePosition(depth=0)"
    assert repr(END) == "EndPosition()"


def test_comparison_with_other_types(letters: LinkedList[str]) -> None:
    start: Position = letters.start_position()
    assert start != 0
    with pytest.raises(TypeError):
        _ = start < 0  # type: ignore[operator]
