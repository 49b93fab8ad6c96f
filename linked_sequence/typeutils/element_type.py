from typing import Any, Type, TypeVar, Tuple, cast

T = TypeVar('T')

ElementType = Type[Any] | Tuple[Type[Any], ...]


def format_type_name(tp: ElementType) -> str:
    """
    Helper to format type names nicely for error messages.
    """
    if isinstance(tp, tuple):
        return ", ".join(t.__name__ for t in tp)
    return tp.__name__


def check_element(tp: ElementType, value: T) -> T:
    """
    Verify that a value may be stored in a container restricted to the given element type(s).

    The check is **shallow**: only the outermost type of `value` is inspected. A container of
    `list` accepts `[1, "2"]`, since the contents of the list are not examined.

    Args:
        tp (Type or Tuple[Type, ...]):
            The accepted element type or tuple of accepted element types.
        value (T):
            The value about to be stored.

    Returns:
        T:
            The unchanged value, if it matches.

    Raises:
        TypeError:
            If the value is not an instance of the given type(s).

    Example:
        >>> check_element(int, 3)
        3

        >>> check_element((str, bytes), b"foo")
        b'foo'

        >>> check_element(int, "foo")
        TypeError: element type mismatch: expected int, got str
    """
    if not isinstance(value, tp):
        raise TypeError(
            f"element type mismatch: expected {format_type_name(tp)}, got {type(value).__name__}"
        )
    return cast(T, value)
