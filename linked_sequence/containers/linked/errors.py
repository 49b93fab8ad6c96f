class PreconditionViolation(IndexError):
    """
    Raised when a caller breaks the traversal contract of a linked container.

    Advancing past the end position or reading the value at the end position are programmer
    errors, not expected runtime failures. Subclassing `IndexError` keeps the exception
    catchable by code that already guards sequence access.
    """


class StalePositionError(PreconditionViolation):
    """
    Raised when a position does not belong to the container it is used with.

    This covers positions issued by a different container and positions whose node or issuing
    container no longer exists.
    """
