"""
Module: core.errors

Purpose:
    Exceptions shared across subpackages.

Key Classes:
    - IndexOutOfRangeError: Slot or history index outside valid range

Used By:
    - collage.engine, collage.history
    - compress.compressor
"""

from __future__ import annotations


class IndexOutOfRangeError(IndexError):
    """
    Index outside the valid range for a slot set or history list.

    This is a caller contract violation, not a recoverable runtime error.

    Attributes:
        index: The offending index
        size: Number of valid positions at the time of the call
        what: Name of the indexed collection ("slot", "history")
    """

    def __init__(self, index: int, size: int, what: str) -> None:
        self.index = index
        self.size = size
        self.what = what
        if size == 0:
            message = f"{what} index {index} out of range: {what} is empty"
        else:
            message = f"{what} index {index} out of range [0, {size})"
        super().__init__(message)


def check_index(index: int, size: int, what: str) -> int:
    """
    Validate an index against a collection size.

    Negative indexes are rejected rather than wrapped.

    Returns:
        The index unchanged

    Raises:
        IndexOutOfRangeError: If index is not in [0, size)
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{what} index must be an int: {index!r}")
    if not 0 <= index < size:
        raise IndexOutOfRangeError(index, size, what)
    return index
