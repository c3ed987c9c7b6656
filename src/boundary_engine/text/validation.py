"""Validation helpers shared across buffer and iterator services."""

from __future__ import annotations

from boundary_engine.errors import OutOfRangeError


def ensure_offset(offset: int, length: int) -> int:
    if offset < 0 or offset > length:
        raise OutOfRangeError(offset, length)
    return offset


def ensure_index(index: int, length: int) -> int:
    # ``length`` itself is a cursor offset, not a character index.
    if index < 0 or index >= length:
        raise OutOfRangeError(index, length)
    return index
