"""Stateless scan primitives shared by every iterator.

Both functions run the rule table's state machine forward from a position
already known to be a boundary. Backward movement first walks back to the
nearest hard break pair (or the start of text) and scans forward from there,
so the work done is proportional to the distance travelled.
"""

from __future__ import annotations

from typing import Optional

from boundary_engine.rules.models import BREAK, MARK, RuleTable


def _class_at(table: RuleTable, text: str, index: int) -> str:
    return table.classify(ord(text[index]))


def following_boundary(table: RuleTable, text: str, start: int) -> int:
    """Return the first boundary after ``start``, which must be a boundary."""

    length = len(text)
    if start >= length:
        return length

    state = table.entry[_class_at(table, text, start)]
    mark: Optional[int] = None
    for index in range(start + 1, length):
        transition = table.step(state, _class_at(table, text, index))
        if transition.action == BREAK:
            return index if mark is None else mark
        if transition.action == MARK:
            if mark is not None:
                return mark
            mark = index
        elif transition.next_state not in table.lookahead_states:
            mark = None
        state = transition.next_state
    return length if mark is None else mark


def safe_boundary(table: RuleTable, text: str, offset: int) -> int:
    """Return a boundary ``<= offset`` found without scanning from the start."""

    index = min(offset, len(text) - 1)
    while index > 0:
        before = _class_at(table, text, index - 1)
        if table.is_hard_break(before, _class_at(table, text, index)):
            return index
        index -= 1
    return 0


def floor_boundary(table: RuleTable, text: str, offset: int) -> int:
    """Return the largest boundary ``<= offset``."""

    length = len(text)
    if offset <= 0:
        return 0
    if offset >= length:
        return length

    position = safe_boundary(table, text, offset)
    while True:
        candidate = following_boundary(table, text, position)
        if candidate > offset:
            return position
        position = candidate


def preceding_boundary(table: RuleTable, text: str, offset: int) -> int:
    """Return the largest boundary ``< offset``; ``offset`` must be positive."""

    return floor_boundary(table, text, offset - 1)


__all__ = [
    "floor_boundary",
    "following_boundary",
    "preceding_boundary",
    "safe_boundary",
]
