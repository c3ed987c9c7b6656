"""The boundary iterator: a cursor over text driven by a rule table."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union

from boundary_engine.errors import NoTextAttachedError
from boundary_engine.rules.models import RuleTable
from boundary_engine.text import TextBuffer, ensure_offset

from .scanner import floor_boundary, following_boundary, preceding_boundary

DONE = -1
"""Returned when no boundary exists in the requested direction."""

TextInput = Union[TextBuffer, str, Iterable[str]]


class BoundaryIterator:
    """Stateful cursor over one text, moving between boundaries.

    The iterator shares its :class:`RuleTable` (immutable) with every other
    iterator built for the same kind and locale, and holds a reference to the
    attached :class:`TextBuffer`. All offsets are code-point indices in
    ``[0, length]``.

    Instances are not thread-safe: callers must not drive one iterator from
    two threads without their own synchronization. Use :meth:`clone` to hand
    an independent cursor to another thread.

    Before :meth:`set_text` is called every positional query raises
    :class:`NoTextAttachedError`. A failed call never moves the cursor.
    """

    def __init__(self, table: RuleTable, text: Optional[TextInput] = None) -> None:
        self._table = table
        self._buffer: Optional[TextBuffer] = None
        self._position = 0
        if text is not None:
            self.set_text(text)

    @property
    def table(self) -> RuleTable:
        return self._table

    @property
    def kind(self) -> str:
        return self._table.kind

    @property
    def locale(self) -> str:
        return self._table.locale

    @property
    def has_text(self) -> bool:
        return self._buffer is not None

    @property
    def text(self) -> Optional[TextBuffer]:
        return self._buffer

    def set_text(self, text: TextInput) -> None:
        """Attach ``text`` and reset the cursor to 0."""

        self._buffer = TextBuffer.coerce(text)
        self._position = 0

    def current(self) -> int:
        self._require("current")
        return self._position

    def first(self) -> int:
        self._require("first")
        self._position = 0
        return 0

    def last(self) -> int:
        buffer = self._require("last")
        self._position = buffer.length
        return self._position

    def next(self, n: int = 1) -> int:
        """Move ``n`` boundaries (backward when negative).

        Running past either end leaves the cursor at ``0`` or ``length`` and
        returns :data:`DONE`.
        """

        buffer = self._require("next")
        if n == 0:
            return self._position

        content = buffer.content
        length = buffer.length
        position = self._position
        for _ in range(abs(n)):
            if n > 0:
                if position >= length:
                    self._position = length
                    return DONE
                position = following_boundary(self._table, content, position)
            else:
                if position <= 0:
                    self._position = 0
                    return DONE
                position = preceding_boundary(self._table, content, position)
        self._position = position
        return position

    def previous(self) -> int:
        return self.next(-1)

    def following(self, offset: int) -> int:
        """First boundary strictly after ``offset``, or :data:`DONE`."""

        buffer = self._require("following")
        ensure_offset(offset, buffer.length)
        if offset >= buffer.length:
            self._position = buffer.length
            return DONE
        floor = floor_boundary(self._table, buffer.content, offset)
        self._position = following_boundary(self._table, buffer.content, floor)
        return self._position

    def preceding(self, offset: int) -> int:
        """First boundary strictly before ``offset``, or :data:`DONE`."""

        buffer = self._require("preceding")
        ensure_offset(offset, buffer.length)
        if offset <= 0:
            self._position = 0
            return DONE
        self._position = preceding_boundary(self._table, buffer.content, offset)
        return self._position

    def seek(self, offset: int) -> int:
        """Move to the nearest boundary ``<= offset`` and return it."""

        buffer = self._require("seek")
        ensure_offset(offset, buffer.length)
        self._position = floor_boundary(self._table, buffer.content, offset)
        return self._position

    def is_boundary(self, offset: int) -> bool:
        """Return whether ``offset`` is a boundary.

        Like the conventional break-iterator API this also moves the cursor,
        to the nearest boundary ``<= offset``; call :meth:`seek` when only
        the movement is wanted.
        """

        buffer = self._require("is_boundary")
        ensure_offset(offset, buffer.length)
        return self.seek(offset) == offset

    def clone(self) -> "BoundaryIterator":
        """Independent cursor sharing this iterator's table and text."""

        twin = BoundaryIterator(self._table)
        twin._buffer = self._buffer
        twin._position = self._position
        return twin

    __copy__ = clone

    def segments(self) -> Iterator[str]:
        """Yield the text between consecutive boundaries, first to last."""

        buffer = self._require("segments")
        start = self.first()
        end = self.next()
        while end != DONE:
            yield buffer.slice(start, end)
            start, end = end, self.next()

    def __iter__(self) -> Iterator[int]:
        position = self.first()
        while position != DONE:
            yield position
            position = self.next()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, BoundaryIterator):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.locale == other.locale
            and self._buffer == other._buffer
            and self._position == other._position
        )

    def __repr__(self) -> str:
        length = self._buffer.length if self._buffer is not None else None
        return (
            f"BoundaryIterator(kind={self.kind!r}, locale={self.locale!r}, "
            f"position={self._position}, length={length})"
        )

    def _require(self, operation: str) -> TextBuffer:
        if self._buffer is None:
            raise NoTextAttachedError(operation)
        return self._buffer


__all__ = ["BoundaryIterator", "DONE", "TextInput"]
