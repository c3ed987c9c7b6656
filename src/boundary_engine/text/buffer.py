"""Immutable code-point storage that iterators segment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .validation import ensure_index


@dataclass(frozen=True, slots=True)
class TextBuffer:
    """Text attached to an iterator, addressed by code-point index.

    Python strings are already code-point sequences, so the buffer is a thin
    wrapper that pins the content and owns range checking. Valid cursor
    offsets are ``[0, length]``; ``length`` is the end-of-text position and
    has no character.
    """

    content: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise TypeError(
                f"TextBuffer content must be str, got {type(self.content).__name__}"
            )

    @classmethod
    def coerce(cls, value: "TextBuffer | str | Iterable[str]") -> "TextBuffer":
        """Accept a buffer, a string, or any iterable of characters."""

        if isinstance(value, TextBuffer):
            return value
        if isinstance(value, str):
            return cls(value)
        if value is None:
            raise TypeError("text cannot be None")
        return cls("".join(value))

    @property
    def length(self) -> int:
        return len(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def __str__(self) -> str:
        return self.content

    def __iter__(self) -> Iterator[str]:
        return iter(self.content)

    def char_at(self, index: int) -> str:
        ensure_index(index, len(self.content))
        return self.content[index]

    def code_point_at(self, index: int) -> int:
        return ord(self.char_at(index))

    def slice(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        return self.content[start:end]


__all__ = ["TextBuffer"]
