"""Error taxonomy shared by the text, rules, and iterator layers."""

from __future__ import annotations

from typing import Optional


class BoundaryError(RuntimeError):
    """Base class for every error raised by the boundary engine."""


class NoTextAttachedError(BoundaryError):
    """Raised when a positional query runs before ``set_text``."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"'{operation}' requires text; call set_text() first")
        self.operation = operation


class OutOfRangeError(BoundaryError):
    """Raised when an offset falls outside ``[0, length]``."""

    def __init__(self, offset: int, length: int) -> None:
        super().__init__(f"Offset {offset} outside valid range [0, {length}]")
        self.offset = offset
        self.length = length


class UnsupportedLocaleError(BoundaryError):
    """Raised when no rule table resolves for a kind, root included.

    With the default rules loaded this means the registry was misconfigured.
    """

    def __init__(
        self, kind: str, locale: str, *, tried: Optional[tuple[str, ...]] = None
    ) -> None:
        message = f"No '{kind}' rule table for locale '{locale}'"
        if tried:
            message += f" (tried {', '.join(tried)})"
        super().__init__(message)
        self.kind = kind
        self.locale = locale
        self.tried = tried or ()


__all__ = [
    "BoundaryError",
    "NoTextAttachedError",
    "OutOfRangeError",
    "UnsupportedLocaleError",
]
