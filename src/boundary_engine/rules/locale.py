"""Locale identifier normalization and fallback chains."""

from __future__ import annotations

from typing import Optional

ROOT = "root"
_ROOT_ALIASES = frozenset(("", "root", "und", "c", "posix"))


def normalize_locale(locale: Optional[str]) -> str:
    """Canonicalize ``en-us``, ``EN_US.UTF-8`` and friends to ``en_US``.

    The language is lower-cased, a four-letter script subtag is title-cased,
    regions are upper-cased and variants are kept upper-case, matching the
    underscore form used by ``Locale.toString``-style identifiers.
    """

    if locale is None:
        return ROOT
    raw = locale.strip()
    for separator in ("@", "."):
        raw = raw.split(separator, 1)[0]
    if raw.lower() in _ROOT_ALIASES:
        return ROOT

    parts = [part for part in raw.replace("-", "_").split("_") if part]
    if not parts:
        return ROOT
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        else:
            normalized.append(part.upper())
    return "_".join(normalized)


def fallback_chain(locale: Optional[str]) -> tuple[str, ...]:
    """Return lookup candidates from most to least specific, ending at root."""

    normalized = normalize_locale(locale)
    if normalized == ROOT:
        return (ROOT,)
    parts = normalized.split("_")
    chain = ["_".join(parts[:end]) for end in range(len(parts), 0, -1)]
    chain.append(ROOT)
    return tuple(dict.fromkeys(chain))


__all__ = ["ROOT", "fallback_chain", "normalize_locale"]
