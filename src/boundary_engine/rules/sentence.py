"""Sentence boundary rules (UAX #29, SB3-SB11)."""

from __future__ import annotations

from typing import Mapping, Optional

from .builder import TableBuilder
from .classes import SENTENCE_PROPERTIES, build_classifier
from .models import RuleTable

_PARA_SEP = ("LF", "Sep")
_BODY_CLASSES = ("Sp", "OLetter", "Numeric", "Close", "SContinue", "Other")
_ATERM_STATES = ("aterm", "aterm_letter", "aterm_close", "aterm_sp")
_STERM_STATES = ("sterm", "sterm_close", "sterm_sp")


def _builder() -> TableBuilder:
    b = TableBuilder("sentence", description="sentences")
    b.enter("CR", "cr")
    b.enter(_PARA_SEP, "parasep")
    b.enter(("Upper", "Lower"), "letter")
    b.enter("ATerm", "aterm")
    b.enter("STerm", "sterm")
    b.enter(("Extend",) + _BODY_CLASSES, "body")

    # SB3
    b.join("cr", "LF", "parasep")

    # SB998: inside a sentence nothing breaks.
    for state in ("body", "letter"):
        b.join(state, _BODY_CLASSES, "body")
        b.join(state, ("Upper", "Lower"), "letter")
        b.join(state, "STerm", "sterm")
        b.join(state, ("CR",) + _PARA_SEP)
        b.join(state, "Extend", "=")
    b.join("body", "ATerm", "aterm")
    # SB7 needs to know a letter preceded the full stop.
    b.join("letter", "ATerm", "aterm_letter")

    terminals = _ATERM_STATES + _STERM_STATES
    # SB5
    b.join(terminals, "Extend", "=")
    # SB8a
    b.join(terminals, "SContinue", "body")
    b.join(terminals, ("ATerm", "STerm"))
    # SB9, SB10
    b.join(terminals, ("CR",) + _PARA_SEP)
    b.join(("aterm", "aterm_letter", "aterm_close"), "Close", "aterm_close")
    b.join(("sterm", "sterm_close"), "Close", "sterm_close")
    b.join(_ATERM_STATES, "Sp", "aterm_sp")
    b.join(_STERM_STATES, "Sp", "sterm_sp")
    # SB6
    b.join(("aterm", "aterm_letter"), "Numeric", "body")
    # SB7
    b.join("aterm_letter", "Upper", "letter")

    # SB8: after a full stop, a lower-case letter reached through anything
    # but letters, separators or terminators continues the sentence.
    b.join(_ATERM_STATES, "Lower", "letter")
    b.mark(_ATERM_STATES, "Other", "aterm_pending")
    b.mark(("aterm_close", "aterm_sp"), "Numeric", "aterm_pending")
    b.mark("aterm_sp", "Close", "aterm_pending")
    b.join("aterm_pending", "Lower", "letter")
    b.join(
        "aterm_pending",
        ("Extend", "Sp", "Numeric", "Close", "SContinue", "Other"),
        "aterm_pending",
    )
    return b


def build_sentence_table(
    locale: str = "root",
    *,
    overrides: Optional[Mapping[int, str]] = None,
    cache_size: Optional[int] = None,
) -> RuleTable:
    classifier = build_classifier(
        SENTENCE_PROPERTIES,
        default="Other",
        overrides=overrides,
        cache_size=cache_size,
    )
    return _builder().build(locale, classifier)


__all__ = ["build_sentence_table"]
