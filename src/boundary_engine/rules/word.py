"""Word boundary rules (UAX #29, WB3-WB16) with locale tailoring."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .builder import TableBuilder
from .classes import WORD_PROPERTIES, build_classifier
from .models import RuleTable

# COLON, PRESENTATION FORM FOR VERTICAL COLON, FULLWIDTH COLON
COLONS = (0x003A, 0xFE55, 0xFF1A)

# States that remember a trailing ZWJ; each has a "<state>_zwj" twin.
_ZWJ_CARRIERS = (
    "space",
    "letter",
    "numeric",
    "katakana",
    "extendnumlet",
    "ri_odd",
    "ri_even",
    "other",
)
_MID_STATES = ("letter_mid", "numeric_mid")


def _zwj(state: str) -> str:
    return f"{state}_zwj"


def _twins(*states: str) -> tuple[str, ...]:
    return states + tuple(_zwj(s) for s in states if s in _ZWJ_CARRIERS)


def _builder() -> TableBuilder:
    b = TableBuilder("word", description="words, spaces and punctuation")
    b.enter("CR", "cr")
    b.enter(("LF", "Newline"), "newline")
    b.enter("WSegSpace", "space")
    b.enter("ALetter", "letter")
    b.enter("Numeric", "numeric")
    b.enter("Katakana", "katakana")
    b.enter("ExtendNumLet", "extendnumlet")
    b.enter("RI", "ri_odd")
    b.enter(
        ("Extend", "MidLetter", "MidNumLet", "MidNum", "ExtPict", "Other"), "other"
    )
    b.enter("ZWJ", _zwj("other"))

    # WB3
    b.join("cr", "LF", "newline")
    # WB3d
    b.join(_twins("space"), "WSegSpace", "space")
    # WB4
    b.join(_MID_STATES, ("Extend", "ZWJ"), "=")
    for state in _ZWJ_CARRIERS:
        b.join((state, _zwj(state)), "Extend", state)
        b.join((state, _zwj(state)), "ZWJ", _zwj(state))
    # WB3c
    b.join(tuple(_zwj(s) for s in _ZWJ_CARRIERS), "ExtPict")
    # WB5, WB9, WB13a
    b.join(_twins("letter"), ("ALetter", "Numeric", "ExtendNumLet"))
    # WB6, WB7
    b.mark(_twins("letter"), ("MidLetter", "MidNumLet"), "letter_mid")
    b.join("letter_mid", "ALetter")
    # WB8, WB10, WB13a
    b.join(_twins("numeric"), ("Numeric", "ALetter", "ExtendNumLet"))
    # WB11, WB12
    b.mark(_twins("numeric"), ("MidNum", "MidNumLet"), "numeric_mid")
    b.join("numeric_mid", "Numeric")
    # WB13, WB13a
    b.join(_twins("katakana"), ("Katakana", "ExtendNumLet"))
    # WB13a, WB13b
    b.join(
        _twins("extendnumlet"), ("ExtendNumLet", "ALetter", "Numeric", "Katakana")
    )
    # WB15, WB16
    b.join(_twins("ri_odd"), "RI", "ri_even")
    return b


def build_word_table(
    locale: str = "root",
    *,
    colon_joins_letters: bool = False,
    overrides: Optional[Mapping[int, str]] = None,
    cache_size: Optional[int] = None,
) -> RuleTable:
    """Build the word table.

    The root table treats colons as plain punctuation; Finnish and Swedish
    tailor them back to ``MidLetter`` so forms like ``EU:n`` stay one word.
    """

    pinned: Dict[int, str] = {
        cp: ("MidLetter" if colon_joins_letters else "Other") for cp in COLONS
    }
    pinned.update(overrides or {})
    classifier = build_classifier(
        WORD_PROPERTIES, default="Other", overrides=pinned, cache_size=cache_size
    )
    return _builder().build(locale, classifier)


__all__ = ["COLONS", "build_word_table"]
