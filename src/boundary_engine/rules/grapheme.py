"""Extended grapheme cluster rules (UAX #29, GB3-GB13)."""

from __future__ import annotations

from typing import Mapping, Optional

from .builder import TableBuilder
from .classes import GRAPHEME_PROPERTIES, build_classifier
from .models import RuleTable

_ATTACHING = ("Extend", "ZWJ", "SpacingMark")
_CONTROLS = ("CR", "LF", "Control")
_SEGMENT_STATES = ("other", "l", "v", "t", "prepend", "ri_odd", "ri_even", "pict_zwj")


def _builder() -> TableBuilder:
    b = TableBuilder("character", description="extended grapheme clusters")
    b.enter("CR", "cr")
    b.enter(("LF", "Control"), "control")
    b.enter("L", "l")
    b.enter(("V", "LV"), "v")
    b.enter(("T", "LVT"), "t")
    b.enter("Prepend", "prepend")
    b.enter("ExtPict", "pict")
    b.enter("RI", "ri_odd")
    b.enter(("Extend", "ZWJ", "SpacingMark", "Other"), "other")

    # GB3
    b.join("cr", "LF", "control")
    # GB9, GB9a
    b.join(_SEGMENT_STATES, _ATTACHING, "other")
    b.join("pict", "Extend", "=")
    b.join("pict", "SpacingMark", "other")
    b.join("pict", "ZWJ", "pict_zwj")
    # GB9b
    b.join(
        "prepend",
        [cls for cls in b.classes if cls not in _CONTROLS and cls not in _ATTACHING],
    )
    # GB6-GB8
    b.join("l", ("L", "V", "LV", "LVT"))
    b.join("v", ("V", "T"))
    b.join("t", "T")
    # GB11
    b.join("pict_zwj", "ExtPict")
    # GB12, GB13
    b.join("ri_odd", "RI", "ri_even")
    return b


def build_grapheme_table(
    locale: str = "root",
    *,
    overrides: Optional[Mapping[int, str]] = None,
    cache_size: Optional[int] = None,
) -> RuleTable:
    classifier = build_classifier(
        GRAPHEME_PROPERTIES,
        default="Other",
        overrides=overrides,
        cache_size=cache_size,
    )
    return _builder().build(locale, classifier)


__all__ = ["build_grapheme_table"]
