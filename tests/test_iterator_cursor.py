import copy

import pytest

from boundary_engine import (
    DONE,
    NoTextAttachedError,
    OutOfRangeError,
    TextBuffer,
    word_iterator,
)
from boundary_engine.iterator import BoundaryIterator

SAMPLE = "Hi there!"
SAMPLE_BOUNDARIES = [0, 2, 3, 8, 9]


def make_iterator(text: str = SAMPLE) -> BoundaryIterator:
    iterator = word_iterator("en_US")
    iterator.set_text(text)
    return iterator


def test_queries_before_set_text_raise() -> None:
    iterator = word_iterator()

    assert not iterator.has_text
    assert iterator.text is None
    for call in (
        iterator.current,
        iterator.first,
        iterator.last,
        iterator.next,
        iterator.previous,
    ):
        with pytest.raises(NoTextAttachedError):
            call()
    with pytest.raises(NoTextAttachedError) as excinfo:
        iterator.following(0)
    assert excinfo.value.operation == "following"


def test_walk_forward_then_done_is_idempotent() -> None:
    iterator = make_iterator()

    seen = [iterator.first()]
    while (position := iterator.next()) != DONE:
        seen.append(position)

    assert seen == SAMPLE_BOUNDARIES
    assert iterator.next() == DONE
    assert iterator.current() == 9


def test_walk_backward_from_last() -> None:
    iterator = make_iterator()

    seen = [iterator.last()]
    while (position := iterator.previous()) != DONE:
        seen.append(position)

    assert seen == list(reversed(SAMPLE_BOUNDARIES))
    assert iterator.previous() == DONE
    assert iterator.current() == 0


def test_next_with_count() -> None:
    iterator = make_iterator()
    iterator.first()

    assert iterator.next(3) == 8
    assert iterator.next(-2) == 2
    assert iterator.next(0) == 2
    assert iterator.next(10) == DONE
    assert iterator.current() == 9
    assert iterator.next(-10) == DONE
    assert iterator.current() == 0


def test_following_and_preceding_at_interior_offsets() -> None:
    iterator = make_iterator()

    assert iterator.following(1) == 2
    assert iterator.current() == 2
    assert iterator.following(2) == 3
    assert iterator.following(5) == 8
    assert iterator.preceding(5) == 3
    assert iterator.preceding(3) == 2
    assert iterator.current() == 2


def test_following_and_preceding_at_edges() -> None:
    iterator = make_iterator()

    assert iterator.following(9) == DONE
    assert iterator.current() == 9
    assert iterator.preceding(0) == DONE
    assert iterator.current() == 0
    assert iterator.following(0) == 2
    assert iterator.preceding(9) == 8


def test_out_of_range_offsets_leave_cursor_alone() -> None:
    iterator = make_iterator()
    iterator.following(4)

    for call in (iterator.following, iterator.preceding, iterator.is_boundary):
        with pytest.raises(OutOfRangeError):
            call(10)
        with pytest.raises(OutOfRangeError):
            call(-1)

    assert iterator.current() == 8


def test_is_boundary_moves_to_floor() -> None:
    iterator = make_iterator()

    assert iterator.is_boundary(3)
    assert iterator.current() == 3
    assert not iterator.is_boundary(5)
    assert iterator.current() == 3
    assert iterator.is_boundary(9)
    assert iterator.is_boundary(0)


def test_seek_returns_floor_boundary() -> None:
    iterator = make_iterator()

    assert iterator.seek(7) == 3
    assert iterator.seek(8) == 8
    assert iterator.current() == 8


def test_set_text_resets_position() -> None:
    iterator = make_iterator()
    iterator.last()

    iterator.set_text("ok")

    assert iterator.current() == 0
    assert iterator.text == TextBuffer("ok")
    assert list(iterator) == [0, 2]


def test_set_text_accepts_character_iterables() -> None:
    iterator = word_iterator()

    iterator.set_text(iter(SAMPLE))

    assert iterator.has_text
    assert str(iterator.text) == SAMPLE


def test_empty_text_has_single_boundary() -> None:
    iterator = make_iterator("")

    assert iterator.first() == 0
    assert iterator.last() == 0
    assert iterator.next() == DONE
    assert iterator.previous() == DONE
    assert iterator.is_boundary(0)
    assert list(iterator) == [0]
    assert list(iterator.segments()) == []


def test_clone_is_independent_but_shares_text_and_table() -> None:
    iterator = make_iterator()
    iterator.following(1)

    twin = iterator.clone()
    twin.last()

    assert iterator.current() == 2
    assert twin.current() == 9
    assert twin.text is iterator.text
    assert twin.table is iterator.table
    assert copy.copy(iterator).current() == 2


def test_equality_covers_kind_locale_text_and_position() -> None:
    first = make_iterator()
    second = make_iterator()

    assert first == second
    second.next()
    assert first != second
    first.next()
    assert first == second
    assert first != word_iterator("fi")
    assert first != "Hi there!"


def test_segments_cover_the_text() -> None:
    iterator = make_iterator()

    pieces = list(iterator.segments())

    assert pieces == ["Hi", " ", "there", "!"]
    assert "".join(pieces) == SAMPLE


def test_offsets_count_code_points() -> None:
    iterator = word_iterator()
    iterator.set_text("\U0001F600 ok")

    assert list(iterator) == [0, 1, 2, 4]


def test_repr_mentions_kind_and_position() -> None:
    iterator = make_iterator()

    assert "kind='word'" in repr(iterator)
    assert "length=9" in repr(iterator)
