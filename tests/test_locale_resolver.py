import threading
import time

import pytest

from boundary_engine import UnsupportedLocaleError
from boundary_engine.rules import (
    LocaleResolver,
    RuleRegistry,
    build_line_table,
    build_word_table,
    fallback_chain,
    normalize_locale,
)
from boundary_engine.runtime.settings import EngineSettings, reset_settings


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("en-US", "en_US"),
        ("EN_us", "en_US"),
        ("zh-hant-tw", "zh_Hant_TW"),
        ("de_DE.UTF-8", "de_DE"),
        ("sv_SE@collation=phonebook", "sv_SE"),
        ("", "root"),
        ("und", "root"),
        (None, "root"),
    ],
)
def test_normalize_locale(raw: str | None, expected: str) -> None:
    assert normalize_locale(raw) == expected


def test_fallback_chain_truncates_to_root() -> None:
    assert fallback_chain("zh_Hant_TW") == ("zh_Hant_TW", "zh_Hant", "zh", "root")
    assert fallback_chain("root") == ("root",)


def test_resolver_prefers_exact_then_language_then_root() -> None:
    resolver = LocaleResolver()

    assert resolver.resolve("word", "fi_FI").locale == "fi"
    assert resolver.resolve("word", "sv").locale == "sv"
    assert resolver.resolve("word", "en_US").locale == "root"
    assert resolver.resolve("line", "fi").locale == "root"


def test_resolver_exact_tag_wins_over_language() -> None:
    registry = RuleRegistry()
    registry.register("word", "root", build_word_table)
    registry.register("word", "pt", build_word_table)
    registry.register("word", "pt_BR", build_word_table)
    resolver = LocaleResolver(registry)

    assert resolver.resolve("word", "pt-br").locale == "pt_BR"
    assert resolver.resolve("word", "pt_PT").locale == "pt"


def test_resolver_caches_and_shares_tables() -> None:
    resolver = LocaleResolver()

    first = resolver.resolve("word", "en_US")
    again = resolver.resolve("word", "en-us")
    other_locale = resolver.resolve("word", "de_DE")

    assert first is again
    assert first is other_locale


def test_resolver_uses_configured_default_locale() -> None:
    reset_settings(EngineSettings(default_locale="fi"))
    try:
        resolver = LocaleResolver()
        assert resolver.resolve("word").locale == "fi"
        assert resolver.candidates(None) == ("fi", "root")
    finally:
        reset_settings()


def test_resolver_builds_once_under_concurrent_first_use() -> None:
    calls: list[str] = []

    def slow_builder(tag: str):
        calls.append(tag)
        time.sleep(0.05)
        return build_line_table(tag)

    registry = RuleRegistry()
    registry.register("line", "root", slow_builder)
    resolver = LocaleResolver(registry)
    results: list[object] = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        results.append(resolver.resolve("line", "en_US"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == ["root"]
    assert len(results) == 8
    assert all(table is results[0] for table in results)


def test_resolver_refreshes_after_registry_change() -> None:
    registry = RuleRegistry()
    registry.register("word", "root", build_word_table)
    resolver = LocaleResolver(registry)

    assert resolver.resolve("word", "fi").locale == "root"

    registry.register("word", "fi", build_word_table)

    assert resolver.resolve("word", "fi").locale == "fi"


def test_resolver_reset_forces_rebuild() -> None:
    resolver = LocaleResolver()
    before = resolver.resolve("sentence", "en")

    resolver.reset("sentence")

    assert resolver.resolve("sentence", "en") is not before


def test_missing_root_table_is_unsupported() -> None:
    registry = RuleRegistry()
    registry.register("word", "fi", build_word_table)
    resolver = LocaleResolver(registry)

    with pytest.raises(UnsupportedLocaleError) as excinfo:
        resolver.resolve("word", "en_US")

    assert excinfo.value.kind == "word"
    assert excinfo.value.tried == ("en_US", "en", "root")


def test_builder_producing_wrong_kind_is_rejected() -> None:
    registry = RuleRegistry()
    registry.register("word", "root", build_line_table)
    resolver = LocaleResolver(registry)

    with pytest.raises(ValueError, match="produced a 'line' table"):
        resolver.resolve("word")


def test_resolver_bounds_per_locale_cache() -> None:
    resolver = LocaleResolver(max_cached_locales=4)
    root_table = resolver.resolve("word", "root")

    for index in range(50):
        assert resolver.resolve("word", f"x{index}_ZZ") is root_table

    assert resolver.cached_locales() <= 4
    assert len(resolver._locks) == 1


def test_reset_drops_build_locks_for_kind() -> None:
    resolver = LocaleResolver()
    resolver.resolve("word", "fi")
    resolver.resolve("line", "fi")

    resolver.reset("word")

    assert set(resolver._locks) == {("line", "root")}
