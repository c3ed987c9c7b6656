"""Environment-driven engine settings."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "BOUNDARY_ENGINE_"
ROOT_LOCALE = "root"

_SETTINGS: Optional["EngineSettings"] = None
_SETTINGS_LOCK = threading.Lock()


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Values the factories and rule tables read at construction time."""

    default_locale: str = ROOT_LOCALE
    classifier_cache_size: int = 4096

    def __post_init__(self) -> None:
        if not self.default_locale.strip():
            raise ValueError("default_locale cannot be empty")
        if self.classifier_cache_size < 0:
            raise ValueError("classifier_cache_size cannot be negative")


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build settings from ``BOUNDARY_ENGINE_*`` variables."""

    env = os.environ if environ is None else environ
    default_locale = _env(env, "DEFAULT_LOCALE") or ROOT_LOCALE
    raw_cache = _env(env, "CLASSIFIER_CACHE")
    try:
        cache_size = int(raw_cache) if raw_cache is not None else 4096
    except ValueError as exc:
        raise ValueError(
            f"{ENV_PREFIX}CLASSIFIER_CACHE must be an integer, got {raw_cache!r}"
        ) from exc
    return EngineSettings(
        default_locale=default_locale, classifier_cache_size=cache_size
    )


def get_settings() -> EngineSettings:
    global _SETTINGS
    with _SETTINGS_LOCK:
        if _SETTINGS is None:
            _SETTINGS = load_settings()
        return _SETTINGS


def reset_settings(settings: Optional[EngineSettings] = None) -> None:
    """Drop (or replace) the cached settings; mainly for tests."""

    global _SETTINGS
    with _SETTINGS_LOCK:
        _SETTINGS = settings


__all__ = [
    "EngineSettings",
    "ROOT_LOCALE",
    "get_settings",
    "load_settings",
    "reset_settings",
]
