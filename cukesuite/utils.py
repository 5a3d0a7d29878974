"""Small shared helpers: padding and the clock used for run timestamps."""

from __future__ import annotations

from datetime import datetime

DEV_VERSION = "v0.0.0-dev"


def spaces(n: int) -> str:
    """Return ``n`` spaces; a negative count yields a single space."""
    if n < 0:
        n = 1
    return " " * n


def time_now() -> datetime:
    """Return the current local time used to stamp test runs."""
    return datetime.now()


def _pick_version(current: str, build_version: str | None) -> str:
    """Prefer a real build version over the development placeholder."""
    if current == DEV_VERSION and build_version and build_version != "(devel)":
        return build_version
    return current