"""Tag filter expressions for selecting scenarios.

A filter is a list of ``&&``-joined groups; each group is a comma-separated
list of tags of which at least one must match. A tag prefixed with ``~``
matches when the scenario lacks that tag. ``@`` signs are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

P = TypeVar("P")


def apply_tag_filter(filter: str, pickles: list[P]) -> list[P]:
    """Return the pickles whose tags satisfy ``filter``.

    An empty filter returns the given list unchanged.
    """
    if filter == "":
        return pickles
    return [pickle for pickle in pickles if matches(filter, pickle.tags)]


def matches(filter: str, tags: Iterable[Any]) -> bool:
    """Tell whether a set of tags satisfies the filter expression."""
    names = {_tag_name(tag) for tag in tags}
    result = True
    for and_group in filter.split("&&"):
        group_ok = False
        for raw in and_group.split(","):
            tag = raw.strip().replace("@", "")
            if not tag:
                raise ValueError(f"empty tag in filter: {filter!r}")
            group_ok = tag in names or group_ok
            if tag.startswith("~"):
                group_ok = tag[1:] not in names or group_ok
        result = result and group_ok
    return result


def _tag_name(tag: Any) -> str:
    name = tag if isinstance(tag, str) else tag.name
    return name.replace("@", "")