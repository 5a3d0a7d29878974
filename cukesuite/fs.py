"""File access that uses a supplied file system or falls back to the OS."""

from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, BinaryIO


@dataclass
class FS:
    """Opens files from ``fs`` when given, otherwise from the local disk.

    ``fs`` may be a mapping of slash-separated names to file contents, or
    any object with an ``open(name)`` method returning a binary file.
    """

    fs: Any = None

    def open(self, name: str) -> BinaryIO:
        """Open ``name`` for binary reading."""
        if self.fs is None:
            return _open_os(name)
        if isinstance(self.fs, Mapping):
            return _open_mapping(self.fs, name)
        return self.fs.open(name)


def _open_os(name: str) -> BinaryIO:
    try:
        return open(name, "rb")
    except FileNotFoundError:
        raise FileNotFoundError(f"open {name}: no such file or directory") from None
    except IsADirectoryError:
        raise IsADirectoryError(f"open {name}: is a directory") from None


def _open_mapping(files: Mapping, name: str) -> BinaryIO:
    if name in files:
        data = files[name]
        if isinstance(data, str):
            data = data.encode("utf-8")
        return io.BytesIO(bytes(data))
    prefix = "" if name == "." else name.rstrip("/") + "/"
    if any(key.startswith(prefix) for key in files):
        raise IsADirectoryError(f"open {name}: is a directory")
    raise FileNotFoundError(f"open {name}: file does not exist")