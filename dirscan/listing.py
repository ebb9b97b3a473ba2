"""Directory listing primitives backed by ``os.scandir``.

Iterators in this package only talk to the filesystem through this module:
opening a listing, pulling children one by one, classifying a child without
following links, and stat-ing through a symlink when a target type matters.
"""

from __future__ import annotations

import enum
import os
import stat
from collections.abc import Iterator
from pathlib import Path


class EntryType(enum.Enum):
    """Type of a directory child as reported without following links."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class DirectoryListing:
    """Open listing of one directory's immediate children.

    ``next_child`` returns ``None`` once the listing is exhausted and may raise
    ``OSError`` mid-listing. The listing must be closed to release the
    underlying handle.
    """

    def __init__(self, path: Path, entries: Iterator[os.DirEntry]) -> None:
        self.path = path
        self._entries = entries
        self._closed = False

    def next_child(self) -> os.DirEntry | None:
        if self._closed:
            return None
        try:
            return next(self._entries)
        except StopIteration:
            return None

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._entries, "close", None)
        if close is not None:
            close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> DirectoryListing:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_listing(path: Path) -> DirectoryListing:
    """Begin listing ``path``; raises ``OSError`` when it cannot be read."""
    return DirectoryListing(path, os.scandir(path))


def entry_type(entry: os.DirEntry) -> EntryType:
    """Classify ``entry`` without following symlinks.

    Raises ``OSError`` when the type cannot be determined.
    """
    if entry.is_symlink():
        return EntryType.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return EntryType.DIRECTORY
    return EntryType.FILE


def resolve_symlink_type(path: Path) -> EntryType:
    """Return the type of the symlink target at ``path``.

    Dangling links and unreadable targets raise ``OSError``.
    """
    mode = os.stat(path).st_mode
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    return EntryType.FILE


def decode_name(raw: str) -> str | None:
    """Return ``raw`` when it is valid text, else ``None``.

    ``os.scandir`` maps undecodable bytes to lone surrogates, which refuse to
    encode as UTF-8.
    """
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return raw


__all__ = [
    "EntryType",
    "DirectoryListing",
    "open_listing",
    "entry_type",
    "resolve_symlink_type",
    "decode_name",
]
