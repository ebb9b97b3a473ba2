"""Recursive depth-first directory walker.

Traversal state lives in an explicit stack of open listings rather than in
Python call frames, so the walk advances one entry per ``next()`` and can be
abandoned at any point. Failures never stop the walk; they are appended to
``Walker.errors`` in the order they happen.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import ListingError, NameDecodeError, ScanError
from .filter import name_matches
from .listing import DirectoryListing, EntryType, decode_name, entry_type, open_listing

if TYPE_CHECKING:
    from .settings import ScanSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkFrame:
    """One directory whose listing is in progress."""

    listing: DirectoryListing
    path: Path


class Walker:
    """Iterator over ``(entry, name)`` pairs in depth-first pre-order.

    Entries are not sorted; each directory's children come in listing order.
    A directory is yielded before its contents, and its contents are finished
    before the walk returns to the directory's later siblings. The same name
    rules apply at every level. Symlinks are never followed: they are leaf
    entries, or dropped entirely when ``skip_symlinks`` is set.

    Only names that are valid UTF-8 are yielded, so ``name`` is always safe to
    print. Parent components of ``entry.path`` may still be undecodable.

    ``errors`` may be passed in to share one collection across walks.
    """

    def __init__(
        self,
        settings: ScanSettings,
        root: str | os.PathLike[str],
        errors: list[ScanError] | None = None,
    ) -> None:
        self.settings = settings
        self.errors: list[ScanError] = [] if errors is None else errors
        self._stack: list[WalkFrame] = []
        self._current: WalkFrame | None = None

        root_path = Path(root)
        try:
            self._current = WalkFrame(open_listing(root_path), root_path)
        except OSError as exc:
            self._record(ListingError(root_path, exc))

    def __iter__(self) -> Walker:
        return self

    def __next__(self) -> tuple[os.DirEntry, str]:
        while self._current is not None:
            frame = self._current
            try:
                entry = frame.listing.next_child()
            except OSError as exc:
                self._record(ListingError(frame.path, exc))
                continue

            if entry is None:
                frame.listing.close()
                self._current = self._stack.pop() if self._stack else None
                continue

            accepted = self._visit(entry)
            if accepted is not None:
                return accepted
        raise StopIteration

    def _visit(self, entry: os.DirEntry) -> tuple[os.DirEntry, str] | None:
        entry_path = Path(entry.path)
        name = decode_name(entry.name)
        if name is None:
            self._record(NameDecodeError(entry_path))
            return None
        if not name_matches(self.settings, name):
            return None

        try:
            typ = entry_type(entry)
        except OSError as exc:
            self._record(ListingError(entry_path, exc))
            return None

        if typ is EntryType.SYMLINK and self.settings.skip_symlinks:
            return None
        if typ is EntryType.DIRECTORY:
            self._descend(entry_path)
            if self.settings.skip_dirs:
                return None
            return entry, name
        if self.settings.skip_files:
            return None
        return entry, name

    def _descend(self, path: Path) -> None:
        """Make ``path`` the current frame, parking the parent on the stack.

        The child's contents are read on later advances. An unreadable child
        is recorded and the walk stays in the parent.
        """
        try:
            listing = open_listing(path)
        except OSError as exc:
            self._record(ListingError(path, exc))
            return
        assert self._current is not None
        self._stack.append(self._current)
        self._current = WalkFrame(listing, path)

    def _record(self, error: ScanError) -> None:
        logger.debug("%s", error)
        self.errors.append(error)

    def close(self) -> None:
        """Release every open listing; the walker yields nothing afterwards."""
        frames = self._stack
        self._stack = []
        if self._current is not None:
            frames.append(self._current)
            self._current = None
        for frame in reversed(frames):
            frame.listing.close()

    def __enter__(self) -> Walker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "WalkFrame",
    "Walker",
]
