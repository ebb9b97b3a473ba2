"""Single-level directory iterator.

Lists the immediate children of one directory with the full filter applied,
type selection included. Unlike the recursive walker, it keeps only one
error: the first one, unless a listing error arrives after a decode error.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import ListingError, NameDecodeError, ScanError
from .filter import matches
from .listing import DirectoryListing, decode_name, open_listing

if TYPE_CHECKING:
    from .settings import ScanSettings


def keep_worse_error(old: ScanError | None, new: ScanError) -> ScanError:
    """Return the error worth reporting out of ``old`` and ``new``.

    A listing error replaces a decode error because it usually means some
    entries were never seen, while a bad name is often tolerable.
    """
    if old is None:
        return new
    if isinstance(old, NameDecodeError) and isinstance(new, ListingError):
        return new
    return old


class EntryIterator:
    """Iterator over ``(entry, name)`` pairs of one directory.

    ``error`` is ``None`` after a clean listing.
    """

    def __init__(self, settings: ScanSettings, path: str | os.PathLike[str]) -> None:
        self.settings = settings
        self.path = Path(path)
        self.error: ScanError | None = None
        self._listing: DirectoryListing | None = None
        try:
            self._listing = open_listing(self.path)
        except OSError as exc:
            self._record(ListingError(self.path, exc))

    def __iter__(self) -> EntryIterator:
        return self

    def __next__(self) -> tuple[os.DirEntry, str]:
        while self._listing is not None:
            try:
                entry = self._listing.next_child()
            except OSError as exc:
                self._record(ListingError(self.path, exc))
                continue
            if entry is None:
                self.close()
                break

            name = decode_name(entry.name)
            if name is None:
                self._record(NameDecodeError(Path(entry.path)))
                continue
            try:
                if matches(self.settings, entry, name):
                    return entry, name
            except OSError as exc:
                self._record(ListingError(Path(entry.path), exc))
        raise StopIteration

    def _record(self, error: ScanError) -> None:
        self.error = keep_worse_error(self.error, error)

    def close(self) -> None:
        if self._listing is not None:
            self._listing.close()
            self._listing = None

    def __enter__(self) -> EntryIterator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "EntryIterator",
    "keep_worse_error",
]
