"""Entry filter rules shared by the single-level and recursive iterators."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .listing import EntryType, entry_type, resolve_symlink_type

if TYPE_CHECKING:
    from .settings import ScanSettings


def name_matches(settings: ScanSettings, name: str) -> bool:
    """Return whether ``name`` passes the hidden and backup rules."""
    if settings.skip_hidden and name.startswith("."):
        return False
    if settings.skip_backup:
        if name.endswith("~"):
            return False
        if name.endswith(".bak"):
            return False
        if name.startswith("#") and name.endswith("#"):
            return False
    return True


def matches(settings: ScanSettings, entry: os.DirEntry, name: str) -> bool:
    """Return whether ``entry`` passes the name rules and type selection.

    The entry type is only looked at when ``skip_dirs`` or ``skip_files`` is
    set. Symlinks are either rejected (``skip_symlinks``) or judged by their
    target type. Type lookup failures raise ``OSError``; they are not treated
    as rejections.
    """
    if not name_matches(settings, name):
        return False
    if not (settings.skip_dirs or settings.skip_files):
        return True

    typ = entry_type(entry)
    if typ is EntryType.SYMLINK:
        if settings.skip_symlinks:
            return False
        typ = resolve_symlink_type(Path(entry.path))
    if settings.skip_dirs and typ is EntryType.DIRECTORY:
        return False
    if settings.skip_files and typ is not EntryType.DIRECTORY:
        return False
    return True


__all__ = [
    "name_matches",
    "matches",
]
