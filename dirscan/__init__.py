"""Directory entry iteration with hidden/backup filtering and safe names.

Features:

- every yielded name is valid UTF-8 text, or an error is recorded
- hidden entries and editor/VCS backup files can be skipped
- files only, directories only, or everything
- one-level listing or recursive depth-first walk
- errors are collected instead of aborting the scan

For example, all non-hidden files below the current directory::

    from dirscan import ScanSettings

    with ScanSettings.files().walker(".") as walker:
        for entry, name in walker:
            print(name, entry.path)
    for error in walker.errors:
        print(error)
"""

from __future__ import annotations

import logging

from .errors import ListingError, NameDecodeError, ScanError, WalkErrors
from .filter import matches, name_matches
from .iterate import EntryIterator
from .settings import ScanSettings
from .walk import Walker

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ScanSettings",
    "EntryIterator",
    "Walker",
    "ScanError",
    "ListingError",
    "NameDecodeError",
    "WalkErrors",
    "matches",
    "name_matches",
]
