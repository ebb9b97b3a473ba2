"""Scan settings and the helpers that drive a scan with them.

``ScanSettings`` is immutable; derive variants with ``with_options``. The
filter rules it selects are:

- ``skip_hidden``: names starting with ``.`` (on all platforms)
- ``skip_backup``: ``*~`` and ``*.bak`` backups, ``#*#`` emacs auto-saves
- ``skip_dirs`` / ``skip_files``: directories / everything else
- ``skip_symlinks``: drop symlinks instead of judging them by their target
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields, replace
from typing import TypeVar

from .errors import ScanError, WalkErrors
from .iterate import EntryIterator
from .walk import Walker

R = TypeVar("R")


@dataclass(frozen=True)
class ScanSettings:
    """Filter configuration shared by every level of a scan."""

    skip_hidden: bool = False
    skip_dirs: bool = False
    skip_files: bool = False
    skip_backup: bool = False
    skip_symlinks: bool = False

    @classmethod
    def all(cls) -> ScanSettings:
        """Settings that let every entry through."""
        return cls()

    @classmethod
    def files(cls) -> ScanSettings:
        """Non-directory entries, without hidden and backup names."""
        return cls(skip_hidden=True, skip_dirs=True, skip_backup=True)

    @classmethod
    def dirs(cls) -> ScanSettings:
        """Directory entries, without hidden and backup names."""
        return cls(skip_hidden=True, skip_files=True, skip_backup=True)

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in fields(cls))

    def with_options(self, **flags: bool) -> ScanSettings:
        """Return a copy with the given flags replaced."""
        return replace(self, **flags)

    def as_dict(self) -> dict[str, bool]:
        return asdict(self)

    def entries(self, path: str | os.PathLike[str]) -> EntryIterator:
        """Iterate over the immediate children of ``path``."""
        return EntryIterator(self, path)

    def walker(
        self,
        path: str | os.PathLike[str],
        errors: list[ScanError] | None = None,
    ) -> Walker:
        """Walk ``path`` recursively; errors collect in ``Walker.errors``."""
        return Walker(self, path, errors)

    def read(self, path: str | os.PathLike[str], fn: Callable[[EntryIterator], R]) -> R:
        """Call ``fn`` with an iterator over ``path`` and return its result.

        Raises the recorded ``ScanError`` instead when the listing was not
        clean, even if ``fn`` returned normally.

        Example::

            names = ScanSettings.files().read(".", lambda it: [name for _, name in it])
        """
        with self.entries(path) as iterator:
            result = fn(iterator)
        if iterator.error is not None:
            raise iterator.error
        return result

    def walk(self, path: str | os.PathLike[str], fn: Callable[[Walker], R]) -> R:
        """Call ``fn`` with a recursive walker over ``path`` and return its result.

        Raises ``WalkErrors`` with every collected error when the walk was
        not clean.
        """
        with self.walker(path) as walker:
            result = fn(walker)
        if walker.errors:
            raise WalkErrors(walker.errors)
        return result


__all__ = [
    "ScanSettings",
]
