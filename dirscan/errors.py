"""Error types recorded while scanning directories.

Every error carries the path it is about, so its display is informative on
its own. Iterators never raise these; they collect them for the caller.
"""

from __future__ import annotations

from pathlib import Path


class ScanError(Exception):
    """Base class for failures recorded during a scan."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class ListingError(ScanError):
    """I/O error while reading a directory or resolving an entry type.

    ``path`` is the directory being listed, or the entry whose type could not
    be resolved.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, f"error reading directory {str(path)!r}: {cause}")
        self.cause = cause
        self.__cause__ = cause


class NameDecodeError(ScanError):
    """File name that cannot be represented as UTF-8 text.

    ``path`` points to the specific entry with the bad name.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"error decoding file name {str(path)!r}")


class WalkErrors(Exception):
    """All errors collected by a recursive walk, in encounter order."""

    def __init__(self, errors: list[ScanError]) -> None:
        noun = "error" if len(errors) == 1 else "errors"
        super().__init__(f"{len(errors)} {noun} while walking directory tree")
        self.errors = list(errors)


__all__ = [
    "ScanError",
    "ListingError",
    "NameDecodeError",
    "WalkErrors",
]
