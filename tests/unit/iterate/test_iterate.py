"""Tests for the single-level entry iterator and its error priority."""

from __future__ import annotations

import errno
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirscan import EntryIterator, ListingError, NameDecodeError, ScanSettings
from dirscan.iterate import keep_worse_error


class EntryIteratorTests(unittest.TestCase):
    def _make_tree(self, root: Path) -> None:
        (root / "a.txt").write_text("a\n", encoding="utf-8")
        (root / ".hidden").write_text("h\n", encoding="utf-8")
        (root / "old.txt~").write_text("o\n", encoding="utf-8")
        (root / "sub").mkdir()
        (root / "sub" / "nested.txt").write_text("n\n", encoding="utf-8")

    def test_files_preset_lists_top_level_files_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)

            with EntryIterator(ScanSettings.files(), root) as iterator:
                names = [name for _entry, name in iterator]

            self.assertEqual(names, ["a.txt"])
            self.assertIsNone(iterator.error)

    def test_dirs_preset_resolves_symlinked_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            os.symlink(root / "sub", root / "link")
            os.symlink(root / "a.txt", root / "file_link")

            names = sorted(name for _entry, name in EntryIterator(ScanSettings.dirs(), root))

            self.assertEqual(names, ["link", "sub"])

    def test_skip_symlinks_drops_links_under_type_filter(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)
            os.symlink(root / "sub", root / "link")

            settings = ScanSettings.dirs().with_options(skip_symlinks=True)
            names = [name for _entry, name in EntryIterator(settings, root)]

            self.assertEqual(names, ["sub"])

    def test_dangling_symlink_is_recorded_when_type_matters(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            os.symlink(root / "gone", root / "dangling")

            iterator = EntryIterator(ScanSettings.files(), root)
            names = [name for _entry, name in iterator]

            self.assertEqual(names, ["a.txt"])
            self.assertIsInstance(iterator.error, ListingError)
            self.assertEqual(iterator.error.path, root / "dangling")

    def test_dangling_symlink_is_listed_without_type_filter(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            os.symlink(root / "gone", root / "dangling")

            with mock.patch("dirscan.filter.resolve_symlink_type") as resolve:
                iterator = EntryIterator(ScanSettings.all(), root)
                names = [name for _entry, name in iterator]

            self.assertEqual(names, ["dangling"])
            self.assertIsNone(iterator.error)
            resolve.assert_not_called()

    def test_missing_directory_records_listing_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            iterator = EntryIterator(ScanSettings.all(), missing)

            self.assertEqual(list(iterator), [])
            self.assertIsInstance(iterator.error, ListingError)
            self.assertEqual(iterator.error.path, missing)

    def test_close_stops_iteration(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self._make_tree(root)

            iterator = EntryIterator(ScanSettings.all(), root)
            next(iterator)
            iterator.close()

            self.assertEqual(list(iterator), [])


class KeepWorseErrorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.decode_a = NameDecodeError(Path("/scan/a"))
        self.decode_b = NameDecodeError(Path("/scan/b"))
        self.listing_a = ListingError(Path("/scan"), OSError(errno.EIO, "io"))
        self.listing_b = ListingError(Path("/scan/sub"), OSError(errno.EACCES, "denied"))

    def test_first_error_is_kept(self) -> None:
        self.assertIs(keep_worse_error(None, self.decode_a), self.decode_a)
        self.assertIs(keep_worse_error(self.decode_a, self.decode_b), self.decode_a)
        self.assertIs(keep_worse_error(self.listing_a, self.listing_b), self.listing_a)

    def test_listing_error_overrides_decode_error(self) -> None:
        self.assertIs(keep_worse_error(self.decode_a, self.listing_a), self.listing_a)

    def test_decode_error_never_overrides_listing_error(self) -> None:
        self.assertIs(keep_worse_error(self.listing_a, self.decode_a), self.listing_a)


if __name__ == "__main__":
    unittest.main()
