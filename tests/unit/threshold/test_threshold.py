"""Tests for threshold and root resolution before traversal."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fs_helpers import local_epoch, touch_at

from lsnewer.errors import DirectoryNotFound, ReferenceFileNotFound, ReferenceFileUnreadable
from lsnewer.threshold import resolve_root, resolve_threshold
from lsnewer.timestamp import EPOCH, Timestamp


class ResolveThresholdTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self._previous_cwd = Path.cwd()
        os.chdir(self.root)

    def tearDown(self) -> None:
        os.chdir(self._previous_cwd)
        self._tmp.cleanup()

    def test_missing_value_defaults_to_epoch(self) -> None:
        self.assertEqual(resolve_threshold(None), EPOCH)

    def test_valid_literal_is_used_directly(self) -> None:
        self.assertEqual(resolve_threshold("2099-01-01 00:00:00"), Timestamp(2099, 1, 1, 0, 0, 0))

    def test_valid_literal_wins_over_file_with_same_name(self) -> None:
        touch_at(self.root / "2099-01-01 00:00:00", local_epoch(2001, 2, 3, 4, 5, 6))
        self.assertEqual(resolve_threshold("2099-01-01 00:00:00"), Timestamp(2099, 1, 1, 0, 0, 0))

    def test_non_timestamp_non_file_raises_reference_file_not_found(self) -> None:
        with self.assertRaises(ReferenceFileNotFound) as caught:
            resolve_threshold("not-a-date-not-a-file")
        self.assertIsInstance(caught.exception, FileNotFoundError)
        self.assertIn("No such file", str(caught.exception))
        self.assertEqual(caught.exception.path, "not-a-date-not-a-file")

    def test_empty_value_raises_reference_file_not_found(self) -> None:
        with self.assertRaises(ReferenceFileNotFound) as caught:
            resolve_threshold("")
        self.assertEqual(caught.exception.path, "")

    def test_unreadable_reference_file_is_not_reported_as_missing(self) -> None:
        touch_at(self.root / "marker", local_epoch(2021, 7, 4, 18, 30, 15))
        denied = PermissionError(13, "Permission denied")
        with mock.patch("lsnewer.threshold.Path.stat", side_effect=denied):
            with self.assertRaises(ReferenceFileUnreadable) as caught:
                resolve_threshold("marker")
        self.assertNotIsInstance(caught.exception, FileNotFoundError)
        self.assertIn("Permission denied", str(caught.exception))
        self.assertEqual(caught.exception.path, "marker")

    def test_reference_path_through_a_file_is_missing(self) -> None:
        touch_at(self.root / "plain", local_epoch(2021, 7, 4))
        with self.assertRaises(ReferenceFileNotFound):
            resolve_threshold("plain/child")

    def test_reference_file_modification_time_becomes_threshold(self) -> None:
        touch_at(self.root / "marker", local_epoch(2021, 7, 4, 18, 30, 15))
        self.assertEqual(resolve_threshold("marker"), Timestamp(2021, 7, 4, 18, 30, 15))

    def test_reference_file_can_be_absolute(self) -> None:
        marker = touch_at(self.root / "abs-marker", local_epoch(2019, 1, 2, 3, 4, 5))
        self.assertEqual(resolve_threshold(str(marker)), Timestamp(2019, 1, 2, 3, 4, 5))

    def test_reference_directory_is_accepted(self) -> None:
        ref_dir = self.root / "ref"
        ref_dir.mkdir()
        mtime = local_epoch(2018, 8, 8, 8, 8, 8)
        os.utime(ref_dir, (mtime, mtime))
        self.assertEqual(resolve_threshold("ref"), Timestamp(2018, 8, 8, 8, 8, 8))

    def test_fallback_logs_validation_reason(self) -> None:
        touch_at(self.root / "marker", local_epoch(2021, 7, 4, 18, 30, 15))
        with self.assertLogs("lsnewer.threshold", level="DEBUG") as logs:
            resolve_threshold("marker")
        self.assertTrue(any("expected 19 characters" in line for line in logs.output))


class ResolveRootTests(unittest.TestCase):
    def test_existing_directory_resolves_to_absolute_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            self.assertEqual(resolve_root(tmp), root)
            self.assertTrue(resolve_root(tmp).is_absolute())

    def test_missing_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(DirectoryNotFound) as caught:
                resolve_root(missing)
            self.assertIn("Directory not found", str(caught.exception))

    def test_regular_file_is_not_a_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(DirectoryNotFound):
                resolve_root(target)


if __name__ == "__main__":
    unittest.main()
