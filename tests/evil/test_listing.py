"""
Tests for the location listing scan.

Acceptance Criteria:
- A line ending with "weak" marks the listing as vulnerable
- No such line (or no lines at all) means not vulnerable
- Open or read failures degrade to None instead of raising
"""

import logging

import pytest
from unittest.mock import MagicMock, create_autospec

from evil.listing import (
    FileListingStore,
    ListingStore,
    has_weak_line,
    scan_listing,
)

WEAK_LISTING = "Madrid,strong\nLas Vegas,weak\nNew York,strong\n"
STRONG_LISTING = "Madrid,strong\nOregon,strong\nNew York,strong\n"


class TestHasWeakLine:
    """Line classification."""

    def test_detects_weak_line(self):
        assert has_weak_line(WEAK_LISTING) is True

    def test_all_strong_lines(self):
        assert has_weak_line(STRONG_LISTING) is False

    def test_empty_content_is_not_vulnerable(self):
        assert has_weak_line("") is False

    def test_marker_must_end_the_line(self):
        assert has_weak_line("weak,Madrid\nweakness,Oslo") is False

    def test_windows_line_endings(self):
        assert has_weak_line("Madrid,strong\r\nLas Vegas,weak\r\n") is True


class TestScanListing:
    """Scanning through an injected ListingStore."""

    def _store(self, content=None, open_error=None, read_error=None) -> MagicMock:
        store = create_autospec(ListingStore, instance=True)
        if open_error is not None:
            store.open.side_effect = open_error
        if read_error is not None:
            store.read_all.side_effect = read_error
        else:
            store.read_all.return_value = content
        return store

    def test_weak_listing_returns_true(self):
        assert scan_listing(self._store(WEAK_LISTING), "listings.csv") is True

    def test_strong_listing_returns_false(self):
        assert scan_listing(self._store(STRONG_LISTING), "listings.csv") is False

    @pytest.mark.parametrize(
        "error", [FileNotFoundError("missing"), PermissionError("denied")]
    )
    def test_open_failure_returns_none(self, error):
        store = self._store(open_error=error)
        assert scan_listing(store, "listings.csv") is None
        store.read_all.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [OSError("io"), UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")],
    )
    def test_read_failure_returns_none(self, error):
        assert scan_listing(self._store(read_error=error), "listings.csv") is None

    def test_handle_is_closed_after_reading(self):
        store = self._store(STRONG_LISTING)
        handle = store.open.return_value
        scan_listing(store, "listings.csv")
        store.read_all.assert_called_once_with(handle)
        handle.close.assert_called_once_with()

    def test_handle_is_closed_after_read_failure(self):
        store = self._store(read_error=OSError("io"))
        scan_listing(store, "listings.csv")
        store.open.return_value.close.assert_called_once_with()

    def test_close_failure_returns_none(self, caplog):
        store = self._store("Madrid,weak")
        store.open.return_value.close.side_effect = OSError("close failed")
        with caplog.at_level(logging.WARNING, logger="evil.listing"):
            assert scan_listing(store, "listings.csv") is None
        assert "could not be closed" in caplog.text

    def test_close_failure_after_read_failure_returns_none(self):
        store = self._store(read_error=OSError("io"))
        store.open.return_value.close.side_effect = OSError("close failed")
        assert scan_listing(store, "listings.csv") is None

    def test_open_failure_is_logged_as_warning(self, caplog):
        store = self._store(open_error=FileNotFoundError("missing"))
        with caplog.at_level(logging.WARNING, logger="evil.listing"):
            scan_listing(store, "listings.csv")
        assert "could not be opened" in caplog.text


class TestFileListingStore:
    """Filesystem-backed store."""

    def test_scans_real_file(self, tmp_path):
        (tmp_path / "listings.csv").write_text(WEAK_LISTING, encoding="utf-8")
        store = FileListingStore(base_dir=tmp_path)
        assert scan_listing(store, "listings.csv") is True

    def test_missing_file_returns_none(self, tmp_path):
        store = FileListingStore(base_dir=tmp_path)
        assert scan_listing(store, "tmp/listings.csv") is None

    def test_undecodable_file_returns_none(self, tmp_path):
        (tmp_path / "listings.csv").write_bytes(b"Madrid,\xff\xfeweak\n")
        store = FileListingStore(base_dir=tmp_path)
        assert scan_listing(store, "listings.csv") is None

    def test_directory_instead_of_file_returns_none(self, tmp_path):
        (tmp_path / "listings.csv").mkdir()
        store = FileListingStore(base_dir=tmp_path)
        assert scan_listing(store, "listings.csv") is None

    def test_relative_path_without_base_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "tmp").mkdir()
        (tmp_path / "tmp" / "listings.csv").write_text(STRONG_LISTING, encoding="utf-8")
        assert scan_listing(FileListingStore(), "tmp/listings.csv") is False
