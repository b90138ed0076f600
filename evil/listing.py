"""
Location Listings

Reads a line-oriented listing of locations and looks for weak ones. A line
counts as weak when its text ends with the literal ``weak``, e.g.::

    Madrid,strong
    Las Vegas,weak

Failing to open or read the listing is not an error: the answer is simply
unknown (None).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

WEAK_MARKER = "weak"


@runtime_checkable
class ListingStore(Protocol):
    """Storage access used by the scan. Both calls may raise OSError."""

    def open(self, path: str) -> Any: ...

    def read_all(self, handle: Any) -> str: ...


class FileListingStore:
    """Reads listings from the local filesystem."""

    def __init__(self, base_dir: Optional[str | Path] = None, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.encoding = encoding

    def _resolve(self, path: str) -> Path:
        if self.base_dir is not None:
            return self.base_dir / path
        return Path(path)

    def open(self, path: str) -> Any:
        return self._resolve(path).open("r", encoding=self.encoding)

    def read_all(self, handle: Any) -> str:
        return handle.read()


def has_weak_line(content: str) -> bool:
    """True on the first line ending with the weak marker."""
    for line in content.splitlines():
        if line.endswith(WEAK_MARKER):
            return True
    return False


def scan_listing(store: ListingStore, path: str) -> Optional[bool]:
    """
    Scan the listing at ``path`` for weak locations.

    Returns:
        True if a weak line exists, False if none does (including empty
        content), None if the listing could not be opened or read.
    """
    try:
        handle = store.open(path)
    except OSError as e:
        logger.warning(f"Listing {path} could not be opened: {e}")
        return None

    try:
        content = store.read_all(handle)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Listing {path} could not be read: {e}")
        content = None

    close = getattr(handle, "close", None)
    if callable(close):
        try:
            close()
        except OSError as e:
            logger.warning(f"Listing {path} could not be closed: {e}")
            return None

    if content is None:
        return None
    return has_weak_line(content)
