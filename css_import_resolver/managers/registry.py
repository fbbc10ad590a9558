"""Registry of stylesheet hrefs already fetched in a resolution session."""

from typing import Any, Dict, Iterator, List, Optional

from .base import BaseManager
from ..utils.concurrency import ThreadSafeDict, ThreadSafeSet
from ..utils.config import MAX_IMPORT_URLS

class ImportRegistry(BaseManager):
    """Session-wide set of dispatched import hrefs.

    One registry is shared by reference across a whole recursive
    resolution. It only grows, and an href is registered at the moment its
    fetch is dispatched.
    """

    def __init__(self, max_import_urls: int = MAX_IMPORT_URLS,
                 hrefs: Optional[List[str]] = None):
        """Initialize import registry.

        Args:
            max_import_urls: Ceiling on distinct imports for the session
            hrefs: Hrefs to treat as already fetched

        Raises:
            ValueError: If the ceiling is negative
        """
        super().__init__()
        if max_import_urls < 0:
            raise ValueError("Import ceiling cannot be negative")
        self.max_import_urls = max_import_urls
        self._hrefs = ThreadSafeSet(hrefs)
        self._counts = ThreadSafeDict()
        self._counts['skipped'] = 0

    def register(self, href: str) -> bool:
        """Register an href unless it was already dispatched.

        Args:
            href: Href about to be fetched

        Returns:
            True if the caller should fetch it, False if it is a duplicate
        """
        inserted = self._hrefs.add_if_absent(href)
        if inserted:
            self.log_debug(f"Registered import {href} ({len(self._hrefs)} total)")
        else:
            self._counts.increment('skipped')
            self.log_debug(f"Skipping already imported {href}")
        return inserted

    def is_exhausted(self) -> bool:
        """Whether the registry has grown past the import ceiling."""
        return len(self._hrefs) > self.max_import_urls

    def check_resources(self) -> bool:
        if self.is_exhausted():
            self.log_warning(
                f"Import ceiling exceeded: {len(self._hrefs)} > {self.max_import_urls}"
            )
            return False
        return True

    def get_stats(self) -> Dict[str, Any]:
        return {
            'imported_count': len(self._hrefs),
            'skipped_count': self._counts['skipped'],
            'max_import_urls': self.max_import_urls,
            'exhausted': self.is_exhausted(),
        }

    @property
    def hrefs(self) -> List[str]:
        """Registered hrefs in dispatch order."""
        return list(self._hrefs)

    def __contains__(self, href: str) -> bool:
        return href in self._hrefs

    def __len__(self) -> int:
        return len(self._hrefs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._hrefs)

# Exported class
__all__ = ['ImportRegistry']
