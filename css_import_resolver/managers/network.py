"""Network management for CSS Import Resolver."""

import time
import requests
from typing import Dict, Any, Optional, Union
from requests.adapters import HTTPAdapter
from .base import BaseManager
from ..utils.concurrency import ThreadSafeDict, ThreadPool
from ..utils.config import POOL_SIZE, REQUEST_TIMEOUT, USER_AGENT
from ..utils.error import FetchError
from ..utils.url import is_valid_url, resolve_href, to_local_path

class NetworkManager(BaseManager):
    """Fetch imported stylesheets over HTTP or from local files.

    Blocking requests run on a worker pool so that many imports can be in
    flight while the resolver's event loop stays responsive. Failed fetches
    are never retried.
    """

    def __init__(self, base_url: Optional[str] = None,
                 request_timeout: float = REQUEST_TIMEOUT,
                 max_requests: Optional[int] = None,
                 pool_size: int = POOL_SIZE,
                 proxy: Optional[str] = None,
                 verify_ssl: bool = True):
        """Initialize network manager.

        Args:
            base_url: URL or local path relative hrefs are resolved against
            request_timeout: Default request timeout in seconds
            max_requests: Maximum number of fetches, None for no limit
            pool_size: Connection pool size and worker thread count
            proxy: Optional proxy URL
            verify_ssl: Whether to verify SSL certificates

        Raises:
            ValueError: If any parameter is invalid
        """
        super().__init__()
        if request_timeout <= 0:
            raise ValueError("Request timeout must be positive")
        if pool_size <= 0:
            raise ValueError("Pool size must be positive")

        self.base_url = base_url
        self.request_timeout = request_timeout
        self.max_requests = max_requests
        self.verify_ssl = verify_ssl

        self.session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=pool_size,
            pool_maxsize=pool_size,
            max_retries=0
        )
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)
        self.session.headers['User-Agent'] = USER_AGENT
        if proxy:
            self.session.proxies = {
                'http': proxy,
                'https': proxy
            }
        self.session.verify = verify_ssl

        self.thread_pool = ThreadPool(max_workers=pool_size)

        self.stats = ThreadSafeDict()
        self.reset_stats()

    def check_resources(self) -> bool:
        """Check if another fetch is allowed.

        Returns:
            True if within limits, False otherwise
        """
        if self.max_requests is None:
            return True
        return self.stats['request_count'] < self.max_requests

    def fetch(self, url: str, timeout: Optional[float] = None) -> Union[str, bytes]:
        """Fetch a stylesheet, blocking until done.

        Args:
            url: Href of the import, resolved against ``base_url``
            timeout: Timeout in seconds, defaults to ``request_timeout``

        Returns:
            Response text for HTTP, raw bytes for local files

        Raises:
            FetchError: On network errors, error statuses, timeouts or
                unreadable files
        """
        if not self.check_resources():
            raise FetchError(f"Request limit of {self.max_requests} reached, not fetching {url}")

        location = resolve_href(url, self.base_url)
        self.stats.increment('request_count')
        if is_valid_url(location):
            return self._fetch_url(location, timeout or self.request_timeout)
        return self._read_file(to_local_path(location))

    async def fetch_async(self, url: str, timeout: Optional[float] = None) -> Union[str, bytes]:
        """Fetch a stylesheet on the worker pool.

        Args:
            url: Href of the import
            timeout: Timeout in seconds

        Returns:
            Stylesheet payload

        Raises:
            FetchError: If the fetch fails
        """
        return await self.thread_pool.run(self.fetch, url, timeout)

    def _fetch_url(self, url: str, timeout: float) -> str:
        self.log_info(f"Fetching import: {url}")
        try:
            response = self.session.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            self.stats.increment('timeout_errors')
            self._fetch_failed(url, e)
        except requests.exceptions.RequestException as e:
            self._fetch_failed(url, e)

        self.stats.increment('total_bytes', len(response.content))
        return response.text

    def _read_file(self, path: str) -> bytes:
        self.log_info(f"Reading import: {path}")
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            self._fetch_failed(path, e)

        self.stats.increment('total_bytes', len(data))
        return data

    def _fetch_failed(self, location: str, error: Exception) -> None:
        self.stats.increment('error_count')
        self.handle_error(error, f"Failed to fetch {location}", FetchError)

    def get_stats(self) -> Dict[str, Any]:
        stats = self.stats.snapshot()
        stats['max_requests'] = self.max_requests
        stats['elapsed_time'] = time.time() - stats.pop('start_time')
        return stats

    def reset_stats(self) -> None:
        """Reset network statistics."""
        self.stats.update({
            'request_count': 0,
            'error_count': 0,
            'timeout_errors': 0,
            'total_bytes': 0,
            'start_time': time.time()
        })

    def cleanup(self, wait: bool = True) -> None:
        """Shut down the worker pool and close the HTTP session.

        Args:
            wait: Whether to wait for in-flight fetches to finish
        """
        try:
            self.thread_pool.shutdown(wait=wait)
            self.session.close()
        except Exception as e:
            self.log_error("Error cleaning up network", e)

    def __enter__(self) -> 'NetworkManager':
        return self

# Exported class
__all__ = ['NetworkManager']
