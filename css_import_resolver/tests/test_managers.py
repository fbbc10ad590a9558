"""Tests for CSS Import Resolver managers."""

import threading
import time
import pytest
import requests
from unittest.mock import MagicMock

from ..managers import BaseManager, ImportRegistry, NetworkManager
from ..utils.concurrency import ThreadSafeSet
from ..utils.error import CSSImportResolverError, FetchError

class ConcreteBaseManager(BaseManager):
    def check_resources(self):
        return True
    def get_stats(self):
        return {}

class TestBaseManager:
    """Tests for BaseManager."""

    def test_logging(self):
        manager = ConcreteBaseManager()
        manager.log_info("Test info")
        manager.log_warning("Test warning")
        manager.log_error("Test error")
        manager.log_error("Test error", ValueError("boom"))
        manager.log_debug("Test debug")

    def test_error_handling(self):
        manager = ConcreteBaseManager()
        with pytest.raises(CSSImportResolverError):
            manager.handle_error(Exception("Test error"), "Test message")

    def test_error_handling_custom_class(self):
        manager = ConcreteBaseManager()
        cause = OSError("missing")
        with pytest.raises(FetchError) as exc_info:
            manager.handle_error(cause, "Failed", FetchError)
        assert exc_info.value.__cause__ is cause

    def test_context_manager(self):
        with ConcreteBaseManager() as manager:
            assert isinstance(manager, BaseManager)

class TestThreadSafeSet:
    """Tests for ThreadSafeSet."""

    def test_add_if_absent(self):
        items = ThreadSafeSet()
        assert items.add_if_absent('a')
        assert not items.add_if_absent('a')
        assert 'a' in items
        assert len(items) == 1

    def test_initial_items_deduplicated_in_order(self):
        items = ThreadSafeSet(['b', 'a', 'b'])
        assert list(items) == ['b', 'a']

    def test_concurrent_inserts_happen_once(self):
        items = ThreadSafeSet()
        inserted = []
        lock = threading.Lock()

        def worker():
            for i in range(50):
                if items.add_if_absent(f"{i}.css"):
                    with lock:
                        inserted.append(i)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(items) == 50
        assert sorted(inserted) == list(range(50))

class TestImportRegistry:
    """Tests for ImportRegistry."""

    def test_register_once(self):
        registry = ImportRegistry(max_import_urls=5)
        assert registry.register('a.css')
        assert not registry.register('a.css')
        assert registry.register('b.css')
        assert len(registry) == 2
        assert 'a.css' in registry
        assert registry.hrefs == ['a.css', 'b.css']

    def test_never_shrinks(self):
        registry = ImportRegistry()
        for href in ['a.css', 'b.css', 'a.css', 'c.css']:
            size = len(registry)
            registry.register(href)
            assert len(registry) >= size

    def test_exhaustion(self):
        registry = ImportRegistry(max_import_urls=2)
        registry.register('a.css')
        registry.register('b.css')
        assert not registry.is_exhausted()
        assert registry.check_resources()
        registry.register('c.css')
        assert registry.is_exhausted()
        assert not registry.check_resources()

    def test_stats(self):
        registry = ImportRegistry(max_import_urls=3, hrefs=['seen.css'])
        registry.register('seen.css')
        registry.register('new.css')
        stats = registry.get_stats()
        assert stats['imported_count'] == 2
        assert stats['skipped_count'] == 1
        assert stats['max_import_urls'] == 3
        assert stats['exhausted'] is False

    def test_skipped_count_under_threads(self):
        registry = ImportRegistry()
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            for _ in range(200):
                registry.register('same.css')

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stats = registry.get_stats()
        assert stats['imported_count'] == 1
        assert stats['skipped_count'] == 8 * 200 - 1

    def test_negative_ceiling(self):
        with pytest.raises(ValueError):
            ImportRegistry(max_import_urls=-1)

class TestNetworkManager:
    """Tests for NetworkManager."""

    @pytest.fixture
    def network_manager(self):
        manager = NetworkManager(base_url='https://example.com/css/main.css')
        yield manager
        manager.cleanup()

    def _response(self, text='a { color: red }', status=200):
        response = MagicMock()
        response.text = text
        response.content = text.encode('utf-8')
        response.raise_for_status.side_effect = (
            requests.exceptions.HTTPError(f"{status} Error") if status >= 400 else None
        )
        return response

    def test_fetch_resolves_relative_href(self, network_manager):
        network_manager.session.get = MagicMock(return_value=self._response())
        assert network_manager.fetch('theme.css', timeout=3) == 'a { color: red }'
        network_manager.session.get.assert_called_once_with(
            'https://example.com/css/theme.css', timeout=3
        )

    def test_fetch_protocol_relative(self, network_manager):
        network_manager.session.get = MagicMock(return_value=self._response())
        network_manager.fetch('//cdn.example.com/x.css')
        url = network_manager.session.get.call_args[0][0]
        assert url == 'https://cdn.example.com/x.css'

    def test_fetch_uses_default_timeout(self, network_manager):
        network_manager.session.get = MagicMock(return_value=self._response())
        network_manager.fetch('theme.css')
        assert network_manager.session.get.call_args[1]['timeout'] == network_manager.request_timeout

    def test_http_error_raises_fetch_error(self, network_manager):
        network_manager.session.get = MagicMock(return_value=self._response(status=404))
        with pytest.raises(FetchError):
            network_manager.fetch('missing.css')
        assert network_manager.get_stats()['error_count'] == 1

    def test_timeout_raises_fetch_error(self, network_manager):
        network_manager.session.get = MagicMock(side_effect=requests.exceptions.Timeout("slow"))
        with pytest.raises(FetchError):
            network_manager.fetch('slow.css')
        stats = network_manager.get_stats()
        assert stats['timeout_errors'] == 1
        assert stats['error_count'] == 1

    def test_connection_error_is_not_retried(self, network_manager):
        network_manager.session.get = MagicMock(
            side_effect=requests.exceptions.ConnectionError("refused")
        )
        with pytest.raises(FetchError):
            network_manager.fetch('down.css')
        assert network_manager.session.get.call_count == 1

    def test_fetch_local_file(self, tmp_path):
        (tmp_path / 'main.css').write_text('@import "parts/a.css";')
        (tmp_path / 'parts').mkdir()
        (tmp_path / 'parts' / 'a.css').write_text('.a { color: blue }')
        with NetworkManager(base_url=str(tmp_path / 'main.css')) as manager:
            assert manager.fetch('parts/a.css') == b'.a { color: blue }'
            assert manager.get_stats()['total_bytes'] == len('.a { color: blue }')

    def test_missing_local_file(self, tmp_path):
        with NetworkManager(base_url=str(tmp_path)) as manager:
            with pytest.raises(FetchError):
                manager.fetch('nope.css')

    def test_request_limit(self, network_manager):
        network_manager.max_requests = 1
        network_manager.session.get = MagicMock(return_value=self._response())
        network_manager.fetch('a.css')
        assert not network_manager.check_resources()
        with pytest.raises(FetchError):
            network_manager.fetch('b.css')

    def test_reset_stats(self, network_manager):
        network_manager.session.get = MagicMock(return_value=self._response())
        network_manager.fetch('a.css')
        network_manager.reset_stats()
        assert network_manager.get_stats()['request_count'] == 0

    @pytest.mark.asyncio
    async def test_fetch_async(self, network_manager):
        network_manager.session.get = MagicMock(return_value=self._response('b {}'))
        assert await network_manager.fetch_async('b.css', timeout=2) == 'b {}'

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            NetworkManager(request_timeout=0)
        with pytest.raises(ValueError):
            NetworkManager(pool_size=0)

    def test_cleanup_without_waiting(self):
        manager = NetworkManager()
        release = threading.Event()
        manager.thread_pool.executor.submit(release.wait, 2)
        try:
            started = time.monotonic()
            manager.cleanup(wait=False)
            assert time.monotonic() - started < 1
            assert manager.thread_pool._shutdown
        finally:
            release.set()
