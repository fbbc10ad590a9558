"""Concurrency utilities for CSS Import Resolver."""

import asyncio
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set
from concurrent.futures import ThreadPoolExecutor
from threading import Lock, RLock

class ThreadSafeDict(dict):
    """Dictionary whose reads and writes are serialized by a lock."""

    def __init__(self):
        super().__init__()
        self._lock = RLock()

    def __getitem__(self, key: str) -> Any:
        with self._lock:
            return super().__getitem__(key)

    def __setitem__(self, key: str, value: Any) -> None:
        with self._lock:
            super().__setitem__(key, value)

    def increment(self, key: str, amount: int = 1) -> None:
        """Add ``amount`` to a counter as one atomic step.

        Args:
            key: Counter name
            amount: Value to add
        """
        with self._lock:
            super().__setitem__(key, super().get(key, 0) + amount)

    def update(self, other: Dict[str, Any]) -> None:
        with self._lock:
            super().update(other)

    def snapshot(self) -> Dict[str, Any]:
        """Return a plain copy of the dictionary."""
        with self._lock:
            return dict(super().items())

class ThreadSafeSet:
    """Append-only set with an atomic insert-if-absent."""

    def __init__(self, items: Optional[Iterable[Any]] = None):
        """Initialize thread-safe set.

        Args:
            items: Optional initial members
        """
        self._set: Set[Any] = set()
        self._order: List[Any] = []
        self._lock = RLock()
        for item in items or ():
            self.add_if_absent(item)

    def add_if_absent(self, item: Any) -> bool:
        """Add item unless it is already a member.

        Args:
            item: Item to add

        Returns:
            True if the item was inserted, False if it was already present
        """
        with self._lock:
            if item in self._set:
                return False
            self._set.add(item)
            self._order.append(item)
            return True

    def __contains__(self, item: Any) -> bool:
        with self._lock:
            return item in self._set

    def __len__(self) -> int:
        with self._lock:
            return len(self._set)

    def __iter__(self) -> Iterator[Any]:
        # Insertion order, over a copy so callers never see concurrent growth
        with self._lock:
            return iter(list(self._order))

class ThreadPool:
    """Thread pool for blocking work driven from the event loop."""

    def __init__(self, max_workers: Optional[int] = None):
        """Initialize thread pool.

        Args:
            max_workers: Maximum number of worker threads
        """
        self.executor = ThreadPoolExecutor(max_workers=max_workers,
                                           thread_name_prefix='css-import')
        self._lock = Lock()
        self._shutdown = False

    async def run(self, fn: Callable, *args: Any) -> Any:
        """Run a blocking callable on the pool and await its result.

        Args:
            fn: Function to execute
            *args: Positional arguments

        Returns:
            Return value of ``fn``
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, fn, *args)

    def shutdown(self, wait: bool = True) -> None:
        """Shutdown thread pool.

        Args:
            wait: Whether to wait for tasks to complete
        """
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self) -> 'ThreadPool':
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.shutdown()

# Exported classes
__all__ = ['ThreadSafeDict', 'ThreadSafeSet', 'ThreadPool']
