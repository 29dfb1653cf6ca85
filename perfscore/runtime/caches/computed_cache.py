"""Per-context single-flight cache for computed metrics.

Each key maps to one ``asyncio.Task``. The first requester creates the task;
every later requester for the same key awaits the same task, so an expensive
trace analysis runs at most once per key for the lifetime of the cache.

Notes
-----
- Owned by an :class:`~perfscore.runtime.context.EvaluationContext`; never
  shared across contexts.
- Failed computations stay cached: a second request re-raises the same error.
- Waiters go through ``asyncio.shield`` so cancelling one waiter leaves the
  shared task running. Cancelling the cache cancels the tasks themselves.
"""

from __future__ import annotations

import asyncio
import logging
from threading import Lock
from typing import Any, Awaitable, Callable, Dict, Hashable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ComputedCache:
    def __init__(self) -> None:
        self._lock = Lock()
        # key -> (task, inputs kept alive for id()-based keys)
        self._store: Dict[Hashable, Tuple[asyncio.Task, Any]] = {}
        self._cancelled = False

    async def get_or_compute(
        self,
        key: Hashable,
        compute: Callable[[], Awaitable[Any]],
        *,
        keep_alive: Optional[Any] = None,
    ) -> Any:
        """Return the result for ``key``, starting ``compute()`` only on first request."""
        with self._lock:
            if self._cancelled:
                raise asyncio.CancelledError("evaluation context was cancelled")
            entry = self._store.get(key)
            if entry is None:
                task = asyncio.ensure_future(compute())
                self._store[key] = (task, keep_alive)
                hit = False
            else:
                task = entry[0]
                hit = True

        logger.debug("computed cache %s for %r", "hit" if hit else "miss", key)
        return await asyncio.shield(task)

    def cancel(self) -> int:
        """Cancel in-flight computations and refuse new ones.

        Returns the number of tasks that were still running.
        """
        with self._lock:
            self._cancelled = True
            pending: List[asyncio.Task] = [t for t, _ in self._store.values() if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.warning("cancelled %d in-flight metric computation(s)", len(pending))
        return len(pending)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
