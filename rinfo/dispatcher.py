"""Bounded worker pool for gateway event handling.

Event hooks only enqueue; a fixed set of workers runs the handlers so a slow
or failing handler never blocks event receipt, and in-flight work is capped.
"""

import asyncio
import sys
from typing import Awaitable, Callable, List, Optional, Tuple

Job = Callable[[], Awaitable[None]]


def _log(msg: str):
    print(msg, file=sys.stderr)


class EventDispatcher:
    """Fixed-size worker pool fed by a bounded queue."""

    def __init__(self, workers: int = 4, queue_size: int = 100):
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self._worker_count = workers
        self._queue_size = queue_size
        self._queue: Optional[asyncio.Queue] = None
        self._workers: List[asyncio.Task] = []
        self.dropped = 0
        self.failed = 0

    @property
    def running(self) -> bool:
        return bool(self._workers)

    def pending(self) -> int:
        return self._queue.qsize() if self._queue else 0

    async def start(self) -> None:
        if self.running:
            return
        # Queue is created here so it binds to the running loop
        self._queue = asyncio.Queue(maxsize=self._queue_size)
        self._workers = [
            asyncio.create_task(self._worker(i), name=f"rinfo-worker-{i}")
            for i in range(self._worker_count)
        ]
        _log(f"[rinfo] dispatcher started: {self._worker_count} worker(s), queue={self._queue_size}")

    async def stop(self) -> None:
        if not self.running:
            return
        for task in self._workers:
            task.cancel()
        await asyncio.gather(*self._workers, return_exceptions=True)
        self._workers = []
        discarded = self.pending()
        self._queue = None
        _log(f"[rinfo] dispatcher stopped ({discarded} queued job(s) discarded)")

    def submit(self, name: str, job: Job) -> bool:
        """Enqueue a job without waiting. Returns False when it was dropped."""
        if self._queue is None:
            _log(f"[rinfo] dispatcher not running, dropping {name}")
            self.dropped += 1
            return False
        try:
            self._queue.put_nowait((name, job))
        except asyncio.QueueFull:
            _log(f"[rinfo] queue full ({self._queue_size}), dropping {name}")
            self.dropped += 1
            return False
        return True

    async def join(self) -> None:
        """Wait until every queued job has been processed."""
        if self._queue is not None:
            await self._queue.join()

    async def _worker(self, index: int):
        queue = self._queue
        while True:
            item: Tuple[str, Job] = await queue.get()
            name, job = item
            try:
                await job()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                self.failed += 1
                _log(f"[rinfo] worker {index}: {name} failed: {e!r}")
            finally:
                queue.task_done()
