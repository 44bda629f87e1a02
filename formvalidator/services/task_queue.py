"""Task queue — defers callbacks to a later turn of the owning thread.

Inside a running asyncio loop, callbacks go through `loop.call_soon`: they run
after the current synchronous step and before anything queued later. Without a
loop they wait in a FIFO until the owning thread calls `run_pending()`, the way
a UI event loop drains its queue between events.
"""

import asyncio
from collections import deque
from typing import Any, Callable, Optional

import structlog

logger = structlog.get_logger()


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class TaskQueue:
    """FIFO of deferred callbacks, confined to one thread."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._pending: deque[tuple[Callable[..., Any], tuple]] = deque()

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        """Schedule `callback(*args)`; never runs it inline.

        Callbacks still waiting in the FIFO from before a loop was running are
        handed to the loop first, so queue order is kept.
        """
        loop = self._loop or _running_loop()
        if loop is not None:
            while self._pending:
                waiting, waiting_args = self._pending.popleft()
                loop.call_soon(waiting, *waiting_args)
            loop.call_soon(callback, *args)
            return
        self._pending.append((callback, args))

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_pending(self) -> int:
        """Run queued callbacks in order, including ones queued while draining.

        Returns:
            Number of callbacks run.
        """
        ran = 0
        while self._pending:
            callback, args = self._pending.popleft()
            callback(*args)
            ran += 1
        if ran:
            logger.debug("task_queue_drained", callbacks=ran)
        return ran
