"""Background asyncio loop that synchronous Flask views submit coroutines to."""

import asyncio
import logging
import threading

logger = logging.getLogger(__name__)


class EventLoopThread:
    """Runs one event loop in a daemon thread.

    Every store coroutine runs on this loop, so the stores' asyncio locks are
    only ever touched from a single loop regardless of how many request
    threads the WSGI server uses.
    """

    def __init__(self, name: str = "support-logging-loop") -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._started = False

    def _run(self):
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def start(self):
        if not self._started:
            self._thread.start()
            self._started = True
            logger.debug("Event loop thread started")

    def run(self, coro, timeout=None):
        """Run coro on the background loop and block until it finishes."""
        if not self._started:
            coro.close()
            raise RuntimeError("event loop thread is not running")
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        return future.result(timeout)

    def stop(self):
        """Stop the loop and join the thread."""
        if not self._started:
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        self._loop.close()
        self._started = False
        logger.debug("Event loop thread stopped")
