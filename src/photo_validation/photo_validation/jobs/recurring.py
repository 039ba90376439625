from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RecurringTask:
    """Runs `func` every `interval_seconds` on a daemon thread.

    The owner controls the lifecycle with start()/stop(); a failing tick is
    logged and the schedule continues.
    """

    def __init__(self, name: str, interval_seconds: float, func: Callable[[], object]):
        if interval_seconds < 1:
            raise ValueError(f"Interval must be >= 1 second: {interval_seconds}")
        self.name = name
        self.interval_seconds = float(interval_seconds)
        self._func = func
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.last_run: Optional[float] = None
        self.runs = 0
        self.failures = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            raise RuntimeError(f"Task '{self.name}' already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name=f"recurring-{self.name}", daemon=True)
        self._thread.start()
        logger.info("started task '%s' (every %.0fs)", self.name, self.interval_seconds)

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        if not self.running:
            return
        self._stop.set()
        self._thread.join(timeout)
        self._thread = None
        logger.info("stopped task '%s'", self.name)

    def run_once(self) -> bool:
        started = time.monotonic()
        try:
            self._func()
        except Exception:
            self.failures += 1
            logger.exception("task '%s' failed after %.2fs", self.name, time.monotonic() - started)
            return False
        finally:
            self.runs += 1
            self.last_run = time.monotonic()
        logger.debug("task '%s' completed in %.2fs", self.name, self.last_run - started)
        return True

    def _loop(self) -> None:
        while not self._stop.is_set():
            self.run_once()
            self._stop.wait(self.interval_seconds)
