"""Container-width observation.

A width source (a Qt resize filter, a test, a CLI flag) pushes raw widths
into a ``WidthCell``. The cell coalesces bursts: at most one recomputation is
pending at any time, and it runs with the latest width once the scheduler
fires. ``close()`` cancels whatever is still pending.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    def call_soon(self, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class TimerScheduler:
    """Run callbacks on a ``threading.Timer`` after a short delay."""

    def __init__(self, delay_s: float = 0.016) -> None:
        self.delay_s = delay_s

    def call_soon(self, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(self.delay_s, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class WidthCell:
    def __init__(self, on_width: Callable[[int], None], scheduler: Scheduler) -> None:
        self._on_width = on_width
        self._scheduler = scheduler
        self._lock = threading.Lock()
        self._width = 0
        self._pending_width: Optional[int] = None
        self._handle: Any = None
        self._closed = False

    @property
    def width(self) -> int:
        """Last settled width; 0 until the first measurement lands."""
        return self._width

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, width: float) -> None:
        if not math.isfinite(width) or width < 0:
            raise ValueError(f"width must be a finite number >= 0, got {width!r}")
        new_width = int(math.floor(width))
        with self._lock:
            if self._closed:
                return
            if self._handle is None:
                if new_width == self._width:
                    return
                self._pending_width = new_width
                self._handle = self._scheduler.call_soon(self._fire)
            else:
                self._pending_width = new_width

    def _fire(self) -> None:
        with self._lock:
            if self._closed or self._handle is None:
                return
            self._handle = None
            new_width = self._pending_width
            self._pending_width = None
            if new_width is None or new_width == self._width:
                return
            self._width = new_width
        logger.debug("container width settled at %d", new_width)
        self._on_width(new_width)

    def close(self) -> None:
        with self._lock:
            self._closed = True
            handle, self._handle = self._handle, None
            self._pending_width = None
        if handle is not None:
            self._scheduler.cancel(handle)
