"""Qt width source for the gallery.

Resize events from a widget are pushed into a ``WidthCell``; the cell's
pending recomputation runs on a single-shot ``QTimer`` so it lands on the
next event-loop turn, after Qt has finished the current resize burst.
"""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, QObject, QTimer

from app.photogallery.reactive import WidthCell


class QtScheduler:
    def __init__(self, delay_ms: int = 0, parent: Optional[QObject] = None) -> None:
        self.delay_ms = delay_ms
        self._parent = parent

    def call_soon(self, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)

        def fire() -> None:
            timer.deleteLater()
            callback()

        timer.timeout.connect(fire)
        timer.start(self.delay_ms)
        return timer

    def cancel(self, handle: QTimer) -> None:
        handle.stop()
        handle.deleteLater()


class ResizeWidthSource(QObject):
    """Event filter forwarding a widget's width to a ``WidthCell``."""

    def __init__(self, widget: QObject, cell: WidthCell) -> None:
        super().__init__(widget)
        self._widget = widget
        self._cell = cell
        widget.installEventFilter(self)

    def eventFilter(self, obj, event) -> bool:  # type: ignore[override]
        if event.type() == QEvent.Type.Resize:
            self._cell.push(event.size().width())
        return False

    def detach(self) -> None:
        self._widget.removeEventFilter(self)
        self._cell.close()
