import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication, QSize
from PySide6.QtGui import QResizeEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QWidget

from app.photogallery.reactive import WidthCell
from native.photogallery_app.qt_width import QtScheduler, ResizeWidthSource


class TestQtWidthSource(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self) -> None:
        self.widget = QWidget()
        self.seen = []
        self.cell = WidthCell(self.seen.append, QtScheduler())
        self.source = ResizeWidthSource(self.widget, self.cell)

    def tearDown(self) -> None:
        self.widget.deleteLater()

    def resize(self, width: int) -> None:
        QCoreApplication.sendEvent(self.widget, QResizeEvent(QSize(width, 300), QSize(0, 0)))

    def test_resize_burst_settles_once(self):
        for width in (640, 700, 820):
            self.resize(width)
        self.assertTrue(self.cell.pending)
        QTest.qWait(50)
        self.assertEqual(self.seen, [820])

    def test_detach_cancels_pending(self):
        self.resize(640)
        self.source.detach()
        QTest.qWait(50)
        self.assertEqual(self.seen, [])
        self.resize(900)
        QTest.qWait(50)
        self.assertEqual(self.seen, [])


if __name__ == "__main__":
    unittest.main()
