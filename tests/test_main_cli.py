import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from app.photogallery.main import main


class TestMainCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.manifest = Path(self._tmp.name) / "photos.json"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def write(self, photos) -> None:
        self.manifest.write_text(json.dumps(photos), encoding="utf-8")

    def test_column_layout_as_json(self):
        self.write([{"src": f"{i}.jpg", "width": 200, "height": h} for i, h in enumerate([300, 100, 250, 150])])
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([str(self.manifest), "--width", "400", "--direction", "column",
                         "--columns", "2", "--margin", "0"])
        self.assertEqual(code, 0)
        result = json.loads(out.getvalue())
        self.assertAlmostEqual(result["height"], 450)
        self.assertEqual([t["key"] for t in result["thumbs"]], ["0.jpg", "1.jpg", "2.jpg", "3.jpg"])
        self.assertEqual(result["thumbs"][0]["photo"]["src"], "0.jpg")

    def test_row_layout_defaults(self):
        self.write([{"src": "a.jpg", "width": 3, "height": 2}] * 3)
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([str(self.manifest), "--width", "900", "--margin", "0", "--search-window", "3"])
        self.assertEqual(code, 0)
        result = json.loads(out.getvalue())
        self.assertEqual([t["height"] for t in result["thumbs"]], [200.0, 200.0, 200.0])

    def test_invalid_photo_exits_with_2(self):
        self.write([{"src": "a.jpg", "width": 3, "height": 0}])
        out = io.StringIO()
        with redirect_stdout(out), self.assertLogs("app.photogallery.main", level="ERROR") as logs:
            code = main([str(self.manifest), "--width", "900"])
        self.assertEqual(code, 2)
        self.assertEqual(out.getvalue(), "")
        self.assertIn("photo[0]", logs.output[0])


if __name__ == "__main__":
    unittest.main()
