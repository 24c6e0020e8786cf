import unittest

from app.photogallery.errors import ParameterError
from app.photogallery.gallery import ClickEvent, Gallery, RenderRequest, click_context, describe_photo
from app.photogallery.layout.models import Photo


class ManualScheduler:
    def __init__(self):
        self.queue = []

    def call_soon(self, callback):
        self.queue.append(callback)
        return callback

    def cancel(self, handle):
        self.queue.remove(handle)

    def run(self):
        queue, self.queue = self.queue, []
        for callback in queue:
            callback()


PHOTOS = [Photo("a.jpg", 150, 100, key="a"), Photo("b.jpg", 150, 100), Photo("c.jpg", 150, 100)]


class TestClickContext(unittest.TestCase):
    def test_neighbours(self):
        self.assertEqual(click_context(PHOTOS, 0), ClickEvent(0, PHOTOS[0], None, PHOTOS[1]))
        self.assertEqual(click_context(PHOTOS, 1), ClickEvent(1, PHOTOS[1], PHOTOS[0], PHOTOS[2]))
        self.assertEqual(click_context(PHOTOS, 2), ClickEvent(2, PHOTOS[2], PHOTOS[1], None))

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            click_context(PHOTOS, 3)


class TestGallery(unittest.TestCase):
    def setUp(self) -> None:
        self.scheduler = ManualScheduler()
        self.layouts = []
        self.gallery = Gallery(
            PHOTOS,
            margin=0,
            search_window=3,
            on_layout=self.layouts.append,
            scheduler=self.scheduler,
        )

    def test_nothing_before_first_measurement(self):
        self.assertEqual(self.gallery.container_width, 0)
        self.assertEqual(self.gallery.render(), [])

    def test_settled_width_lays_out_one_pixel_narrower(self):
        self.gallery.observe(901.6)
        self.gallery.observe(901.2)
        self.scheduler.run()
        self.assertEqual(len(self.layouts), 1)
        thumbs = self.layouts[0]
        self.assertEqual([t.height for t in thumbs], [200.0, 200.0, 200.0])
        self.assertEqual([t.width for t in thumbs], [300.0, 300.0, 300.0])
        self.assertEqual(self.gallery.height(thumbs), 200.0)

    def test_default_renderer(self):
        self.gallery.observe(901)
        self.scheduler.run()
        rendered = self.gallery.render()
        self.assertEqual([r["key"] for r in rendered], ["a", "b.jpg", "c.jpg"])
        self.assertEqual(rendered[0]["src"], "a.jpg")
        self.assertEqual(rendered[0]["style"], {"margin": 0, "display": "block"})

    def test_custom_renderer_and_clicks(self):
        clicks = []
        requests = []

        def render(request):
            requests.append(request)
            return request.index

        gallery = Gallery(
            PHOTOS,
            direction="column",
            columns=2,
            render_image=render,
            on_click=lambda event, info: clicks.append((event, info)),
            use_parent_container_width=True,
            parent_container_width=801,
        )
        self.assertEqual(gallery.render(), [0, 1, 2])
        self.assertTrue(all(isinstance(r, RenderRequest) for r in requests))
        self.assertEqual({r.direction for r in requests}, {"column"})
        self.assertEqual({r.margin for r in requests}, {2})

        requests[1].on_click("evt", 1)
        self.assertEqual(clicks, [("evt", ClickEvent(1, PHOTOS[1], PHOTOS[0], PHOTOS[2]))])

    def test_no_click_handler(self):
        gallery = Gallery(PHOTOS, use_parent_container_width=True, parent_container_width=600,
                          render_image=lambda r: r.on_click)
        self.assertEqual(gallery.render(), [None, None, None])
        gallery.observe(1000)
        self.assertEqual(gallery.container_width, 600)

    def test_column_style_is_absolute(self):
        gallery = Gallery(PHOTOS, direction="column", columns=1, use_parent_container_width=True,
                          parent_container_width=300, on_click=lambda e, i: None)
        style = gallery.render()[1]["style"]
        self.assertEqual(style["position"], "absolute")
        self.assertEqual(style["cursor"], "pointer")
        self.assertGreater(style["top"], 0)

    def test_close_drops_pending_layout(self):
        self.gallery.observe(900)
        self.gallery.close()
        self.scheduler.run()
        self.assertEqual(self.layouts, [])

    def test_tiny_width_reports_error_and_keeps_layout(self):
        errors = []
        gallery = Gallery(PHOTOS, on_layout=self.layouts.append, on_error=errors.append,
                          scheduler=self.scheduler)
        gallery.observe(5)
        with self.assertLogs("app.photogallery.gallery", level="WARNING"):
            self.scheduler.run()
        self.assertEqual(self.layouts, [])
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], ParameterError)
        self.assertEqual(errors[0].parameter, "margin")

        gallery.observe(901)
        self.scheduler.run()
        self.assertEqual(len(self.layouts), 1)

    def test_tiny_width_without_error_hook_is_logged(self):
        gallery = Gallery(PHOTOS, on_layout=self.layouts.append, scheduler=self.scheduler)
        gallery.observe(5)
        with self.assertLogs("app.photogallery.gallery", level="WARNING") as logs:
            self.scheduler.run()
        self.assertIn("width 5", logs.output[0])
        self.assertEqual(self.layouts, [])

    def test_describe_photo_with_mapping(self):
        gallery = Gallery([{"src": "x.png", "width": 10, "height": 10, "alt": "x"}],
                          use_parent_container_width=True, parent_container_width=100)
        thumb = gallery.layout()[0]
        request = RenderRequest(thumb.left, thumb.top, thumb.container_height, 0, 2, "row", None, thumb, thumb.key)
        self.assertEqual(describe_photo(request)["alt"], "x")
        self.assertEqual(thumb.key, "x.png")


if __name__ == "__main__":
    unittest.main()
