import unittest

from roomdims.models import Corner, Dimension, Point2D, RoomData
from roomdims.services.viewport import Viewport

from tests.rooms import RECTANGLE, polygon_room


class ViewportTests(unittest.TestCase):
    def test_uniform_scale_with_padding(self):
        viewport = Viewport.fit(polygon_room(RECTANGLE), 800, 600, 40)
        self.assertAlmostEqual(viewport.scale, 65.0)
        self.assertEqual(viewport.to_screen(Point2D(x=0, y=0)), Point2D(x=40, y=40))
        self.assertEqual(viewport.to_screen(Point2D(x=10, y=8)), Point2D(x=690, y=560))

    def test_zero_extent_axis_uses_the_other(self):
        room = RoomData(corners=[Corner(id="a", x=2, y=0), Corner(id="b", x=2, y=5)])
        viewport = Viewport.fit(room, 800, 600, 40)
        self.assertAlmostEqual(viewport.scale, 104.0)

    def test_oversized_padding_never_mirrors(self):
        viewport = Viewport.fit(polygon_room(RECTANGLE), 100, 100, 80)
        self.assertEqual(viewport.scale, 0.0)
        self.assertEqual(viewport.to_screen(Point2D(x=10, y=8)), Point2D(x=80, y=80))
        dim = Dimension.between(Point2D(x=0, y=0), Point2D(x=10, y=0))
        self.assertEqual(viewport.label_for(dim).text, "10.00")

    def test_empty_and_single_point_rooms(self):
        self.assertEqual(Viewport.fit(RoomData(), 800, 600, 40).scale, 1.0)
        room = RoomData(corners=[Corner(id="a", x=2, y=3)])
        self.assertEqual(Viewport.fit(room, 800, 600, 40).scale, 1.0)

    def test_label_offset_perpendicular_to_segment(self):
        viewport = Viewport.fit(polygon_room(RECTANGLE), 800, 600, 40)
        dim = Dimension.between(Point2D(x=0, y=0), Point2D(x=10, y=0))
        label = viewport.label_for(dim, offset=15)
        self.assertEqual(label.text, "10.00")
        self.assertAlmostEqual(label.anchor.x, 365.0)
        self.assertAlmostEqual(label.anchor.y, 55.0)

    def test_label_rounds_to_two_decimals(self):
        viewport = Viewport.fit(polygon_room(RECTANGLE), 800, 600, 40)
        dim = Dimension.between(Point2D(x=0, y=0), Point2D(x=10, y=8))
        self.assertEqual(viewport.label_for(dim).text, "12.81")


if __name__ == "__main__":
    unittest.main()
