import unittest

from roomdims.core.analyzer import WallAnalyzer, find_wall_corners, resolve_walls
from roomdims.models import AnalysisContext, Corner, RoomData, Wall, WallRef

from tests.rooms import L_SHAPE, RECTANGLE, polygon_room


class ResolverTests(unittest.TestCase):
    def test_resolves_start_and_end(self):
        room = polygon_room(RECTANGLE)
        start, end = find_wall_corners(room, "w1")
        self.assertEqual((start.id, end.id), ("c1", "c2"))

    def test_unresolved_walls_are_skipped(self):
        corners = [
            Corner(id="a", x=0, y=0, wall_starts=[WallRef(id="w1"), WallRef(id="w2")]),
            Corner(id="b", x=5, y=0, wall_ends=[WallRef(id="w1")]),
        ]
        walls = [Wall(id="w1"), Wall(id="w2"), Wall(id="ghost")]
        resolved = resolve_walls(RoomData(walls=walls, corners=corners))
        self.assertEqual([w.id for w in resolved], ["w1"])

    def test_dangling_corner_reference_is_ignored(self):
        room = polygon_room(RECTANGLE)
        walls = [w for w in room.walls if w.id != "w2"]
        resolved = resolve_walls(RoomData(walls=walls, corners=room.corners))
        self.assertEqual([w.id for w in resolved], ["w0", "w1", "w3"])


class ClassifierTests(unittest.TestCase):
    def analyze(self, room):
        context = AnalysisContext(room=room)
        WallAnalyzer().analyze(context)
        return context

    def test_l_shape_axes_sorted_longest_first(self):
        context = self.analyze(polygon_room(L_SHAPE))
        self.assertEqual([w.id for w in context.horizontal], ["w0", "w2", "w4"])
        self.assertEqual([w.id for w in context.vertical], ["w5", "w1", "w3"])

    def test_diagonal_walls_are_not_aligned(self):
        context = self.analyze(polygon_room([(0, 0), (6, 0), (3, 4)]))
        self.assertEqual([w.id for w in context.horizontal], ["w0"])
        self.assertEqual(context.vertical, [])
        self.assertEqual(len(context.walls), 3)


if __name__ == "__main__":
    unittest.main()
