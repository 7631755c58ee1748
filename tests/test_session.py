import unittest

from roomdims.models import RoomData, SelectionCursor
from roomdims.services.dimension_service import DimensionService
from roomdims.services.session import DimensionSession, SessionNotFoundError, SessionStore

from tests.rooms import L_SHAPE, RECTANGLE, polygon_room


class SelectionCursorTests(unittest.TestCase):
    def test_wraps_after_count_advances(self):
        cursor = SelectionCursor()
        for count in (1, 3, 7):
            start = cursor.current_index
            for _ in range(count):
                cursor.advance(count)
            self.assertEqual(cursor.current_index, start)

    def test_advance_with_no_candidates_is_noop(self):
        cursor = SelectionCursor()
        self.assertEqual(cursor.advance(0), 0)
        self.assertIsNone(cursor.current([]))

    def test_sequence(self):
        cursor = SelectionCursor()
        self.assertEqual([cursor.advance(3) for _ in range(4)], [1, 2, 0, 1])


class DimensionSessionTests(unittest.TestCase):
    def setUp(self):
        self.service = DimensionService()

    def test_current_starts_at_best_candidate(self):
        session = DimensionSession(self.service, polygon_room(L_SHAPE))
        self.assertEqual(session.count, 9)
        self.assertEqual(session.current(), session.candidates[0])

    def test_advance_cycles_through_candidates(self):
        session = DimensionSession(self.service, polygon_room(L_SHAPE))
        seen = []
        for _ in range(session.count):
            seen.append(session.current())
            session.advance()
        self.assertEqual(seen, session.candidates)
        self.assertEqual(session.cursor.current_index, 0)

    def test_equal_snapshot_does_not_recompute(self):
        session = DimensionSession(self.service, polygon_room(L_SHAPE))
        session.advance()
        self.assertFalse(session.update(polygon_room(L_SHAPE)))
        self.assertEqual(session.cursor.current_index, 1)

    def test_changed_snapshot_recomputes_and_resets(self):
        session = DimensionSession(self.service, polygon_room(L_SHAPE))
        session.advance()
        self.assertTrue(session.update(polygon_room(RECTANGLE)))
        self.assertEqual(session.cursor.current_index, 0)
        self.assertAlmostEqual(session.current().length.value, 10.0)

    def test_empty_room(self):
        session = DimensionSession(self.service, RoomData())
        self.assertEqual(session.count, 0)
        self.assertEqual(session.advance(), 0)
        self.assertIsNone(session.current())


class SessionStoreTests(unittest.TestCase):
    def test_create_get_delete(self):
        store = SessionStore(DimensionService())
        session_id, session = store.create(polygon_room(RECTANGLE))
        self.assertIs(store.get(session_id), session)
        store.delete(session_id)
        with self.assertRaises(SessionNotFoundError):
            store.get(session_id)
        with self.assertRaises(SessionNotFoundError):
            store.delete(session_id)


if __name__ == "__main__":
    unittest.main()
