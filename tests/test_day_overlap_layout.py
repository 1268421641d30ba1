# tests/test_day_overlap_layout.py
import unittest
import datetime
import os
import sys

# 프로젝트 루트 경로를 sys.path에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from layout.models import Event, OverlapPlacement
from layout.day_overlap import DayOverlapLayout, layout_day_overlaps, sort_for_day_overlap


def timed(event_id, start, end):
    """'HH:MM' 문자열로 2024-03-05의 시간 이벤트를 만듭니다."""
    def at(hhmm):
        hour, minute = map(int, hhmm.split(':'))
        return datetime.datetime(2024, 3, 5, hour, minute)
    return Event(event_id, event_id, at(start), at(end))


class TestDayOverlapScenarios(unittest.TestCase):

    def test_overlapping_pair_shares_cluster(self):
        result = layout_day_overlaps([timed("a", "09:00", "10:00"), timed("b", "09:30", "10:30")])
        self.assertEqual(result["a"], OverlapPlacement(column=0, total_columns=2))
        self.assertEqual(result["b"], OverlapPlacement(column=1, total_columns=2))

    def test_separate_events_get_own_clusters(self):
        result = layout_day_overlaps([timed("a", "09:00", "10:00"), timed("b", "11:00", "12:00")])
        self.assertEqual(result["a"], OverlapPlacement(column=0, total_columns=1))
        self.assertEqual(result["b"], OverlapPlacement(column=0, total_columns=1))

    def test_back_to_back_events_do_not_overlap(self):
        result = layout_day_overlaps([timed("a", "09:00", "10:00"), timed("b", "10:00", "11:00")])
        self.assertEqual(result["b"], OverlapPlacement(column=0, total_columns=1))


class TestDayOverlapClustering(unittest.TestCase):

    def setUp(self):
        self.layout = DayOverlapLayout()

    def test_transitive_overlap_joins_cluster(self):
        """C는 A와 겹치지 않지만 B와 겹치므로 같은 클러스터에 들어갑니다."""
        events = [timed("A", "09:00", "10:00"), timed("B", "09:30", "11:00"), timed("C", "10:30", "11:30")]
        clusters = self.layout.layout_clusters(events)
        self.assertEqual(len(clusters), 1)
        # C는 A가 끝난 0열을 재사용
        self.assertEqual([(e.id, col) for e, col in clusters[0]], [("A", 0), ("B", 1), ("C", 0)])

    def test_total_columns_is_achieved_columns_not_cluster_size(self):
        events = [timed("A", "09:00", "10:00"), timed("B", "09:30", "11:00"), timed("C", "10:30", "11:30")]
        result = self.layout.layout(events)
        self.assertEqual({p.total_columns for p in result.values()}, {2})

    def test_first_fit_prefers_lowest_free_column(self):
        events = sort_for_day_overlap([
            timed("A", "09:00", "12:00"),
            timed("B", "09:00", "10:00"),
            timed("C", "09:30", "10:30"),
            timed("D", "10:00", "11:00"),
        ])
        result = self.layout.layout(events)
        self.assertEqual(result["A"].column, 0)
        self.assertEqual(result["B"].column, 1)
        self.assertEqual(result["C"].column, 2)
        self.assertEqual(result["D"].column, 1)
        self.assertTrue(all(p.total_columns == 3 for p in result.values()))

    def test_stable_order_for_equal_start(self):
        first, second = timed("first", "09:00", "10:00"), timed("second", "09:00", "09:30")
        self.assertEqual([e.id for e in sort_for_day_overlap([first, second])], ["first", "second"])
        result = self.layout.layout(sort_for_day_overlap([first, second]))
        self.assertEqual(result["first"].column, 0)
        self.assertEqual(result["second"].column, 1)

    def test_degenerate_durations_are_still_placed(self):
        events = [timed("zero", "09:00", "09:00"), timed("negative", "09:30", "09:00"),
                  timed("normal", "09:00", "10:00")]
        result = self.layout.layout(sort_for_day_overlap(events))
        self.assertEqual(set(result), {"zero", "negative", "normal"})
        for placement in result.values():
            self.assertLess(placement.column, placement.total_columns)

    def test_empty_input(self):
        self.assertEqual(self.layout.layout([]), {})
        self.assertEqual(self.layout.layout_clusters([]), [])

    def test_columns_never_hold_overlapping_events(self):
        events = sort_for_day_overlap([
            timed("a", "08:00", "09:30"), timed("b", "08:15", "08:45"), timed("c", "08:30", "10:00"),
            timed("d", "08:50", "09:10"), timed("e", "09:30", "10:30"), timed("f", "13:00", "14:00"),
            timed("g", "13:30", "13:45"),
        ])
        for cluster in self.layout.layout_clusters(events):
            by_column = {}
            for event, column in cluster:
                by_column.setdefault(column, []).append(event)
            for column_events in by_column.values():
                for prev, nxt in zip(column_events, column_events[1:]):
                    self.assertLessEqual(prev.end, nxt.start)

        result = self.layout.layout(events)
        self.assertEqual(list(result), [e.id for e in events])
        self.assertEqual(result["f"], OverlapPlacement(column=0, total_columns=2))
        self.assertEqual(result["g"], OverlapPlacement(column=1, total_columns=2))


if __name__ == '__main__':
    unittest.main()
