# tests/test_calendar_dates.py
import unittest
import datetime
import os
import sys

# 프로젝트 루트 경로를 sys.path에 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from calendar_dates import get_start_of_week, get_week_dates, get_month_weeks, get_month_view_dates

D = datetime.date
SUNDAY_START, MONDAY_START = 6, 0


class TestWeekDates(unittest.TestCase):

    def test_sunday_start(self):
        # 2024-03-06은 수요일
        self.assertEqual(get_start_of_week(D(2024, 3, 6), SUNDAY_START), D(2024, 3, 3))

    def test_monday_start(self):
        self.assertEqual(get_start_of_week(D(2024, 3, 6), MONDAY_START), D(2024, 3, 4))

    def test_start_day_itself(self):
        self.assertEqual(get_start_of_week(D(2024, 3, 3), SUNDAY_START), D(2024, 3, 3))
        self.assertEqual(get_start_of_week(D(2024, 3, 9), 5), D(2024, 3, 9))

    def test_week_dates_are_contiguous(self):
        dates = get_week_dates(D(2024, 3, 6), SUNDAY_START)
        self.assertEqual(len(dates), 7)
        self.assertEqual(dates[0], D(2024, 3, 3))
        self.assertEqual(dates[-1], D(2024, 3, 9))

    def test_hide_weekends_uses_monday_to_friday(self):
        dates = get_week_dates(D(2024, 3, 10), SUNDAY_START, hide_weekends=True)
        self.assertEqual(dates, [D(2024, 3, 4) + datetime.timedelta(days=i) for i in range(5)])


class TestMonthWeeks(unittest.TestCase):

    def test_weeks_start_on_configured_day(self):
        for start_day in range(7):
            weeks = get_month_weeks(2024, 3, start_day)
            for week in weeks:
                self.assertEqual(len(week), 7)
                self.assertEqual(week[0].weekday(), start_day)

    def test_month_is_fully_covered(self):
        weeks = get_month_weeks(2024, 3, SUNDAY_START)
        all_dates = [d for week in weeks for d in week]
        for day in range(1, 32):
            self.assertIn(D(2024, 3, day), all_dates)
        self.assertEqual(all_dates, sorted(all_dates))

    def test_short_grid_gets_extra_week(self):
        # 2024-03-01은 금요일: 일요일 시작이면 앞 5칸 + 31일 = 36칸 -> 6주
        self.assertEqual(len(get_month_weeks(2024, 3, SUNDAY_START)), 6)
        # 2026-02-01은 일요일: 28칸뿐이라 다음 달 한 주를 더 붙여 5주
        weeks = get_month_weeks(2026, 2, SUNDAY_START)
        self.assertEqual(len(weeks), 5)
        self.assertEqual(weeks[0][0], D(2026, 2, 1))
        self.assertEqual(weeks[-1][-1], D(2026, 3, 7))

    def test_month_view_dates(self):
        start, end = get_month_view_dates(2024, 3, MONDAY_START)
        self.assertEqual(start, D(2024, 2, 26))
        self.assertEqual((end - start).days + 1, 7 * len(get_month_weeks(2024, 3, MONDAY_START)))


if __name__ == '__main__':
    unittest.main()
