# views/layout_calculator.py
"""
뷰(월/주/일/연)별로 레이아웃 엔진을 조합하는 계산기들.
호출자가 이벤트와 창(window)을 넘기면 배치 결과를 돌려줄 뿐, 콜백이나 상태를 갖지 않습니다.
"""
import calendar
import datetime
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Tuple

from calendar_dates import get_month_weeks
from config import DAYS_IN_WEEK, WORK_DAYS_IN_WEEK
from data_manager import classify_events, events_in_range
from layout.day_overlap import DayOverlapLayout, sort_for_day_overlap
from layout.models import Event, WeekGrid
from layout.week_span import WeekSpanLayout, sort_for_week_span
from layout.window_math import clamp_to_window, day_offset


@dataclass(frozen=True)
class WeekRowLayout:
    dates: Tuple[datetime.date, ...]
    span_grid: WeekGrid
    day_events: Dict[datetime.date, Tuple[Event, ...]] = field(default_factory=dict)


def _layout_spans(span_events, dates):
    ordered = sort_for_week_span(span_events, dates[0])
    return WeekSpanLayout().layout(ordered, dates)


class MonthLayoutCalculator:
    def __init__(self, events, year, month, start_day_of_week):
        self.events = list(events)
        self.year = year
        self.month = month
        self.start_day_of_week = start_day_of_week

    def calculate(self):
        rows = []
        for week_dates in get_month_weeks(self.year, self.month, self.start_day_of_week):
            week_events = events_in_range(self.events, week_dates[0], week_dates[-1])
            time_events, span_events = classify_events(week_events)

            # 하루짜리 시간 이벤트는 날짜 칸 안에 시작 시각 순으로 나열
            day_events = defaultdict(list)
            for event in sort_for_day_overlap(time_events):
                day_events[event.start.date()].append(event)

            rows.append(WeekRowLayout(
                dates=tuple(week_dates),
                span_grid=_layout_spans(span_events, week_dates),
                day_events={d: tuple(day_events.get(d, ())) for d in week_dates},
            ))
        return rows


class WeekLayoutCalculator:
    def __init__(self, time_events, all_day_events, start_of_week, hide_weekends=False):
        self.time_events = sort_for_day_overlap(time_events)
        self.all_day_events = list(all_day_events)
        self.start_of_week = start_of_week
        self.hide_weekends = hide_weekends
        self.num_days = WORK_DAYS_IN_WEEK if hide_weekends else DAYS_IN_WEEK

    @property
    def week_dates(self):
        return [self.start_of_week + datetime.timedelta(days=i) for i in range(self.num_days)]

    def _get_day_column_index(self, date_obj):
        col = day_offset(date_obj, self.start_of_week)
        if 0 <= col < self.num_days:
            return col
        return -1

    def calculate_all_day_events(self):
        return _layout_spans(self.all_day_events, self.week_dates)

    def calculate_time_events(self):
        """날짜별 {event_id: OverlapPlacement}. 창 밖 날짜의 이벤트는 제외합니다."""
        events_by_day = defaultdict(list)
        for event in self.time_events:
            if self._get_day_column_index(event.start.date()) == -1:
                continue
            events_by_day[event.start.date()].append(event)

        overlap_layout = DayOverlapLayout()
        return {day: overlap_layout.layout(events_by_day.get(day, [])) for day in self.week_dates}


class DayLayoutCalculator:
    def __init__(self, events, day):
        self.day = day
        time_events, span_events = classify_events(events_in_range(events, day, day))
        self.time_events = sort_for_day_overlap(e for e in time_events if e.start.date() == day)
        self.all_day_events = span_events

    def calculate_all_day_events(self):
        return _layout_spans(self.all_day_events, [self.day])

    def calculate_time_events(self):
        return DayOverlapLayout().layout(self.time_events)


class YearLayoutCalculator:
    """연간 뷰의 미니 달력에서 이벤트가 있는 날짜를 표시하기 위한 {월: {일, ...}}."""

    def __init__(self, events, year):
        self.events = list(events)
        self.year = year

    def calculate(self):
        days_with_events = {}
        for month in range(1, 13):
            month_start = datetime.date(self.year, month, 1)
            month_end = datetime.date(self.year, month, calendar.monthrange(self.year, month)[1])

            days = set()
            for event in self.events:
                span = clamp_to_window(event, month_start, month_end)
                if not span.is_visible:
                    continue
                days.update(range(span.visible_start.day, span.visible_end.day + 1))
            days_with_events[month] = days
        return days_with_events
