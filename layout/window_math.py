# layout/window_math.py
"""
이벤트 구간을 표시 창(window)에 맞춰 정규화하는 공용 함수 모음.

종일 이벤트의 end는 마지막 날 '다음' 자정입니다(exclusive). 이 보정은
inclusive_end_date() 한 곳에서만 처리하고, 두 레이아웃 알고리즘은 모두 이 함수를 거칩니다.
"""
import datetime

from .models import ClampedSpan

ONE_UNIT = datetime.timedelta(microseconds=1)


def _as_date(value):
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def inclusive_end_date(event):
    """이벤트가 실제로 차지하는 마지막 날짜를 반환합니다."""
    if event.end <= event.start:
        # 길이가 0 이하인 이벤트는 시작일 하루짜리로 취급
        return _as_date(event.start)
    return _as_date(event.end - ONE_UNIT)


def day_offset(date, window_start):
    """date가 window_start로부터 며칠 떨어져 있는지 (벽시계 날짜 기준)."""
    return (_as_date(date) - _as_date(window_start)).days


def calendar_day_span(event):
    return day_offset(inclusive_end_date(event), event.start) + 1


def spans_multiple_days(event):
    return calendar_day_span(event) > 1


def is_span_event(event):
    """WeekSpanLayout으로 보낼 이벤트인지 판단합니다. (종일 또는 여러 날짜에 걸친 이벤트)"""
    return event.is_all_day or spans_multiple_days(event)


def clamp_to_window(event, window_start, window_end):
    window_start = _as_date(window_start)
    window_end = _as_date(window_end)
    start_date = _as_date(event.start)
    end_date = inclusive_end_date(event)

    return ClampedSpan(
        visible_start=max(start_date, window_start),
        visible_end=min(end_date, window_end),
        continues_left=start_date < window_start,
        continues_right=end_date > window_end,
    )


def intersects(event, start_date, end_date):
    return clamp_to_window(event, start_date, end_date).is_visible
