"""
이벤트 레이아웃 엔진
주간(여러 날짜) 레인 배치와 하루 시간대 겹침 배치를 순수 함수로 계산합니다.
"""

from .models import (
    Event, ClampedSpan, SpanPlacement, Slot, WeekGrid, OverlapPlacement
)
from .window_math import (
    inclusive_end_date, day_offset, calendar_day_span, spans_multiple_days,
    is_span_event, clamp_to_window, intersects
)
from .week_span import WeekSpanLayout, layout_week_spans, sort_for_week_span
from .day_overlap import DayOverlapLayout, layout_day_overlaps, sort_for_day_overlap

__all__ = [
    # Models
    'Event', 'ClampedSpan', 'SpanPlacement', 'Slot', 'WeekGrid', 'OverlapPlacement',

    # Window math
    'inclusive_end_date', 'day_offset', 'calendar_day_span', 'spans_multiple_days',
    'is_span_event', 'clamp_to_window', 'intersects',

    # Algorithms
    'WeekSpanLayout', 'layout_week_spans', 'sort_for_week_span',
    'DayOverlapLayout', 'layout_day_overlaps', 'sort_for_day_overlap',
]
