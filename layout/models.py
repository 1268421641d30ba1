# layout/models.py
"""
레이아웃 엔진이 주고받는 값 객체들.
모두 불변(frozen) 데이터클래스이며, 엔진은 이 값을 새로 만들어 반환할 뿐 수정하지 않습니다.
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Event:
    id: Any
    title: str
    start: datetime.datetime
    end: datetime.datetime              # 종일 이벤트는 마지막 날의 다음 자정 (exclusive)
    is_all_day: bool = False
    color: Optional[str] = None         # 렌더러용 힌트, 엔진은 건드리지 않음
    calendar_id: Optional[str] = None

    @property
    def duration(self) -> datetime.timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class ClampedSpan:
    visible_start: datetime.date
    visible_end: datetime.date
    continues_left: bool
    continues_right: bool

    @property
    def is_visible(self) -> bool:
        return self.visible_start <= self.visible_end


@dataclass(frozen=True)
class SpanPlacement:
    """WeekSpanLayout이 이벤트 하나에 배정한 레인과 열 범위."""
    event: Event
    lane: int
    start_column: int
    end_column: int
    continues_left: bool = False        # 창(window) 경계에서 잘린 경우만
    continues_right: bool = False

    def covers(self, column: int) -> bool:
        return self.start_column <= column <= self.end_column


@dataclass(frozen=True)
class Slot:
    lane: int
    column: int
    event: Optional[Event] = None
    show_title: bool = False
    continues_left: bool = False
    continues_right: bool = False

    @property
    def empty(self) -> bool:
        return self.event is None

    @classmethod
    def placeholder(cls, lane: int, column: int) -> "Slot":
        return cls(lane=lane, column=column)


@dataclass(frozen=True)
class WeekGrid:
    dates: Tuple[datetime.date, ...]
    columns: Tuple[Tuple[Slot, ...], ...]
    placements: Tuple[SpanPlacement, ...] = field(default_factory=tuple)

    @property
    def lane_count(self) -> int:
        if not self.placements:
            return 0
        return max(p.lane for p in self.placements) + 1

    def placement_for(self, event_id) -> Optional[SpanPlacement]:
        return next((p for p in self.placements if p.event.id == event_id), None)


@dataclass(frozen=True)
class OverlapPlacement:
    column: int
    total_columns: int
