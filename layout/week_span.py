# layout/week_span.py
import datetime
import logging

from .models import Slot, SpanPlacement, WeekGrid
from .window_math import clamp_to_window, day_offset

logger = logging.getLogger(__name__)


def sort_for_week_span(events, window_start):
    """표시 시작일 오름차순, 같은 날이면 긴 이벤트 먼저. (안정 정렬)

    긴 이벤트를 먼저 배치해야 짧은 이벤트가 빈 칸을 채우고 레인이 불필요하게 늘지 않습니다.
    이 순서가 바뀌면 배치 결과도 바뀌므로 정렬 기준을 임의로 바꾸지 마세요.
    """
    def sort_key(event):
        visible_start = max(event.start.date(), window_start)
        return (visible_start, -event.duration)

    return sorted(events, key=sort_key)


def _validate_window(window_dates):
    dates = tuple(window_dates)
    if not dates:
        raise ValueError("window must contain at least one date")
    for prev, cur in zip(dates, dates[1:]):
        if cur - prev != datetime.timedelta(days=1):
            raise ValueError(f"window dates must be contiguous: {prev} -> {cur}")
    return dates


class WeekSpanLayout:
    """여러 날짜에 걸친 이벤트(종일 포함)를 주간 창의 레인에 first-fit으로 배치합니다.

    인스턴스는 상태를 갖지 않습니다. 같은 (정렬된) 입력에는 항상 같은 결과를 돌려줍니다.
    """

    def layout(self, events, window_dates):
        dates = _validate_window(window_dates)
        placements = self._assign_lanes(events, dates)
        columns = tuple(self._build_column(col, placements) for col in range(len(dates)))
        return WeekGrid(dates=dates, columns=columns, placements=tuple(placements))

    def _assign_lanes(self, events, dates):
        window_start, window_end = dates[0], dates[-1]
        lanes = []  # lanes[i] = 해당 레인에 이미 배정된 (start_col, end_col) 목록
        placements = []

        for event in events:
            span = clamp_to_window(event, window_start, window_end)
            if not span.is_visible:
                logger.debug(f"창 밖 이벤트 건너뜀: {event.id} ({event.start} ~ {event.end})")
                continue

            start_col = day_offset(span.visible_start, window_start)
            end_col = day_offset(span.visible_end, window_start)

            lane_idx = 0
            while True:
                if lane_idx == len(lanes):
                    lanes.append([])
                if all(end_col < s or start_col > e for s, e in lanes[lane_idx]):
                    lanes[lane_idx].append((start_col, end_col))
                    break
                lane_idx += 1

            placements.append(SpanPlacement(
                event=event,
                lane=lane_idx,
                start_column=start_col,
                end_column=end_col,
                continues_left=span.continues_left,
                continues_right=span.continues_right,
            ))

        return placements

    def _build_column(self, col, placements):
        covering = [p for p in placements if p.covers(col)]
        if not covering:
            return ()

        by_lane = {p.lane: p for p in covering}
        max_lane = max(by_lane)

        slots = []
        # 빈 레인도 자리표시 슬롯을 넣어 인접 열과 세로 정렬을 맞춤
        for lane in range(max_lane + 1):
            placement = by_lane.get(lane)
            if placement is None:
                slots.append(Slot.placeholder(lane, col))
                continue
            slots.append(Slot(
                lane=lane,
                column=col,
                event=placement.event,
                show_title=col == placement.start_column,
                continues_left=col > placement.start_column or placement.continues_left,
                continues_right=col < placement.end_column or placement.continues_right,
            ))
        return tuple(slots)


def layout_week_spans(events, window_dates):
    return WeekSpanLayout().layout(events, window_dates)
