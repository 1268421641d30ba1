# layout/day_overlap.py
import logging

from .models import OverlapPlacement

logger = logging.getLogger(__name__)


def sort_for_day_overlap(events):
    # sorted()는 안정 정렬이라 시작 시각이 같으면 입력 순서가 유지됨
    return sorted(events, key=lambda e: e.start)


def _effective_end(event):
    # 길이가 0 이하인 이벤트는 길이 0으로 취급 (최소 표시 높이는 렌더러 몫)
    return max(event.start, event.end)


class DayOverlapLayout:
    """하루 안의 시간 이벤트들을 겹침 그룹(cluster)으로 묶고 그룹 내 열을 배정합니다."""

    def layout(self, events):
        placements = {}
        for cluster in self.layout_clusters(events):
            total_columns = max(column for _, column in cluster) + 1
            for event, column in cluster:
                if event.id in placements:
                    logger.debug(f"중복 이벤트 ID, 이전 배치를 덮어씀: {event.id}")
                placements[event.id] = OverlapPlacement(column=column, total_columns=total_columns)
        return placements

    def layout_clusters(self, events):
        """클러스터마다 [(event, column), ...] 목록을 반환합니다."""
        return [self._assign_columns(group) for group in self._group_overlapping_events(events)]

    def _group_overlapping_events(self, events):
        if not events:
            return []

        groups = []
        current_group = [events[0]]
        group_end_time = _effective_end(events[0])

        for event in events[1:]:
            # 그룹 안 어느 이벤트든 끝나기 전에 시작하면 같은 그룹 (= 그룹의 최대 종료 시각)
            if event.start < group_end_time:
                current_group.append(event)
                group_end_time = max(group_end_time, _effective_end(event))
            else:
                groups.append(current_group)
                current_group = [event]
                group_end_time = _effective_end(event)

        groups.append(current_group)
        return groups

    def _assign_columns(self, group_events):
        column_ends = []  # 각 열에 마지막으로 놓인 이벤트의 종료 시각
        assigned = []

        for event in group_events:
            for i, last_end in enumerate(column_ends):
                if last_end <= event.start:
                    column = i
                    break
            else:
                column = len(column_ends)
                column_ends.append(None)

            column_ends[column] = _effective_end(event)
            assigned.append((event, column))

        return assigned


def layout_day_overlaps(events):
    return DayOverlapLayout().layout(events)
