# providers/memory_provider.py
import datetime
import logging

from .base_provider import BaseCalendarProvider
from config import MEMORY_CALENDAR_PROVIDER_NAME

logger = logging.getLogger(__name__)


def _raw_date_range(event):
    """원본 딕셔너리에서 (시작일, 마지막 포함일)을 대략 읽어냅니다. 실패하면 ValueError/TypeError."""
    start_info, end_info = event.get('start'), event.get('end')
    if isinstance(start_info, dict):
        end_info = end_info if isinstance(end_info, dict) else {}
        start_str = start_info.get('date') or start_info.get('dateTime', '')[:10]
        end_str = end_info.get('date') or end_info.get('dateTime', '')[:10]
        exclusive_end = 'date' in end_info
    else:
        start_str = str(event.get('date') or event.get('startDate') or '')[:10]
        end_str = str(event.get('endDate') or start_str)[:10]
        exclusive_end = bool(event.get('isAllDay'))

    start_date = datetime.date.fromisoformat(start_str)
    end_date = datetime.date.fromisoformat(end_str)
    if exclusive_end and end_date > start_date:
        end_date -= datetime.timedelta(days=1)
    return start_date, end_date


class MemoryCalendarProvider(BaseCalendarProvider):
    """메모리에 들고 있는 원본 이벤트 딕셔너리를 기간별로 돌려주는 Provider."""

    def __init__(self, events=None):
        self.name = MEMORY_CALENDAR_PROVIDER_NAME
        self._events = list(events or [])

    def set_events(self, events):
        self._events = list(events)

    def get_events(self, start_date, end_date):
        result = []
        for event in self._events:
            try:
                event_start, event_end = _raw_date_range(event)
            except (ValueError, TypeError, AttributeError):
                # 날짜를 읽을 수 없는 이벤트는 그대로 넘겨 호출자가 걸러내고 기록하게 함
                result.append(event)
                continue
            if not (event_end < start_date or event_start > end_date):
                result.append(event)
        return result
