# data_manager.py
import datetime
import logging

from calendar_dates import get_start_of_week
from config import DAYS_IN_WEEK, WORK_DAYS_IN_WEEK
from event_normalizer import normalize_events, resolve_timezone
from layout.window_math import intersects, is_span_event
from settings_manager import get_hide_weekends, get_start_day_of_week, get_user_timezone_name

logger = logging.getLogger(__name__)


def events_in_range(events, start_date, end_date):
    """[start_date, end_date] (양 끝 포함)에 하루라도 걸치는 이벤트만 남깁니다."""
    return [e for e in events if intersects(e, start_date, end_date)]


def sort_for_display(events):
    """시작 시각 오름차순, 같으면 긴 이벤트 먼저."""
    return sorted(events, key=lambda e: (e.start, -e.duration))


def classify_events(events):
    """(시간 이벤트, 종일/여러 날 이벤트)로 나눕니다. 입력 순서는 유지됩니다."""
    time_events, span_events = [], []
    for event in events:
        if is_span_event(event):
            span_events.append(event)
        else:
            time_events.append(event)
    return time_events, span_events


class DataManager:
    """
    Provider에서 원본 이벤트를 가져와 정규화/필터링한 뒤 레이아웃 계층에 넘겨주는 호출자 계층.
    결과를 캐시하지 않습니다. 호출할 때마다 Provider를 다시 조회합니다.
    """

    def __init__(self, providers, settings=None):
        self.providers = list(providers)
        self.settings = settings if settings is not None else {}

    def _user_tz(self):
        return resolve_timezone(get_user_timezone_name(self.settings))

    def _fetch_raw_events(self, start_date, end_date):
        raw_events = []
        for provider in self.providers:
            raw_events.extend(provider.get_events(start_date, end_date))

        selected_ids = self.settings.get("selected_calendars")
        if selected_ids is not None:
            raw_events = [e for e in raw_events
                          if not isinstance(e, dict) or e.get('calendarId') in selected_ids]
        return raw_events

    def get_events_for_period(self, start_date, end_date):
        events = normalize_events(self._fetch_raw_events(start_date, end_date), self._user_tz())
        events = events_in_range(events, start_date, end_date)

        # 같은 ID가 여러 Provider/기간에서 중복으로 들어오면 마지막 것을 사용
        unique_events = {e.id: e for e in events}.values()
        logger.debug(f"기간 이벤트 {len(unique_events)}건: {start_date} ~ {end_date}")
        return sort_for_display(unique_events)

    def get_events_for_day(self, day):
        return sorted(self.get_events_for_period(day, day), key=lambda e: e.start)

    def get_classified_events_for_week(self, start_of_week):
        hide_weekends = get_hide_weekends(self.settings)
        num_days = WORK_DAYS_IN_WEEK if hide_weekends else DAYS_IN_WEEK
        end_of_week = start_of_week + datetime.timedelta(days=num_days - 1)

        time_events, span_events = classify_events(self.get_events_for_period(start_of_week, end_of_week))
        if hide_weekends:
            time_events = [e for e in time_events if e.start.weekday() < 5]
        return time_events, span_events

    def get_current_week_start(self, day):
        return get_start_of_week(day, get_start_day_of_week(self.settings), get_hide_weekends(self.settings))
