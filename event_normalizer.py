# event_normalizer.py
"""
Provider가 돌려주는 원본 이벤트 딕셔너리를 레이아웃 엔진용 Event 값으로 변환합니다.

지원 형식
- Provider 형식: {'id', 'summary', 'start': {'date' | 'dateTime'}, 'end': {...}, 'calendarId', 'color'}
- 평면 형식:     {'id', 'title', 'date' | 'startDate', 'endDate', 'isAllDay', 'color'}
"""
import datetime
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as dateutil_parser

from config import DEFAULT_TIMEZONE, DEFAULT_EVENT_COLOR, DEFAULT_EVENT_TITLE
from error_messages import EventFormatError
from layout.models import Event

logger = logging.getLogger(__name__)


def resolve_timezone(name):
    try:
        return ZoneInfo(name or DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"알 수 없는 시간대 '{name}', {DEFAULT_TIMEZONE} 사용")
        return ZoneInfo(DEFAULT_TIMEZONE)


def _is_date_only(value):
    if isinstance(value, str):
        return len(value.strip()) == 10
    return isinstance(value, datetime.date) and not isinstance(value, datetime.datetime)


def _to_local_naive(value, user_tz):
    """aware 값은 사용자 시간대로 옮긴 뒤 tzinfo를 떼어 벽시계 시각으로 맞춥니다."""
    if value.tzinfo is not None:
        value = value.astimezone(user_tz)
    return value.replace(tzinfo=None)


def _parse_time_value(value, user_tz):
    if isinstance(value, datetime.datetime):
        return _to_local_naive(value, user_tz)
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time(0, 0))
    if not isinstance(value, str) or not value.strip():
        raise EventFormatError.from_error_type("MISSING_EVENT_TIME")
    try:
        parsed = dateutil_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise EventFormatError.from_error_type("INVALID_EVENT_TIME", detail=f"{value!r}: {e}") from e
    return _to_local_naive(parsed, user_tz)


def _extract_times(raw):
    """(start 원본값, end 원본값, 종일 여부)를 반환합니다."""
    start_info, end_info = raw.get('start'), raw.get('end')
    if isinstance(start_info, dict):
        end_info = end_info if isinstance(end_info, dict) else {}
        is_all_day = 'date' in start_info and 'dateTime' not in start_info
        start_value = start_info.get('dateTime', start_info.get('date'))
        end_value = end_info.get('dateTime', end_info.get('date'))
        return start_value, end_value, is_all_day

    start_value = raw.get('date') or raw.get('startDate')
    end_value = raw.get('endDate')
    is_all_day = raw.get('isAllDay')
    if is_all_day is None:
        is_all_day = _is_date_only(start_value)
    return start_value, end_value, bool(is_all_day)


def normalize_event(raw, user_tz=None):
    """원본 딕셔너리 하나를 Event로 변환합니다. 형식이 잘못되면 EventFormatError."""
    if not isinstance(raw, dict):
        raise EventFormatError.from_error_type("INVALID_EVENT_FORMAT", detail=type(raw).__name__)
    event_id = raw.get('id')
    if event_id is None or event_id == '':
        # id는 중복 제거와 배치 결과의 키로 쓰임
        raise EventFormatError.from_error_type("MISSING_EVENT_ID")
    if user_tz is None:
        user_tz = resolve_timezone(DEFAULT_TIMEZONE)

    start_value, end_value, is_all_day = _extract_times(raw)
    start = _parse_time_value(start_value, user_tz)

    if end_value in (None, ''):
        if not is_all_day:
            raise EventFormatError.from_error_type("MISSING_EVENT_TIME", detail="end")
        end = start + datetime.timedelta(days=1)
    else:
        end = _parse_time_value(end_value, user_tz)

    if is_all_day:
        # 종일 이벤트는 날짜 단위로 맞춤
        start = datetime.datetime.combine(start.date(), datetime.time(0, 0))

    return Event(
        id=event_id,
        title=raw.get('summary') or raw.get('title') or DEFAULT_EVENT_TITLE,
        start=start,
        end=end,
        is_all_day=is_all_day,
        color=raw.get('color') or DEFAULT_EVENT_COLOR,
        calendar_id=raw.get('calendarId'),
    )


def normalize_events(raw_events, user_tz=None):
    """변환에 실패한 이벤트는 경고 로그를 남기고 제외합니다. 예외를 던지지 않습니다."""
    events = []
    for raw in raw_events:
        try:
            events.append(normalize_event(raw, user_tz))
        except EventFormatError as e:
            summary = raw.get('summary') or raw.get('title') if isinstance(raw, dict) else raw
            logger.warning(f"이벤트 변환 오류: {e} [{e.error_code}], 이벤트: {summary}")
            continue
    return events
