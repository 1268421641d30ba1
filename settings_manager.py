import json
import logging
import os

from config import (SETTINGS_FILE, DEFAULT_START_DAY_OF_WEEK, DEFAULT_HIDE_WEEKENDS,
                    DEFAULT_TIMEZONE)
from error_messages import SettingsError

logger = logging.getLogger(__name__)


def load_settings(path=SETTINGS_FILE):
    """설정 파일(settings.json)을 읽어와서 딕셔너리로 반환합니다."""
    if os.path.exists(path):
        with open(path, "r") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"설정 파일이 손상되어 기본값을 사용합니다: {path}")
                return {} # 파일이 손상되었을 경우 빈 딕셔너리 반환
    return {} # 파일이 없을 경우 빈 딕셔너리 반환

def save_settings(data, path=SETTINGS_FILE):
    """설정 데이터(딕셔너리)를 settings.json 파일에 저장합니다."""
    with open(path, "w") as f:
        json.dump(data, f, indent=4)

def save_settings_safe(data, preserve_keys=None, path=SETTINGS_FILE):
    """
    설정을 안전하게 저장합니다. 지정된 키들은 기존 값을 보존합니다.

    Args:
        data: 저장할 설정 데이터
        preserve_keys: 보존할 키들의 리스트 (예: ['selected_calendars'])
    """
    if preserve_keys is None:
        preserve_keys = []

    original_settings = load_settings(path)
    merged = dict(original_settings)
    merged.update(data)

    for key in preserve_keys:
        if key in original_settings:
            merged[key] = original_settings[key]
            logger.debug(f"settings_manager: '{key}' 키 보존됨")

    save_settings(merged, path)

def get_start_day_of_week(settings):
    """주의 첫 요일(0=월요일 ... 6=일요일)을 반환합니다. 범위를 벗어나면 SettingsError."""
    value = settings.get("start_day_of_week", DEFAULT_START_DAY_OF_WEEK)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise SettingsError.from_error_type("INVALID_START_DAY", detail=repr(value))
    return value

def get_hide_weekends(settings):
    return bool(settings.get("hide_weekends", DEFAULT_HIDE_WEEKENDS))

def get_user_timezone_name(settings):
    return settings.get("user_timezone") or DEFAULT_TIMEZONE
