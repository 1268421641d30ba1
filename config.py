# config.py
import os


def get_data_dir():
    """Get the directory for user files (settings.json)."""
    data_dir = os.environ.get("DESKCAL_DATA_DIR")
    if not data_dir:
        # 개발 모드: 현재 모듈 디렉토리 사용
        data_dir = os.path.dirname(os.path.abspath(__file__))

    os.makedirs(data_dir, exist_ok=True)
    return data_dir

# --- File Paths ---
_DATA_DIR = get_data_dir()
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")

# --- Calendar Defaults ---
DAYS_IN_WEEK = 7
WORK_DAYS_IN_WEEK = 5  # hide_weekends 사용 시 (월~금)
DEFAULT_START_DAY_OF_WEEK = 6  # datetime.weekday() 기준: 0=월요일 ... 6=일요일
DEFAULT_HIDE_WEEKENDS = False
DEFAULT_TIMEZONE = "UTC"

# --- Event Defaults ---
DEFAULT_EVENT_COLOR = '#555555'
DEFAULT_EVENT_TITLE = "No Title"

# --- Identifiers ---
MEMORY_CALENDAR_PROVIDER_NAME = "MemoryCalendarProvider"
