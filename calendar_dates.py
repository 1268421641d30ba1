# calendar_dates.py
"""주간/월간 뷰의 표시 창(window)을 이루는 날짜 목록을 만듭니다."""
import calendar
import datetime

from config import DAYS_IN_WEEK, WORK_DAYS_IN_WEEK


def get_start_of_week(day, start_day_of_week, hide_weekends=False):
    """day가 속한 주의 첫 날짜. start_day_of_week는 datetime.weekday() 기준 (0=월 ... 6=일)."""
    weekday = day.weekday()
    if hide_weekends:
        # 주말 숨김 모드는 항상 월요일 시작
        return day - datetime.timedelta(days=weekday)
    return day - datetime.timedelta(days=(weekday - start_day_of_week) % 7)


def get_week_dates(day, start_day_of_week, hide_weekends=False):
    start_of_week = get_start_of_week(day, start_day_of_week, hide_weekends)
    num_days = WORK_DAYS_IN_WEEK if hide_weekends else DAYS_IN_WEEK
    return [start_of_week + datetime.timedelta(days=i) for i in range(num_days)]


def get_month_weeks(year, month, start_day_of_week):
    """월간 그리드에 표시될 주(7일 묶음) 목록. 이전/다음 달 날짜로 앞뒤를 채웁니다."""
    first_day_of_month = datetime.date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]

    start_offset = (first_day_of_month.weekday() - start_day_of_week) % 7
    total_cells = start_offset + days_in_month
    # 마지막 주를 채우고, 5줄 이하이면 한 주를 더 붙임
    remaining_cells = (7 - total_cells % 7) % 7 + (7 if total_cells <= 35 else 0)

    grid_start = first_day_of_month - datetime.timedelta(days=start_offset)
    all_dates = [grid_start + datetime.timedelta(days=i) for i in range(total_cells + remaining_cells)]
    return [all_dates[i:i + 7] for i in range(0, len(all_dates), 7)]


def get_month_view_dates(year, month, start_day_of_week):
    """월간 뷰에 표시될 모든 날짜(이전/현재/다음 달 포함)의 시작일과 종료일을 반환합니다."""
    weeks = get_month_weeks(year, month, start_day_of_week)
    return weeks[0][0], weeks[-1][-1]
