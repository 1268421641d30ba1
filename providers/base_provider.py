from abc import ABC, abstractmethod

class BaseCalendarProvider(ABC):
    """
    레이아웃 계층에 원본 이벤트를 공급하는 모든 캘린더 제공자(Provider)의 기본 클래스.
    레이아웃 엔진은 Provider를 직접 호출하지 않습니다. 호출자(DataManager)가 가져와서 넘겨줍니다.
    """

    name = None

    @abstractmethod
    def get_events(self, start_date, end_date):
        """
        특정 기간(양 끝 포함) 사이에 걸치는 이벤트 목록을 반환해야 합니다.
        반환값: [ {이벤트 딕셔너리}, {이벤트 딕셔너리}, ... ]
        """
        pass
