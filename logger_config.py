"""
로깅 설정 모듈
레이아웃 계산 과정의 디버그 출력을 통합 관리
"""
import logging
import sys

LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

def setup_logger(level=logging.INFO):
    """로거 설정"""
    # 루트 로거 설정
    root_logger = logging.getLogger()

    # 이미 핸들러가 있으면 중복 추가 방지
    if root_logger.handlers:
        return root_logger

    # 로그 레벨 설정 (개발 시: DEBUG, 배포 시: INFO)
    root_logger.setLevel(level)

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.addHandler(console_handler)

    return root_logger

# 모듈별 로거 생성 함수
def get_logger(name):
    """모듈별 로거 가져오기"""
    return logging.getLogger(name)
