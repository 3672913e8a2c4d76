"""
UI에서 호출하는 커맨드
- greet / get_app_version / check_previous_deployment
"""

import asyncio

from config import APP_VERSION
from services.deployment_detector import get_detector, log


class CommandError(Exception):
    """커맨드 실행 실패 (UI에는 메시지 문자열로 전달)"""


def greet(name: str) -> str:
    return f"Hello, {name}! You've been greeted from Python!"


def get_app_version() -> str:
    return APP_VERSION


async def check_previous_deployment(detector=None) -> bool:
    """이전 버전 설치 여부 확인

    레지스트리 조회는 워커 스레드에서 실행한다. 키 없음/접근 거부는
    Detector 안에서 False 로 처리되므로, 여기까지 올라오는 예외는
    예상하지 못한 실패뿐이다.

    Raises:
        CommandError: 감지 자체가 실패한 경우
    """
    if detector is None:
        detector = get_detector()

    try:
        found = await asyncio.to_thread(detector.detect)
    except Exception as e:
        log(f"이전 설치 확인 실패: {e}")
        raise CommandError(f"Failed to check previous deployment: {e}") from e

    log(f"이전 설치 확인: {'found' if found else 'not found'}")
    return found
