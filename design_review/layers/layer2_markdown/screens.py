"""
화면(Screen) 추론 모듈입니다.
PRD 제목 중 화면을 가리키는 단어가 들어간 것을 골라내고, 없으면 기본 화면 목록을 사용합니다.
"""

from enum import Enum


# 제목이 화면을 가리킨다고 판단하는 키워드 (소문자)
SCREEN_KEYWORDS = ("screen", "page", "view", "modal", "dialog", "flow", "step")


class DefaultScreen(str, Enum):
    """화면 관련 제목이 하나도 없을 때 사용하는 기본 화면"""

    ENTRY = "Entry"
    CORE_ACTION = "Core Action"
    CONFIRMATION = "Confirmation"
    ERROR_RECOVERY = "Error/Recovery"


def infer_screens(headings: list[str]) -> list[str]:
    """
    제목 목록에서 화면 이름을 추론합니다.

    결과는 절대 비어 있지 않습니다. 키워드가 들어간 제목이 있으면 원래 순서대로
    (중복 포함) 반환하고, 없으면 DefaultScreen 네 개를 반환합니다.
    """
    screens = [
        heading for heading in headings
        if any(keyword in heading.lower() for keyword in SCREEN_KEYWORDS)
    ]
    if screens:
        return screens
    return [screen.value for screen in DefaultScreen]
