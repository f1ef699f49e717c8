"""
마크다운 섹션 추출기입니다.

PRD 같은 마크다운 문서에서 제목, 특정 섹션의 목록 항목, 섹션 본문을 뽑아냅니다.
모든 함수는 순수 함수이며 어떤 문자열 입력에도 예외를 던지지 않습니다.

섹션 규칙:
- 레벨 1~3 제목 중 텍스트에 섹션 이름이 (대소문자 무시) 포함된 첫 번째 제목이 섹션을 엽니다.
- 그 뒤에 나오는 제목은 레벨과 관계없이 모두 섹션을 닫습니다.
- 같은 이름의 섹션이 다시 나와도 합치지 않습니다 (첫 번째만 사용).
"""

import re
from enum import Enum
from typing import Iterator, Optional


HEADING_PATTERN = re.compile(r"^#{2,3}\s+(.+)$", re.MULTILINE)
SECTION_HEADING_PATTERN = re.compile(r"^#{1,3}\s+(.+)$")
BULLET_PATTERN = re.compile(r"^\s*[-*]\s+(.+)$")
NUMBERED_PATTERN = re.compile(r"^\s*\d+\.\s+(.+)$")
PROJECT_PATTERN = re.compile(r"^Project:\s*(.+)$", re.MULTILINE)

# 섹션 본문 최대 길이
MAX_SECTION_LENGTH = 500


class ScanState(str, Enum):
    """섹션 스캔 상태"""

    OUTSIDE = "outside"  # 아직 대상 섹션을 만나지 못함
    INSIDE = "inside"    # 대상 섹션 안
    CLOSED = "closed"    # 대상 섹션이 끝남 (더 이상 수집하지 않음)


def extract_headings(markdown: str) -> list[str]:
    """
    `##`, `###` 제목을 문서 순서대로 모두 추출합니다.

    레벨 1(`#`)과 레벨 4 이상은 수집하지 않으며, 중복은 그대로 유지합니다.
    """
    return [match.group(1).strip() for match in HEADING_PATTERN.finditer(markdown)]


def _section_lines(markdown: str, section_name: str) -> Iterator[str]:
    """
    대상 섹션 안의 (제목이 아닌) 줄들을 순서대로 내보냅니다.

    OUTSIDE → INSIDE → CLOSED 로만 진행하며, CLOSED가 되면 스캔을 멈춥니다.
    """
    target = section_name.lower()
    state = ScanState.OUTSIDE

    for line in markdown.split("\n"):
        heading = SECTION_HEADING_PATTERN.match(line)

        if heading:
            if state is ScanState.INSIDE:
                state = ScanState.CLOSED
                break
            if target in heading.group(1).lower():
                state = ScanState.INSIDE
            continue

        if state is ScanState.INSIDE:
            yield line


def extract_bullets(markdown: str, section_name: str) -> list[str]:
    """
    섹션 아래의 글머리 기호(`-`, `*`)와 번호 목록(`1.`) 항목을 추출합니다.

    섹션을 찾지 못하면 빈 리스트를 반환합니다.

    Example:
        >>> extract_bullets("## Goals\\n- Fast\\n1. Simple", "goals")
        ['Fast', 'Simple']
    """
    bullets = []
    for line in _section_lines(markdown, section_name):
        match = BULLET_PATTERN.match(line) or NUMBERED_PATTERN.match(line)
        if match:
            bullets.append(match.group(1).strip())
    return bullets


def extract_section(markdown: str, section_name: str) -> str:
    """
    섹션 본문을 한 줄 문자열로 추출합니다.

    빈 줄을 제외한 모든 줄을 양끝 공백을 지우고 공백 하나로 이어 붙인 뒤
    앞 500자만 남깁니다. 섹션이 없으면 빈 문자열입니다.
    """
    content = [line.strip() for line in _section_lines(markdown, section_name) if line.strip()]
    return " ".join(content)[:MAX_SECTION_LENGTH]


def extract_project_name(markdown: str) -> Optional[str]:
    """프로젝트 스캐폴딩이 넣어둔 `Project: <이름>` 줄에서 이름을 읽습니다."""
    match = PROJECT_PATTERN.search(markdown)
    if not match:
        return None
    return match.group(1).strip() or None
