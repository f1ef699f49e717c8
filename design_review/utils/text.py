"""텍스트 포맷팅 및 유사도 유틸리티."""

from typing import Iterable, Optional


def format_bytes(size: int) -> str:
    """바이트 수를 사람이 읽기 쉬운 문자열로 변환합니다 (예: 2.5 KB)."""
    if size < 1024:
        return f"{size} bytes"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def levenshtein(a: str, b: str) -> int:
    """두 문자열 사이의 편집 거리"""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,         # 삭제
                current[j - 1] + 1,      # 삽입
                previous[j - 1] + (ca != cb),  # 치환
            ))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """0.0 ~ 1.0 사이의 문자열 유사도 (1 - 편집거리 / 긴 문자열 길이)"""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


def suggest_closest(
    word: str,
    candidates: Iterable[str],
    threshold: float = 0.5,
) -> Optional[str]:
    """
    오타로 보이는 입력에 가장 가까운 후보를 찾습니다.

    유사도가 threshold 이상인 후보가 없으면 None을 반환합니다.
    """
    best: Optional[str] = None
    best_score = 0.0
    for candidate in candidates:
        score = similarity(word.lower(), candidate.lower())
        if score > best_score:
            best, best_score = candidate, score
    return best if best_score >= threshold else None
