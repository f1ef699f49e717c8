"""프로젝트 이름 → 폴더용 슬러그 변환 유틸리티.

슬러그는 projects/<slug> 폴더명과 CLI 인자로 쓰입니다.
"""

import re

from design_review.exceptions import InvalidProjectNameError


_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(name: str) -> str:
    """
    사람이 입력한 프로젝트 이름을 슬러그로 변환합니다.

    결과는 `[a-z0-9-]`만 포함하며, 앞뒤 하이픈과 연속 하이픈이 없습니다.
    기호만 있는 입력은 빈 문자열이 됩니다.

    Example:
        >>> slugify("Botim Quest")
        'botim-quest'
    """
    slug = name.lower().strip()
    slug = _INVALID_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def validate_project_name(name: str) -> str:
    """
    프로젝트 이름을 검증하고 슬러그를 반환합니다.

    Raises:
        InvalidProjectNameError: 슬러그가 비어 있을 때
    """
    slug = slugify(name)
    if not slug:
        raise InvalidProjectNameError(
            "유효한 프로젝트 이름이 아닙니다. 영문자나 숫자를 하나 이상 포함해야 합니다",
            details={"name": name},
        )
    return slug


def is_valid_slug(slug: str) -> bool:
    """이미 정규화된 슬러그인지 여부 (`..`나 경로 구분자가 들어간 값은 False)"""
    return bool(slug) and slugify(slug) == slug
