"""프로젝트 스캐폴딩과 변환 프롬프트에 쓰는 마크다운 템플릿."""

from pathlib import Path

from design_review.exceptions import StorageError


TEMPLATES_DIR = Path(__file__).parent


def template_path(name: str) -> Path:
    """템플릿 파일 경로 (예: prd.template.md)"""
    return TEMPLATES_DIR / name


def load_template(name: str) -> str:
    """
    템플릿 내용을 읽습니다.

    Raises:
        StorageError: 패키지에 템플릿 파일이 없을 때
    """
    path = template_path(name)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(
            f"템플릿 파일을 읽을 수 없습니다: {name}",
            details={"path": str(path), "reason": str(e)},
        ) from e
