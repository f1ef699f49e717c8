"""
워크스페이스 루트 탐색 서비스입니다.

워크스페이스는 projects/ 폴더를 담고 있는 디렉토리입니다.
프로세스마다 한 번 찾은 뒤, 그 경로를 저장소와 명령에 명시적으로 넘겨줍니다.
"""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from design_review.config import Settings, get_settings

logger = logging.getLogger(__name__)


PROJECTS_DIRNAME = "projects"
PACKAGE_NAME = "design-review"


class Workspace:
    """
    워크스페이스 루트와 그 안의 projects/ 경로를 나타냅니다.

    Attributes:
        root: 워크스페이스 루트 (절대 경로)
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def __repr__(self) -> str:
        return f"Workspace(root={str(self.root)!r})"

    @property
    def projects_dir(self) -> Path:
        return self.root / PROJECTS_DIRNAME

    def has_projects_dir(self) -> bool:
        return self.projects_dir.is_dir()

    def ensure_projects_dir(self) -> Path:
        """projects/ 폴더가 없으면 만듭니다."""
        self.projects_dir.mkdir(parents=True, exist_ok=True)
        return self.projects_dir

    @classmethod
    def discover(
        cls,
        start: Optional[Path] = None,
        settings: Optional[Settings] = None,
    ) -> "Workspace":
        """
        워크스페이스 루트를 찾습니다.

        탐색 순서:
        1. 설정의 workspace_root (DESIGN_REVIEW_WORKSPACE)
        2. start(기본값: 현재 디렉토리)부터 상위로 올라가며
           - projects/ 폴더가 있는 디렉토리, 또는
           - design-review를 이름이나 의존성으로 가진 pyproject.toml이 있는 디렉토리
        3. 찾지 못하면 start 자체
        """
        settings = settings or get_settings()
        if settings.workspace_root:
            logger.debug(f"[Workspace] 설정값 사용: {settings.workspace_root}")
            return cls(Path(settings.workspace_root).expanduser())

        start = Path(start or Path.cwd()).resolve()
        for directory in [start, *start.parents]:
            if (directory / PROJECTS_DIRNAME).is_dir():
                logger.debug(f"[Workspace] projects/ 폴더 발견: {directory}")
                return cls(directory)
            if _pyproject_mentions_package(directory / "pyproject.toml"):
                logger.debug(f"[Workspace] pyproject.toml 발견: {directory}")
                return cls(directory)

        logger.debug(f"[Workspace] 루트를 찾지 못해 시작 디렉토리 사용: {start}")
        return cls(start)


def _pyproject_mentions_package(path: Path) -> bool:
    """pyproject.toml이 design-review 프로젝트 자체이거나 의존성으로 갖고 있는지 확인합니다."""
    if not path.is_file():
        return False

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"[Workspace] pyproject.toml 읽기 실패 {path}: {e}")
        return False

    project = data.get("project", {})
    if project.get("name") == PACKAGE_NAME:
        return True

    requirements = list(project.get("dependencies", []))
    for group in project.get("optional-dependencies", {}).values():
        requirements.extend(group)
    return any(_requirement_name(req) == PACKAGE_NAME for req in requirements)


def _requirement_name(requirement: str) -> str:
    # "design-review>=0.1" → "design-review"
    name = requirement.strip()
    for separator in ("[", ";", "=", "<", ">", "!", "~", " "):
        name = name.split(separator, 1)[0]
    return name.lower().replace("_", "-")
