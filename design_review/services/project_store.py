"""
파일 기반 프로젝트 저장소 서비스입니다.
데이터베이스 대신 projects/<slug>/ 폴더 규칙을 사용하여 아티팩트와 결과물을 관리합니다.

프로젝트 폴더 구성:
1. 아티팩트: prd.md, research.md, figma.md, analytics.md
2. raw/: 변환할 원본 파일 (pptx, pdf, docx, txt, md)
3. prompts/: 에이전트용 컨텍스트와 프롬프트
4. 결과물: design-review.md, design-comments.preview.md
"""

import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Optional

from design_review.exceptions import (
    ProjectExistsError,
    ProjectNotFoundError,
    StorageError,
)
from design_review.layers.layer2_markdown import extract_project_name
from design_review.models import ArtifactKey, ArtifactSet
from design_review.templates import load_template
from design_review.utils.slugify import is_valid_slug, validate_project_name
from .workspace import Workspace

logger = logging.getLogger(__name__)


RAW_DIRNAME = "raw"
PROMPTS_DIRNAME = "prompts"
REVIEW_FILENAME = "design-review.md"
COMMENTS_FILENAME = "design-comments.preview.md"


class ProjectStore:
    """projects/ 폴더 아래의 프로젝트들을 다루는 저장소 클래스입니다."""

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    @property
    def projects_dir(self) -> Path:
        return self.workspace.projects_dir

    # ==================== 프로젝트 조회 ====================

    def list_projects(self) -> list[str]:
        """
        프로젝트 슬러그 목록을 이름순으로 반환합니다.
        일반 파일과 슬러그 형식이 아닌 폴더(숨김 폴더 포함)는 제외합니다.
        """
        if not self.projects_dir.is_dir():
            return []
        return sorted(
            path.name for path in self.projects_dir.iterdir()
            if path.is_dir() and is_valid_slug(path.name)
        )

    def project_path(self, slug: str) -> Path:
        return self.projects_dir / slug

    def exists(self, slug: str) -> bool:
        # 슬러그 형식이 아닌 값(`..`, 경로 구분자 포함)은 없는 프로젝트로 취급
        return is_valid_slug(slug) and self.project_path(slug).is_dir()

    def require(self, slug: str) -> Path:
        """
        프로젝트 폴더 경로를 반환합니다.

        Raises:
            ProjectNotFoundError: 폴더가 없을 때 (사용 가능한 프로젝트 목록을 details에 포함)
        """
        if not self.exists(slug):
            raise ProjectNotFoundError(
                f'프로젝트 "{slug}"를 찾을 수 없습니다',
                details={"slug": slug, "available": self.list_projects()},
            )
        return self.project_path(slug)

    def raw_dir(self, slug: str) -> Path:
        return self.project_path(slug) / RAW_DIRNAME

    def prompts_dir(self, slug: str) -> Path:
        return self.project_path(slug) / PROMPTS_DIRNAME

    # ==================== 프로젝트 생성 ====================

    def create(self, name: str, created_at: Optional[datetime] = None) -> str:
        """
        템플릿으로 새 프로젝트를 만듭니다.

        Args:
            name: 사람이 입력한 프로젝트 이름 (front matter의 Project 값)
            created_at: 생성 시각 (기본값 현재)

        Returns:
            생성된 프로젝트의 슬러그

        Raises:
            InvalidProjectNameError: 이름에서 슬러그를 만들 수 없을 때
            ProjectExistsError: 같은 슬러그의 프로젝트가 이미 있을 때
        """
        slug = validate_project_name(name)
        project_dir = self.project_path(slug)
        if project_dir.exists():
            raise ProjectExistsError(
                f'프로젝트 "{slug}"가 이미 존재합니다',
                details={"slug": slug, "path": str(project_dir)},
            )

        created = (created_at or datetime.now()).isoformat()
        self.workspace.ensure_projects_dir()
        project_dir.mkdir(parents=True)

        for key in ArtifactKey:
            self._copy_template(key, project_dir / key.filename, name.strip(), created)

        (project_dir / RAW_DIRNAME).mkdir()
        (project_dir / PROMPTS_DIRNAME).mkdir()

        logger.info(f"[ProjectStore] 프로젝트 생성: {slug}")
        return slug

    def _copy_template(self, key: ArtifactKey, dest: Path, project_name: str, created: str):
        """템플릿 앞에 front matter를 붙여서 복사합니다."""
        header = f"---\nProject: {project_name}\nCreated: {created}\n---\n\n"
        self.write_file(dest, header + load_template(key.template_name))

    # ==================== 아티팩트 / 결과물 ====================

    def read_artifacts(self, slug: str) -> ArtifactSet:
        """
        프로젝트의 네 아티팩트를 읽습니다. 없는 파일은 빈 문자열입니다.

        Raises:
            ProjectNotFoundError: 프로젝트가 없을 때
        """
        project_dir = self.require(slug)
        return ArtifactSet(**{
            key.value: self.read_file(project_dir / key.filename)
            for key in ArtifactKey
        })

    def project_name(self, slug: str, artifacts: Optional[ArtifactSet] = None) -> str:
        """PRD front matter의 Project 값, 없으면 슬러그"""
        artifacts = artifacts or self.read_artifacts(slug)
        return extract_project_name(artifacts.prd) or slug

    def write_output(self, slug: str, filename: str, content: str) -> Path:
        """프로젝트 폴더에 결과물을 씁니다. (예: design-review.md, prompts/_review_prompt.md)"""
        path = self.require(slug) / filename
        self.write_file(path, content)
        return path

    def read_output(self, slug: str, filename: str) -> str:
        return self.read_file(self.require(slug) / filename)

    # ==================== 내부 도우미 함수들 ====================

    @staticmethod
    def read_file(path: Path) -> str:
        """파일을 읽습니다. 없거나 읽을 수 없으면 빈 문자열을 반환합니다."""
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"파일 읽기 실패 {path}: {e}")
            return ""

    @staticmethod
    def write_file(path: Path, content: str):
        """상위 폴더를 만들면서 파일을 씁니다."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"파일 저장 실패 {path}: {e}", exc_info=True)
            raise StorageError(
                f"파일 저장에 실패했습니다: {path.name}",
                details={"path": str(path), "error": str(e)},
            ) from e


@lru_cache()
def get_project_store() -> ProjectStore:
    """
    현재 워크스페이스의 ProjectStore 인스턴스를 반환합니다.
    API에서 의존성으로 사용하며, 테스트에서는 dependency_overrides로 교체합니다.
    """
    return ProjectStore(Workspace.discover())
