"""
프로젝트 단위 작업 흐름을 관리하는 오케스트레이터입니다.
CLI 명령과 API 엔드포인트가 같은 흐름을 공유합니다.

작업 종류:
1. 변환 (convert): raw/ 파일 추출 → 변환 컨텍스트와 프롬프트 작성
2. 리뷰 (review): 아티팩트 읽기 → 리뷰/코멘트 생성 → 결과물과 에이전트용 프롬프트 작성
3. 코멘트 조회 (load_comments): 미리보기 파일 파싱 + Figma 파일 키 확인
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from design_review.layers.base_generator import ReviewContext
from design_review.layers.layer1_extraction import ExtractorFactory
from design_review.layers.layer2_markdown import extract_file_key
from design_review.layers.layer3_review import ReviewGenerator, CommentGenerator
from design_review.layers.layer4_comments import parse_comments
from design_review.layers.layer5_prompts import (
    build_convert_context,
    build_convert_prompt,
    build_review_context,
    build_review_prompt,
    CONVERT_CONTEXT_FILENAME,
    CONVERT_PROMPT_FILENAME,
    REVIEW_CONTEXT_FILENAME,
    REVIEW_PROMPT_FILENAME,
)
from design_review.models import ParsedComment, RawFile, MAX_COMMENTS
from .project_store import (
    ProjectStore,
    PROMPTS_DIRNAME,
    REVIEW_FILENAME,
    COMMENTS_FILENAME,
)

logger = logging.getLogger(__name__)


class ConvertResult(BaseModel):
    """변환 결과"""

    slug: str
    files: list[RawFile] = Field(default_factory=list)
    context_path: Optional[Path] = None
    prompt_path: Optional[Path] = None

    @property
    def has_placeholders(self) -> bool:
        return any(f.is_placeholder for f in self.files)


class ReviewResult(BaseModel):
    """리뷰 생성 결과"""

    slug: str
    project_name: str
    review_path: Path
    comments_path: Path
    prompt_path: Path
    context_path: Path
    comment_count: int
    review_markdown: str
    comments_markdown: str
    artifacts_empty: bool = Field(default=False, description="네 아티팩트가 모두 비어 있었는지 여부")


class CommentBatch(BaseModel):
    """게시할 코멘트 묶음"""

    slug: str
    file_key: Optional[str] = None
    comments: list[ParsedComment] = Field(default_factory=list)
    preview_found: bool = True


class ProjectWorkflow:
    """프로젝트 단위 변환/리뷰/코멘트 흐름을 조율하는 클래스입니다."""

    def __init__(
        self,
        store: ProjectStore,
        extractor_factory: Optional[ExtractorFactory] = None,
    ):
        self.store = store
        self.extractor_factory = extractor_factory or ExtractorFactory()
        self.review_generator = ReviewGenerator()
        self.comment_generator = CommentGenerator()

    # ==================== 변환 ====================

    async def convert(self, slug: str, generated_at: Optional[datetime] = None) -> ConvertResult:
        """
        raw/ 폴더의 파일을 추출해 변환 컨텍스트와 프롬프트를 씁니다.
        지원하는 파일이 없으면 아무것도 쓰지 않고 빈 결과를 반환합니다.

        Raises:
            ProjectNotFoundError: 프로젝트가 없을 때
        """
        self.store.require(slug)
        raw_dir = self.store.raw_dir(slug)
        raw_dir.mkdir(parents=True, exist_ok=True)

        files = await self.extractor_factory.extract_directory(raw_dir)
        if not files:
            logger.info(f"[Workflow] {slug}: raw/ 폴더에 변환할 파일이 없습니다")
            return ConvertResult(slug=slug)

        context_path = self.store.write_output(
            slug,
            f"{PROMPTS_DIRNAME}/{CONVERT_CONTEXT_FILENAME}",
            build_convert_context(slug, files, generated_at),
        )
        prompt_path = self.store.write_output(
            slug,
            f"{PROMPTS_DIRNAME}/{CONVERT_PROMPT_FILENAME}",
            build_convert_prompt(slug),
        )
        logger.info(f"[Workflow] {slug}: 파일 {len(files)}개 변환 컨텍스트 작성")

        return ConvertResult(
            slug=slug,
            files=files,
            context_path=context_path,
            prompt_path=prompt_path,
        )

    # ==================== 리뷰 ====================

    def review(
        self,
        slug: str,
        generated_on: Optional[date] = None,
        generated_at: Optional[datetime] = None,
    ) -> ReviewResult:
        """
        리뷰 문서와 코멘트 미리보기를 생성하고, 에이전트용 프롬프트/컨텍스트도 씁니다.

        Raises:
            ProjectNotFoundError: 프로젝트가 없을 때
            StorageError: 결과물을 쓸 수 없을 때
        """
        artifacts = self.store.read_artifacts(slug)
        artifacts_empty = artifacts.is_empty()
        if artifacts_empty:
            logger.warning(f"[Workflow] {slug}: 아티팩트가 모두 비어 있어 기본 체크리스트만 생성합니다")
        project_name = self.store.project_name(slug, artifacts)
        context = ReviewContext(project_name=project_name, slug=slug, generated_on=generated_on)

        review = self.review_generator.generate(artifacts, context)
        preview = self.comment_generator.generate(artifacts, context)
        review_markdown = review.to_markdown()
        comments_markdown = preview.to_markdown()

        review_path = self.store.write_output(slug, REVIEW_FILENAME, review_markdown)
        comments_path = self.store.write_output(slug, COMMENTS_FILENAME, comments_markdown)
        prompt_path = self.store.write_output(
            slug,
            f"{PROMPTS_DIRNAME}/{REVIEW_PROMPT_FILENAME}",
            build_review_prompt(project_name, slug, MAX_COMMENTS),
        )
        context_path = self.store.write_output(
            slug,
            f"{PROMPTS_DIRNAME}/{REVIEW_CONTEXT_FILENAME}",
            build_review_context(artifacts, project_name, slug, generated_at),
        )

        return ReviewResult(
            slug=slug,
            project_name=project_name,
            review_path=review_path,
            comments_path=comments_path,
            prompt_path=prompt_path,
            context_path=context_path,
            comment_count=len(preview.comments),
            review_markdown=review_markdown,
            comments_markdown=comments_markdown,
            artifacts_empty=artifacts_empty,
        )

    # ==================== 코멘트 ====================

    def load_comments(self, slug: str) -> CommentBatch:
        """
        미리보기 파일의 코멘트와 figma.md의 파일 키를 읽습니다.

        Raises:
            ProjectNotFoundError: 프로젝트가 없을 때
        """
        content = self.store.read_output(slug, COMMENTS_FILENAME)
        artifacts = self.store.read_artifacts(slug)
        return CommentBatch(
            slug=slug,
            file_key=extract_file_key(artifacts.figma),
            comments=parse_comments(content) if content else [],
            preview_found=bool(content),
        )
