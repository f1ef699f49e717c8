"""Comment generator - builds a bounded list of structured review comments."""

import logging
from datetime import date
from typing import Optional

from design_review.models import (
    ArtifactSet,
    CommentsPreview,
    CommentType,
    ReviewComment,
    MAX_COMMENTS,
)
from design_review.layers.base_generator import BaseGenerator, ReviewContext
from design_review.layers.layer2_markdown import PRDAnalysis, extract_node_id

logger = logging.getLogger(__name__)


# 화면을 하나도 추론하지 못했을 때의 대상 페이지
FALLBACK_PAGE = "Main Flow"


class CommentGenerator(BaseGenerator[CommentsPreview]):
    """
    PRD와 Figma 참조에서 리뷰 코멘트 목록을 만듭니다.

    생성 순서는 고정이며, 모두 만든 뒤 앞에서부터 MAX_COMMENTS개만 남깁니다:
    1. Missing State (첫 번째 화면)
    2. Flow Mismatch (Happy path가 없을 때)
    3. Edge Case (PRD의 edge case마다 하나씩)
    4. Validation (입력 폼)
    5. Clarifying Question (Happy path 마지막 단계의 확인 화면, 있을 때)
    6. Clarifying Question (되돌리기/복구)
    """

    _generator_name = "CommentGenerator"

    def _do_generate(
        self,
        artifacts: ArtifactSet,
        context: ReviewContext,
    ) -> CommentsPreview:
        analysis = PRDAnalysis.from_markdown(artifacts.prd)
        node_id = extract_node_id(artifacts.figma)

        comments = self._build_comments(analysis, node_id)
        if len(comments) > MAX_COMMENTS:
            logger.info(
                f"[{self._generator_name}] 코멘트 {len(comments)}개 중 "
                f"{MAX_COMMENTS}개만 사용합니다"
            )

        return CommentsPreview(
            project_name=context.project_name,
            slug=context.slug_label,
            generated_on=context.date_label,
            comments=comments[:MAX_COMMENTS],
        )

    def _build_comments(
        self,
        analysis: PRDAnalysis,
        node_id: Optional[str],
    ) -> list[ReviewComment]:
        """고정된 순서로 전체 코멘트 후보를 만듭니다 (개수 제한 전)."""
        comments = []

        def add(page: str, comment_type: CommentType, message: str, why: str):
            comments.append(ReviewComment(
                page=page,
                node_id=node_id,
                type=comment_type,
                message=message,
                why=why,
            ))

        # 모든 화면은 빈 상태/로딩/에러를 고려해야 함
        add(
            analysis.screens[0] if analysis.screens else FALLBACK_PAGE,
            CommentType.MISSING_STATE,
            "Does this screen handle Empty, Loading, and Error states?\n"
            "Consider adding visual representations for each state to ensure "
            "the design covers all scenarios.",
            "States checklist — every screen should account for empty, loading, "
            "and error conditions",
        )

        if not analysis.has_happy_path:
            add(
                "Flow Overview",
                CommentType.FLOW_MISMATCH,
                'The PRD does not have a documented "Happy path" section.\n'
                "Without a clear happy path, it's difficult to verify the design "
                "covers the intended user journey.",
                'PRD → "Happy path" section missing',
            )

        for edge in analysis.edge_cases:
            add(
                "Relevant Screen",
                CommentType.EDGE_CASE,
                f'The PRD mentions this edge case: "{edge}"\n'
                "Is this scenario handled in the design? Consider adding a state "
                "or recovery flow.",
                f'PRD → "Edge cases" → "{edge}"',
            )

        add(
            "Form / Input Screen",
            CommentType.VALIDATION,
            "What happens when the user enters invalid input?\n"
            "Consider showing inline error states with clear messaging on how "
            "to fix the issue.",
            "Common UX pattern — validation feedback improves form completion rates",
        )

        if analysis.has_happy_path:
            last_step = analysis.happy_path[-1]
            add(
                "Confirmation",
                CommentType.CLARIFYING_QUESTION,
                f'After the user completes the main action ("{last_step}"), '
                "is there a clear confirmation state?\n"
                "Consider whether the user needs explicit feedback before being "
                "redirected.",
                'PRD → "Happy path" → final step',
            )

        add(
            "Success Screen",
            CommentType.CLARIFYING_QUESTION,
            "How does the user undo or go back if they made a mistake?\n"
            "Consider adding a recovery path or edit option.",
            "Error recovery — users should be able to correct mistakes",
        )

        return comments


def generate_comments(
    artifacts: ArtifactSet,
    project_name: str,
    slug: Optional[str] = None,
    generated_on: Optional[date] = None,
) -> CommentsPreview:
    """
    리뷰 코멘트 미리보기를 생성합니다.

    Args:
        artifacts: 프로젝트 아티팩트
        project_name: 문서에 표시할 프로젝트 이름
        slug: comment 명령 안내에 쓸 슬러그 (기본값: 이름에서 생성)
        generated_on: 생성 날짜 (기본값 오늘)

    Returns:
        CommentsPreview (to_markdown()으로 design-comments.preview.md 내용 생성)
    """
    context = ReviewContext(project_name=project_name, slug=slug, generated_on=generated_on)
    return CommentGenerator().generate(artifacts, context)
