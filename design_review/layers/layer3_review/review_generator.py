"""Review generator - converts project artifacts to a design review checklist."""

import logging
from datetime import date
from typing import Optional

from design_review.models import ArtifactSet, DesignReview
from design_review.layers.base_generator import BaseGenerator, ReviewContext
from design_review.layers.layer2_markdown import PRDAnalysis

logger = logging.getLogger(__name__)


class ReviewGenerator(BaseGenerator[DesignReview]):
    """PRD를 분석해 체크리스트 형태의 디자인 리뷰(design-review.md)를 만듭니다."""

    _generator_name = "ReviewGenerator"

    def _do_generate(
        self,
        artifacts: ArtifactSet,
        context: ReviewContext,
    ) -> DesignReview:
        analysis = PRDAnalysis.from_markdown(artifacts.prd)
        logger.debug(
            f"[{self._generator_name}] happy path {len(analysis.happy_path)}단계, "
            f"edge case {len(analysis.edge_cases)}개, 화면 {len(analysis.screens)}개"
        )

        return DesignReview(
            project_name=context.project_name,
            generated_on=context.date_label,
            happy_path=analysis.happy_path,
            screens=analysis.screens,
            edge_cases=analysis.edge_cases,
            overview=analysis.overview,
            problem=analysis.problem,
            goals=analysis.goals,
        )


def generate_review(
    artifacts: ArtifactSet,
    project_name: str,
    generated_on: Optional[date] = None,
) -> str:
    """
    디자인 리뷰 마크다운을 생성합니다.

    Args:
        artifacts: 프로젝트 아티팩트
        project_name: 문서 제목에 쓸 프로젝트 이름
        generated_on: 생성 날짜 (테스트에서 고정할 때 사용, 기본값 오늘)

    Returns:
        design-review.md 내용
    """
    context = ReviewContext(project_name=project_name, generated_on=generated_on)
    return ReviewGenerator().generate(artifacts, context).to_markdown()
