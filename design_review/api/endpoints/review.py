"""
리뷰 미리보기 API입니다.
파일을 읽거나 쓰지 않고, 요청 본문의 아티팩트만으로 리뷰와 코멘트를 생성합니다.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from design_review.layers.base_generator import ReviewContext
from design_review.layers.layer3_review import CommentGenerator, ReviewGenerator
from design_review.models import ArtifactSet

router = APIRouter()


class PreviewRequest(BaseModel):
    """미리보기 요청 데이터 모델"""
    project_name: str = Field(..., min_length=1)
    slug: Optional[str] = None
    generated_on: Optional[date] = None
    artifacts: ArtifactSet = Field(default_factory=ArtifactSet)


@router.post("/preview")
async def preview_review(request: PreviewRequest) -> dict:
    """순수 변환: 같은 입력이면 (날짜를 제외하고) 항상 같은 결과를 반환합니다."""
    context = ReviewContext(
        project_name=request.project_name,
        slug=request.slug,
        generated_on=request.generated_on,
    )
    review = ReviewGenerator().generate(request.artifacts, context)
    preview = CommentGenerator().generate(request.artifacts, context)
    return {
        "review": review.to_markdown(),
        "comments_preview": preview.to_markdown(),
        "comments": [comment.model_dump(mode="json") for comment in preview.comments],
    }
