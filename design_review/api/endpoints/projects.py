"""
프로젝트 API입니다.
projects/ 폴더의 프로젝트를 조회하고, 리뷰를 생성하고, 코멘트 미리보기를 읽어옵니다.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from design_review.services import ProjectStore, ProjectWorkflow, get_project_store

router = APIRouter()


class ReviewRequest(BaseModel):
    """리뷰 생성 요청 (날짜를 고정하고 싶을 때만 사용)"""
    generated_on: Optional[date] = None


@router.get("")
async def list_projects(store: ProjectStore = Depends(get_project_store)) -> dict:
    """프로젝트 슬러그 목록 (이름순)"""
    projects = store.list_projects()
    return {"projects": projects, "total": len(projects)}


@router.get("/{slug}/artifacts")
async def get_artifacts(slug: str, store: ProjectStore = Depends(get_project_store)) -> dict:
    """프로젝트의 네 아티팩트 원문. 없는 파일은 빈 문자열입니다."""
    artifacts = store.read_artifacts(slug)
    return {
        "slug": slug,
        "project_name": store.project_name(slug, artifacts),
        "artifacts": artifacts.model_dump(),
    }


@router.post("/{slug}/review")
async def create_review(
    slug: str,
    request: Optional[ReviewRequest] = None,
    store: ProjectStore = Depends(get_project_store),
) -> dict:
    """
    리뷰 문서, 코멘트 미리보기, 에이전트용 프롬프트를 생성하여 프로젝트 폴더에 씁니다.
    CLI의 `design-review review <slug>`와 같은 결과물을 만듭니다.
    """
    generated_on = request.generated_on if request else None
    result = ProjectWorkflow(store).review(slug, generated_on=generated_on)
    return {
        "slug": result.slug,
        "project_name": result.project_name,
        "comment_count": result.comment_count,
        "artifacts_empty": result.artifacts_empty,
        "review": result.review_markdown,
        "comments_preview": result.comments_markdown,
    }


@router.get("/{slug}/comments")
async def get_comments(slug: str, store: ProjectStore = Depends(get_project_store)) -> dict:
    """
    코멘트 미리보기 파일을 파싱한 결과.
    미리보기가 아직 없으면 빈 목록과 preview_found=False를 반환합니다.
    """
    batch = ProjectWorkflow(store).load_comments(slug)
    return {
        "slug": slug,
        "file_key": batch.file_key,
        "preview_found": batch.preview_found,
        "comments": [comment.model_dump() for comment in batch.comments],
    }
