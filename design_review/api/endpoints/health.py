"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter, Depends

from design_review import __version__
from design_review.config import get_settings
from design_review.services import ProjectStore, get_project_store

router = APIRouter()


@router.get("")
async def health_check():
    """서버가 켜져 있으면 {"status": "healthy"}를 반환합니다."""
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail(store: ProjectStore = Depends(get_project_store)):
    """
    상세 상태 확인 함수.
    워크스페이스 위치와 Figma 토큰 설정 여부도 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "version": __version__,
        "config": {
            "workspace_root": str(store.workspace.root),
            "projects_dir_exists": store.workspace.has_projects_dir(),
            "figma_token_configured": bool(settings.figma_access_token),
            "agent_command": settings.agent_command,
        }
    }
