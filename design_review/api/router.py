"""
API 라우터 설정 파일입니다.
기능별로 나누어진 API 주소들을 하나로 모읍니다.
"""

from fastapi import APIRouter

from design_review.api.endpoints import health, projects, review

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 프로젝트 엔드포인트: 목록, 아티팩트, 리뷰 생성, 코멘트 조회 (/projects)
api_router.include_router(
    projects.router,
    prefix="/projects",
    tags=["projects"]
)

# 리뷰 미리보기 엔드포인트: 저장 없이 아티팩트만으로 리뷰 생성 (/review)
api_router.include_router(
    review.router,
    prefix="/review",
    tags=["review"]
)
