from typing import Optional
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.
    """

    # Figma API 설정: 코멘트 게시에 사용하는 토큰과 주소
    figma_access_token: str = ""
    figma_api_base: str = "https://api.figma.com/v1"
    figma_timeout_seconds: float = 15.0

    # 에이전트 CLI 설정: 헤드리스 모드로 실행할 명령어와 제한 시간
    agent_command: str = "agent"
    agent_timeout_minutes: int = 10

    # 워크스페이스 루트를 직접 지정하고 싶을 때 사용 (비어 있으면 자동 탐색)
    workspace_root: Optional[str] = Field(default=None, validation_alias="DESIGN_REVIEW_WORKSPACE")

    # 익명 사용 통계: URL이 비어 있으면 아무것도 전송하지 않음
    telemetry_enabled: bool = Field(default=True, validation_alias="DESIGN_REVIEW_TELEMETRY")
    telemetry_url: str = Field(default="", validation_alias="DESIGN_REVIEW_TELEMETRY_URL")
    telemetry_timeout_seconds: float = 2.0

    # 서버 설정: serve 명령으로 API를 띄울 때의 주소와 포트
    host: str = "127.0.0.1"
    port: int = 8000
    allowed_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # .env에 다른 도구의 변수가 섞여 있어도 무시
        populate_by_name = True


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
