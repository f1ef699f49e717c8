"""
프로젝트 아티팩트(PRD, 리서치, Figma 링크, 분석 요구사항) 데이터 모델입니다.
"""

from enum import Enum
from pydantic import BaseModel, Field


class ArtifactKey(str, Enum):
    """프로젝트 폴더에 놓이는 아티팩트의 종류입니다."""

    PRD = "prd"
    RESEARCH = "research"
    FIGMA = "figma"
    ANALYTICS = "analytics"

    @property
    def filename(self) -> str:
        """프로젝트 폴더 안의 파일명 (예: prd.md)"""
        return f"{self.value}.md"

    @property
    def template_name(self) -> str:
        """스캐폴딩에 사용하는 템플릿 파일명 (예: prd.template.md)"""
        return f"{self.value}.template.md"


class ArtifactSet(BaseModel):
    """
    리뷰 생성의 입력이 되는 네 가지 아티팩트 원문입니다.

    파일이 없으면 빈 문자열로 채워지며, 키가 빠지는 일은 없습니다.
    """

    prd: str = Field(default="", description="PRD 마크다운")
    research: str = Field(default="", description="리서치 노트")
    figma: str = Field(default="", description="Figma 링크 및 NodeId/FileKey 메모")
    analytics: str = Field(default="", description="분석 요구사항")

    def get(self, key: ArtifactKey) -> str:
        """ArtifactKey로 원문을 조회합니다."""
        return getattr(self, key.value)

    def is_empty(self) -> bool:
        """네 아티팩트가 모두 비어 있는지 여부"""
        return not any(self.get(key).strip() for key in ArtifactKey)
