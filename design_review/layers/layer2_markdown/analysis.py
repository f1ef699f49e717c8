"""
PRD 분석 결과 모델입니다.

리뷰 생성기와 코멘트 생성기가 같은 추출 결과를 쓰도록, 생성 호출마다 한 번만 계산합니다.
"""

from pydantic import BaseModel, Field

from .markdown import extract_headings, extract_bullets, extract_section
from .screens import infer_screens


# PRD에서 찾는 섹션 이름 (제목에 포함되면 매칭, 대소문자 무시)
HAPPY_PATH_SECTION = "happy path"
EDGE_CASE_SECTION = "edge case"
OVERVIEW_SECTION = "overview"
PROBLEM_SECTION = "problem"
GOALS_SECTION = "goals"


class PRDAnalysis(BaseModel):
    """PRD 마크다운에서 뽑아낸 리뷰 재료"""

    headings: list[str] = Field(default_factory=list)
    happy_path: list[str] = Field(default_factory=list, description="Happy path 단계")
    edge_cases: list[str] = Field(default_factory=list, description="Edge case 항목")
    screens: list[str] = Field(..., min_length=1, description="추론된 화면 목록")
    overview: str = ""
    problem: str = ""
    goals: list[str] = Field(default_factory=list)

    @classmethod
    def from_markdown(cls, prd: str) -> "PRDAnalysis":
        """PRD 원문을 분석합니다. 빈 문자열도 허용됩니다."""
        headings = extract_headings(prd)
        return cls(
            headings=headings,
            happy_path=extract_bullets(prd, HAPPY_PATH_SECTION),
            edge_cases=extract_bullets(prd, EDGE_CASE_SECTION),
            screens=infer_screens(headings),
            overview=extract_section(prd, OVERVIEW_SECTION),
            problem=extract_section(prd, PROBLEM_SECTION),
            goals=extract_bullets(prd, GOALS_SECTION),
        )

    @property
    def has_happy_path(self) -> bool:
        return bool(self.happy_path)

    @property
    def has_edge_cases(self) -> bool:
        return bool(self.edge_cases)
