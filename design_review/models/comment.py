"""
디자인 리뷰 코멘트 데이터 모델입니다.
생성기가 만든 코멘트와, 미리보기 파일에서 다시 읽어들인 코멘트를 구분합니다.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# 한 번의 생성에서 만들 수 있는 최대 코멘트 수
MAX_COMMENTS = 7


class CommentType(str, Enum):
    """
    코멘트 분류입니다.

    값은 미리보기 파일의 `Type:` 블록에 그대로 기록됩니다.
    """

    MISSING_STATE = "Missing State"
    FLOW_MISMATCH = "Flow Mismatch"
    CLARIFYING_QUESTION = "Clarifying Question"
    EDGE_CASE = "Edge Case"
    VALIDATION = "Validation"


class ReviewComment(BaseModel):
    """생성기가 만든 하나의 리뷰 코멘트입니다."""

    page: str = Field(..., description="대상 화면(페이지) 이름")
    frame: Optional[str] = Field(default=None, description="대상 프레임 이름")
    node_id: Optional[str] = Field(default=None, description="코멘트를 고정할 Figma 노드 ID (예: 12:345)")
    type: CommentType
    message: str = Field(..., min_length=1, description="코멘트 본문 (여러 줄 가능)")
    why: str = Field(..., description="근거 (PRD 섹션 등)")

    def to_markdown(self, number: int) -> str:
        """`## Comment N` 블록으로 변환합니다. 파서가 같은 형식을 다시 읽습니다."""
        lines = [
            f"## Comment {number}",
            "Target:",
            f"  page: {self.page}",
            f"  frame: {self.frame or '(optional)'}",
        ]
        if self.node_id:
            lines.append(f"  nodeId: {self.node_id}")
        lines.extend([
            "",
            "Type:",
            f"  {self.type.value}",
            "",
            "Message:",
            self.message,
            "",
            "Why:",
            self.why,
            "",
            "---",
            "",
            "",
        ])
        return "\n".join(lines)


class ParsedComment(BaseModel):
    """
    미리보기 파일에서 읽어들인 코멘트입니다.

    파일은 사람이 고치거나 에이전트가 다시 쓸 수 있으므로 type은 자유 텍스트입니다.
    """

    page: Optional[str] = None
    frame: Optional[str] = None
    node_id: Optional[str] = None
    type: Optional[str] = None
    message: str
    why: Optional[str] = None

    @property
    def target_label(self) -> str:
        """드라이런 출력용 대상 표시 (페이지 → 프레임)"""
        if self.frame:
            return f"{self.page} → {self.frame}"
        return self.page or "(unknown page)"

    @property
    def first_line(self) -> str:
        """메시지의 첫 줄"""
        return self.message.split("\n")[0]
