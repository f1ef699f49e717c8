"""
원본 파일(raw/) 텍스트 추출 결과 모델입니다.
"""

from pydantic import BaseModel, Field


class ExtractedText(BaseModel):
    """단일 파일에서 뽑아낸 텍스트입니다."""

    text: str = Field(..., description="추출된 텍스트 또는 안내용 플레이스홀더")
    is_placeholder: bool = Field(
        default=False,
        description="True이면 실제 내용이 아니라 수동 붙여넣기 안내문",
    )


class RawFile(BaseModel):
    """변환 컨텍스트에 들어가는 원본 파일 한 개의 정보입니다."""

    filename: str
    ext: str = Field(..., description="점(.)을 뺀 소문자 확장자 (예: pptx)")
    bytes: int = Field(..., ge=0, description="파일 크기 (바이트)")
    text: str
    is_placeholder: bool = False

    def index_line(self) -> str:
        """`## Raw Files Index` 목록의 한 줄"""
        marker = " [manual paste required]" if self.is_placeholder else ""
        return f"- {self.filename} ({self.ext}, {self.bytes} bytes){marker}"
