"""
파워포인트 파일(.pptx) 추출기입니다.
python-pptx 라이브러리를 사용하여 슬라이드 텍스트, 표, 노트 내용을 추출합니다.
"""

import logging
from pathlib import Path

from design_review.exceptions import ExtractionError
from design_review.models import ExtractedText
from ..base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


NO_TEXT_PLACEHOLDER = "[No text content found in slides]"


class PPTXExtractor(BaseExtractor):
    """프레젠테이션 파일에서 슬라이드별 텍스트를 뽑습니다."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".pptx"]

    async def _extract(self, file_path: Path) -> ExtractedText:
        """PPTX 파일을 `--- Slide N ---` 블록들로 변환합니다."""
        from pptx import Presentation

        try:
            prs = Presentation(str(file_path))
        except Exception as e:
            # python-pptx는 손상된 파일에 대해 여러 종류의 예외를 던짐
            raise ExtractionError(
                f"PPTX 파일을 열 수 없습니다: {file_path.name}",
                details={"file": str(file_path), "reason": str(e)},
            ) from e

        # 텍스트가 없는 슬라이드는 건너뛰되 번호는 원래 순서를 유지
        blocks = []
        for number, slide in enumerate(prs.slides, 1):
            slide_text = self._extract_slide_text(slide)
            if slide_text.strip():
                blocks.append(f"--- Slide {number} ---\n{slide_text}")

        logger.debug(f"[PPTXExtractor] {file_path.name}: 슬라이드 {len(prs.slides)}장 중 {len(blocks)}장 추출")

        if not blocks:
            return ExtractedText(text=NO_TEXT_PLACEHOLDER, is_placeholder=True)
        return ExtractedText(text="\n\n".join(blocks))

    def _error_placeholder(self, error: ExtractionError) -> str:
        reason = self._reason(error)
        return (
            f"[Error extracting PPTX: {reason}]\n\n"
            "Please paste the slide content here manually."
        )

    def _extract_slide_text(self, slide) -> str:
        """단일 슬라이드에서 텍스트 상자, 표, 발표자 노트를 순서대로 모읍니다."""
        parts = []

        for shape in slide.shapes:
            # 텍스트 상자 처리
            if shape.has_text_frame:
                for paragraph in shape.text_frame.paragraphs:
                    text = "".join(run.text for run in paragraph.runs).strip()
                    if text:
                        parts.append(text)

            # 표 처리
            if shape.has_table:
                parts.append(self._extract_table(shape.table))

        # 발표자 노트 추출
        if slide.has_notes_slide:
            notes_frame = slide.notes_slide.notes_text_frame
            if notes_frame is not None and notes_frame.text.strip():
                parts.append(f"[Notes]\n{notes_frame.text.strip()}")

        return "\n".join(parts)

    def _extract_table(self, table) -> str:
        """표 내용을 텍스트(파이프 | 구분)로 변환합니다."""
        rows = []
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            rows.append(" | ".join(cells))
        return "\n".join(rows)
