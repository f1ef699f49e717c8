"""
PDF 파일(.pdf) 추출기입니다.
PyPDF2로 텍스트 레이어를 읽고, 텍스트가 없으면(스캔본 등) 수동 붙여넣기 안내문을 돌려줍니다.
OCR은 하지 않습니다.
"""

import logging
from pathlib import Path

from design_review.exceptions import ExtractionError
from design_review.models import ExtractedText
from design_review.utils.text import format_bytes
from ..base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class PDFExtractor(BaseExtractor):
    """PDF 텍스트 레이어 추출기"""

    @property
    def supported_extensions(self) -> list[str]:
        return [".pdf"]

    async def _extract(self, file_path: Path) -> ExtractedText:
        from PyPDF2 import PdfReader
        from PyPDF2.errors import PdfReadError

        try:
            size = file_path.stat().st_size
        except OSError as e:
            raise ExtractionError(
                f"PDF 파일에 접근할 수 없습니다: {file_path.name}",
                details={"file": str(file_path), "reason": str(e)},
            ) from e

        try:
            reader = PdfReader(str(file_path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except (PdfReadError, OSError, ValueError) as e:
            logger.warning(f"[PDFExtractor] PDF 해석 실패 ({file_path.name}): {e}")
            return self._manual_paste_placeholder(size)

        text = "\n\n".join(page.strip() for page in pages if page.strip())
        if not text:
            logger.info(f"[PDFExtractor] {file_path.name}: 텍스트 레이어 없음, 수동 붙여넣기 필요")
            return self._manual_paste_placeholder(size)

        return ExtractedText(text=text)

    @staticmethod
    def _manual_paste_placeholder(size: int) -> ExtractedText:
        return ExtractedText(
            text=(
                "[PDF text could not be extracted]\n"
                "\n"
                f"This PDF file is {format_bytes(size)}. \n"
                "\n"
                "To include this content:\n"
                "1. Open the PDF in a viewer\n"
                "2. Select all text (Cmd+A / Ctrl+A)\n"
                "3. Copy and paste the text below this line\n"
                "\n"
                "---\n"
                "PASTE PDF TEXT HERE\n"
                "---"
            ),
            is_placeholder=True,
        )
