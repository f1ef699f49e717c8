"""
텍스트 파일(.txt)과 마크다운 파일(.md) 추출기입니다.
"""

from pathlib import Path

from design_review.exceptions import ExtractionError
from design_review.models import ExtractedText
from ..base_extractor import BaseExtractor


class TextExtractor(BaseExtractor):
    """일반 텍스트 및 마크다운 문서를 그대로 읽습니다."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".txt", ".md"]

    async def _extract(self, file_path: Path) -> ExtractedText:
        """텍스트 파일을 UTF-8로 읽습니다."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(
                f"텍스트 파일을 읽을 수 없습니다: {file_path.name}",
                details={"file": str(file_path), "reason": str(e)},
            ) from e

        return ExtractedText(text=text)
