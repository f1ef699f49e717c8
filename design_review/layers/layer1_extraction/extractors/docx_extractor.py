"""
Word 문서(.docx) 추출기입니다.
python-docx를 사용하여 문단과 표 내용을 추출합니다.
"""

from pathlib import Path

from design_review.exceptions import ExtractionError
from design_review.models import ExtractedText
from ..base_extractor import BaseExtractor


class DOCXExtractor(BaseExtractor):
    """Word 문서 추출기"""

    @property
    def supported_extensions(self) -> list[str]:
        return [".docx"]

    async def _extract(self, file_path: Path) -> ExtractedText:
        """python-docx를 사용하여 Word 문서를 추출합니다."""
        from docx import Document

        try:
            doc = Document(str(file_path))
        except Exception as e:
            # 손상된 zip, 잘못된 XML 등 python-docx가 던지는 예외를 통일
            raise ExtractionError(
                f"Word 문서를 열 수 없습니다: {file_path.name}",
                details={"file": str(file_path), "reason": str(e)},
            ) from e

        # 문단 추출
        paragraphs = [para.text for para in doc.paragraphs if para.text.strip()]

        # 표 내용 추출
        tables_text = []
        for table in doc.tables:
            table_rows = []
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                table_rows.append(" | ".join(cells))
            tables_text.append("\n".join(table_rows))

        all_text = "\n\n".join(paragraphs)
        if tables_text:
            all_text += "\n\n" + "\n\n".join(tables_text)

        if not all_text.strip():
            return ExtractedText(text="[No text content found in document]", is_placeholder=True)
        return ExtractedText(text=all_text.strip())
