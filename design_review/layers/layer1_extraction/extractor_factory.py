"""
추출기 팩토리(Extractor Factory) 모듈입니다.
raw/ 폴더에 놓인 파일의 확장자에 맞는 추출기를 찾아서 텍스트를 뽑아냅니다.
"""

import logging
from pathlib import Path
from typing import Dict, Type, Optional

from design_review.models import ExtractedText, RawFile
from .base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class ExtractorFactory:
    """
    적절한 추출기를 생성하는 공장 클래스입니다.
    """

    def __init__(self):
        self._extractors: Dict[str, BaseExtractor] = {}
        self._extractor_classes: Dict[str, Type[BaseExtractor]] = {}

        # 사용 가능한 추출기 등록
        self._register_extractors()

    def _register_extractors(self):
        """확장자별 추출기 클래스를 등록하는 내부 함수"""
        from .extractors.text_extractor import TextExtractor
        from .extractors.pptx_extractor import PPTXExtractor
        from .extractors.pdf_extractor import PDFExtractor
        from .extractors.docx_extractor import DOCXExtractor

        self._extractor_classes = {
            ".txt": TextExtractor,   # 텍스트
            ".md": TextExtractor,    # 마크다운
            ".pptx": PPTXExtractor,  # 파워포인트
            ".pdf": PDFExtractor,    # PDF (텍스트 레이어만)
            ".docx": DOCXExtractor,  # 워드
        }

    @property
    def supported_extensions(self) -> list[str]:
        """지원하는 확장자 목록 (점 포함)"""
        return list(self._extractor_classes)

    def is_supported(self, filename: str) -> bool:
        return Path(filename).suffix.lower() in self._extractor_classes

    def get_extractor(self, extension: str) -> Optional[BaseExtractor]:
        """
        확장자에 맞는 추출기 인스턴스를 반환합니다.
        이미 생성된 인스턴스가 있으면 재사용합니다. 지원하지 않으면 None.
        """
        extension = extension.lower()
        if extension not in self._extractors:
            extractor_class = self._extractor_classes.get(extension)
            if not extractor_class:
                return None
            self._extractors[extension] = extractor_class()

        return self._extractors[extension]

    async def extract_text(self, file_path: Path) -> ExtractedText:
        """
        파일에서 텍스트를 추출합니다.
        지원하지 않는 형식이면 `[Unsupported file type: .ext]` 플레이스홀더를 반환합니다.
        """
        extension = file_path.suffix.lower()
        extractor = self.get_extractor(extension)
        if extractor is None:
            return ExtractedText(text=f"[Unsupported file type: {extension}]", is_placeholder=True)
        return await extractor.extract(file_path)

    async def extract_file(self, file_path: Path) -> RawFile:
        """파일 하나를 변환 컨텍스트용 RawFile로 만듭니다."""
        extracted = await self.extract_text(file_path)
        try:
            size = file_path.stat().st_size
        except OSError:
            size = 0
        return RawFile(
            filename=file_path.name,
            ext=file_path.suffix.lower().lstrip("."),
            bytes=size,
            text=extracted.text,
            is_placeholder=extracted.is_placeholder,
        )

    async def extract_directory(self, raw_dir: Path) -> list[RawFile]:
        """
        raw/ 폴더에서 지원하는 파일만 이름순으로 추출합니다.
        숨김 파일과 하위 폴더는 건너뜁니다.
        """
        if not raw_dir.is_dir():
            return []

        files = sorted(
            path for path in raw_dir.iterdir()
            if path.is_file() and not path.name.startswith(".") and self.is_supported(path.name)
        )

        results = []
        for path in files:
            logger.info(f"[ExtractorFactory] 추출 중: {path.name}")
            results.append(await self.extract_file(path))
        return results
