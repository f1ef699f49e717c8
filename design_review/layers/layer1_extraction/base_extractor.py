"""모든 원본 파일 추출기(Extractor)들이 상속받는 기본 클래스입니다.

추출기는 raw/ 폴더에 놓인 파일에서 텍스트를 뽑아 변환 컨텍스트에 넣을 수 있게 합니다.
읽을 수 없는 파일은 예외 대신 수동 붙여넣기 안내문(플레이스홀더)을 돌려줍니다.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from design_review.exceptions import ExtractionError
from design_review.models import ExtractedText

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """
    모든 추출기의 부모(Base) 클래스입니다.

    자식 클래스는 `_extract` 메서드를 구현하고, 실패 시 ExtractionError를 던지면 됩니다.
    `extract`가 그 예외를 플레이스홀더 텍스트로 바꿉니다.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """이 추출기가 처리할 수 있는 파일 확장자 목록 (예: ['.txt', '.md'])"""
        pass

    @abstractmethod
    async def _extract(self, file_path: Path) -> ExtractedText:
        """
        파일에서 실제로 텍스트를 추출하는 함수. (자식 클래스에서 반드시 구현해야 함)

        Raises:
            ExtractionError: 파일을 읽거나 해석할 수 없을 때
        """
        pass

    @staticmethod
    def _reason(error: ExtractionError) -> str:
        """예외 상세 정보에서 원인 메시지를 꺼냅니다."""
        details = error.details or {}
        return details.get("reason", error.message)

    def _error_placeholder(self, error: ExtractionError) -> str:
        """추출 실패 시 컨텍스트에 들어갈 안내문"""
        return f"[Error reading file: {self._reason(error)}]"

    async def extract(self, file_path: Path) -> ExtractedText:
        """
        파일에서 텍스트를 추출합니다. 실패해도 예외를 던지지 않습니다.

        Args:
            file_path: 파일 경로

        Returns:
            ExtractedText: 추출된 텍스트 또는 플레이스홀더
        """
        try:
            return await self._extract(file_path)
        except ExtractionError as e:
            logger.warning(f"[{type(self).__name__}] 추출 실패 ({file_path.name}): {e.message}")
            return ExtractedText(text=self._error_placeholder(e), is_placeholder=True)

    def can_extract(self, filename: str) -> bool:
        """주어진 파일명을 이 추출기가 처리할 수 있는지 확인하는 함수"""
        return Path(filename).suffix.lower() in self.supported_extensions
