"""
design-review 커스텀 예외 계층입니다.
프로젝트 저장소, 추출, 외부 연동(Figma, 에이전트)별 구조화된 에러 코드와 메시지를 제공합니다.

생성 파이프라인(layer2, layer3)은 어떤 문자열 입력에도 예외를 던지지 않으므로
이 예외들은 모두 파이프라인 바깥(파일, 네트워크, 프로세스)에서만 발생합니다.
"""

from typing import Optional, Any


class DesignReviewError(Exception):
    """design-review 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InvalidProjectNameError(DesignReviewError):
    """프로젝트 이름으로 유효한 슬러그를 만들 수 없을 때."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)


class ProjectNotFoundError(DesignReviewError):
    """projects/<slug> 폴더가 존재하지 않을 때."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PROJECT_404", details=details)


class ProjectExistsError(DesignReviewError):
    """같은 슬러그의 프로젝트가 이미 있을 때."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_PROJECT_409", details=details)


class ExtractionError(DesignReviewError):
    """Layer 1: 원본 파일 텍스트 추출 단계 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_EXTRACT_001", details=details)


class StorageError(DesignReviewError):
    """파일 저장소 관련 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)


class FigmaAPIError(DesignReviewError):
    """Figma REST API 통신 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_FIGMA_001", details=details)


class AgentError(DesignReviewError):
    """에이전트 CLI 실행 에러 (미설치, 타임아웃, 비정상 종료)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_AGENT_001", details=details)
