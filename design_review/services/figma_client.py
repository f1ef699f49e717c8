"""Figma REST API client for posting review comments.

코멘트 게시 API만 사용합니다:
    POST {figma_api_base}/files/{file_key}/comments

인증은 개인 액세스 토큰(X-Figma-Token 헤더)으로 합니다.
"""

import logging
from typing import Any, Optional

import httpx

from design_review.config import get_settings
from design_review.exceptions import FigmaAPIError

logger = logging.getLogger(__name__)


class FigmaClient:
    """
    Figma 코멘트 API 비동기 클라이언트.

    async with 블록 안에서 사용합니다:

        async with FigmaClient(token) as client:
            await client.post_comment(file_key, message, node_id)

    Attributes:
        _token: Figma 개인 액세스 토큰
        _base_url: API 기본 주소
        _timeout: 요청 타임아웃(초)
    """

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        if not token:
            raise FigmaAPIError(
                "FIGMA_ACCESS_TOKEN이 설정되지 않았습니다",
                details={"setting": "FIGMA_ACCESS_TOKEN"},
            )
        self._token = token
        self._base_url = (base_url or settings.figma_api_base).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.figma_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "FigmaClient":
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "X-Figma-Token": self._token,
                "Content-Type": "application/json",
            },
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def build_comment_body(message: str, node_id: Optional[str] = None) -> dict:
        """
        코멘트 요청 본문을 만듭니다.
        node_id가 있으면 해당 노드의 (0, 0) 위치에 코멘트를 고정합니다.
        """
        body: dict[str, Any] = {"message": message}
        if node_id:
            body["client_meta"] = {
                "node_id": node_id,
                "node_offset": {"x": 0, "y": 0},
            }
        return body

    async def post_comment(
        self,
        file_key: str,
        message: str,
        node_id: Optional[str] = None,
    ) -> dict:
        """
        파일에 코멘트를 게시합니다.

        Returns:
            Figma API 응답 JSON (게시된 코멘트)

        Raises:
            FigmaAPIError: 네트워크 오류 또는 2xx가 아닌 응답
        """
        assert self._client is not None, "Use as async context manager."
        path = f"/files/{file_key}/comments"

        try:
            response = await self._client.post(path, json=self.build_comment_body(message, node_id))
        except httpx.RequestError as e:
            logger.warning(f"[FigmaClient] 요청 실패 {path}: {e}")
            raise FigmaAPIError(
                f"Figma API에 연결할 수 없습니다: {e}",
                details={"file_key": file_key, "node_id": node_id},
            ) from e

        if response.is_error:
            message_text = self._error_message(response)
            logger.warning(f"[FigmaClient] HTTP {response.status_code} {path}: {message_text}")
            raise FigmaAPIError(
                message_text,
                details={
                    "file_key": file_key,
                    "node_id": node_id,
                    "status_code": response.status_code,
                },
            )

        logger.info(f"[FigmaClient] 코멘트 게시 완료: {file_key} (node={node_id or 'file'})")
        try:
            return response.json()
        except ValueError:
            return {}

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """응답 본문의 message 필드, 없으면 `HTTP <status>`"""
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return f"HTTP {response.status_code}"
