"""
익명 사용 통계 서비스입니다.
명령 실행 횟수만 수집하며, 개인정보나 파일 경로, 문서 내용은 보내지 않습니다.

전송 조건:
- 설정의 telemetry_url이 비어 있지 않을 것 (기본값은 비어 있음 → 전송 안 함)
- DESIGN_REVIEW_TELEMETRY=0/false 가 아닐 것
- --no-telemetry 옵션이 없을 것

전송은 최선 노력(best effort)입니다. 실패해도 CLI 동작에는 영향이 없고 로그만 남깁니다.
"""

import json
import logging
import os
import platform
import sys
import uuid
from pathlib import Path
from typing import Optional

import httpx

from design_review import __version__
from design_review.config import Settings, get_settings

logger = logging.getLogger(__name__)


CONFIG_DIRNAME = "design-review"
CONFIG_FILENAME = "telemetry.json"


def config_dir() -> Path:
    """플랫폼별 설정 폴더 (Windows: %APPDATA%, 그 외: ~/.config)"""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / CONFIG_DIRNAME
    return Path.home() / ".config" / CONFIG_DIRNAME


class Telemetry:
    """
    익명 이벤트 전송기.

    Attributes:
        enabled: 전송 여부 (설정, 옵트아웃, URL 모두 반영)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        opt_out: bool = False,
        config_path: Optional[Path] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._config_path = config_path or (config_dir() / CONFIG_FILENAME)
        self._transport = transport
        self.enabled = (
            self._settings.telemetry_enabled
            and not opt_out
            and bool(self._settings.telemetry_url)
        )

    # ==================== 익명 ID ====================

    def _read_config(self) -> dict:
        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.debug(f"[Telemetry] 설정 읽기 실패 {self._config_path}: {e}")
            return {}

    def _write_config(self, config: dict):
        try:
            self._config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_path, "w", encoding="utf-8") as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            logger.debug(f"[Telemetry] 설정 저장 실패 {self._config_path}: {e}")

    def anon_id(self) -> str:
        """로컬에 저장된 익명 ID를 반환하고, 없으면 새로 만들어 저장합니다."""
        config = self._read_config()
        if config.get("anon_id"):
            return str(config["anon_id"])

        anon_id = str(uuid.uuid4())
        config["anon_id"] = anon_id
        self._write_config(config)
        return anon_id

    # ==================== 이벤트 전송 ====================

    @staticmethod
    def common_props() -> dict:
        return {
            "version": __version__,
            "python": platform.python_version(),
            "platform": sys.platform,
        }

    async def track(self, event: str, props: Optional[dict] = None) -> bool:
        """
        이벤트를 전송합니다. 예외를 던지지 않습니다.

        Returns:
            실제로 전송에 성공했는지 여부
        """
        if not self.enabled:
            return False

        payload = {
            "anon_id": self.anon_id(),
            "event": event,
            "props": {**self.common_props(), **(props or {})},
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.telemetry_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self._settings.telemetry_url, json=payload)
            logger.debug(f"[Telemetry] {event} → HTTP {response.status_code}")
            return response.is_success
        except httpx.HTTPError as e:
            logger.debug(f"[Telemetry] {event} 전송 실패: {e}")
            return False
