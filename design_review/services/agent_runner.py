"""Agent CLI runner for headless design reviews.

에이전트 CLI를 헤드리스 모드로 실행하여 리뷰 결과물을 다시 쓰게 합니다.

실행 명령:
    agent -p --force --output-format text <prompt>
    -p: 비대화형 모드 (응답 출력 후 종료)
    --force: 확인 없이 파일 수정 허용
    --output-format text: 텍스트 출력

실행 환경:
- 에이전트 CLI가 PATH에 설치되어 있어야 함
- ThreadPoolExecutor에서 동기 subprocess 호출을 실행하고,
  그동안 이벤트 루프에서 3초마다 진행 메시지를 출력
"""

import asyncio
import logging
import shutil
import subprocess
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel

from design_review.config import get_settings
from design_review.exceptions import AgentError

logger = logging.getLogger(__name__)


# 에이전트가 일하는 동안 순서대로 보여주는 메시지 (끝까지 가면 더 출력하지 않음)
PROGRESS_MESSAGES = [
    "Understanding context...",
    "Analyzing requirements...",
    "Reviewing design patterns...",
    "Checking edge cases...",
    "Connecting the dots...",
    "Preparing review...",
    "Finalizing insights...",
]

HEARTBEAT_SECONDS = 3.0

# 에이전트 CLI는 인증이 안 되어 있으면 종료 코드 1로 끝남
AUTH_FAILURE_EXIT_CODE = 1


class AgentResult(BaseModel):
    """에이전트 실행 결과"""

    returncode: int
    stdout: str = ""
    elapsed_seconds: float


def _print_progress(message: str):
    # 현재 줄을 지우고 같은 자리에 다시 출력
    sys.stdout.write(f"\x1b[2K\r   {message}")
    sys.stdout.flush()


class AgentRunner:
    """
    에이전트 CLI 래퍼 클래스.

    Attributes:
        command: 실행할 에이전트 명령어 (기본값: 설정의 agent_command)
        timeout_minutes: 제한 시간(분)
        heartbeat_seconds: 진행 메시지 간격(초)
    """

    def __init__(
        self,
        command: Optional[str] = None,
        timeout_minutes: Optional[float] = None,
        heartbeat_seconds: float = HEARTBEAT_SECONDS,
        on_progress: Callable[[str], None] = _print_progress,
    ):
        settings = get_settings()
        self.command = command or settings.agent_command
        self.timeout_minutes = timeout_minutes if timeout_minutes is not None else settings.agent_timeout_minutes
        self.heartbeat_seconds = heartbeat_seconds
        self._on_progress = on_progress
        self._executor = ThreadPoolExecutor(max_workers=1)

    def is_available(self) -> bool:
        """에이전트 CLI가 PATH에 있는지 확인합니다."""
        return shutil.which(self.command) is not None

    def build_command(self, prompt: str) -> list[str]:
        return [self.command, "-p", "--force", "--output-format", "text", prompt]

    def _run_sync(self, prompt: str, working_dir: Path) -> subprocess.CompletedProcess:
        """에이전트 CLI를 동기로 실행합니다. (타임아웃 시 프로세스를 종료하고 TimeoutExpired)"""
        use_shell = sys.platform == "win32"
        return subprocess.run(
            self.build_command(prompt),
            cwd=str(working_dir),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=self.timeout_minutes * 60,
            shell=use_shell,
        )

    async def _heartbeat(self):
        """진행 메시지를 heartbeat_seconds마다 하나씩 출력합니다."""
        for message in PROGRESS_MESSAGES:
            await asyncio.sleep(self.heartbeat_seconds)
            self._on_progress(message)

    async def run(self, prompt: str, working_dir: Path) -> AgentResult:
        """
        에이전트를 실행하고 끝날 때까지 기다립니다.

        Args:
            prompt: 에이전트에게 전달할 프롬프트 전문
            working_dir: 에이전트 작업 디렉토리 (프로젝트 폴더)

        Returns:
            AgentResult (종료 코드 0일 때만)

        Raises:
            AgentError: CLI 미설치, 타임아웃, 비정상 종료
                details["reason"]: "not_found" | "timeout" | "exit_code" | "os_error"
        """
        if not self.is_available():
            raise AgentError(
                f"에이전트 CLI를 찾을 수 없습니다: {self.command}",
                details={"reason": "not_found", "command": self.command},
            )

        logger.info(f"[AgentRunner] 실행 시작: {self.command} (cwd={working_dir}, 제한 {self.timeout_minutes}분)")
        start_time = datetime.now()

        loop = asyncio.get_running_loop()
        heartbeat = asyncio.create_task(self._heartbeat())
        try:
            result = await loop.run_in_executor(self._executor, self._run_sync, prompt, working_dir)
        except subprocess.TimeoutExpired as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"[AgentRunner] 타임아웃! {elapsed:.1f}초")
            raise AgentError(
                f"에이전트가 제한 시간({self.timeout_minutes}분) 안에 끝나지 않았습니다",
                details={"reason": "timeout", "timeout_minutes": self.timeout_minutes},
            ) from e
        except OSError as e:
            logger.error(f"[AgentRunner] 실행 실패: {e}")
            raise AgentError(
                f"에이전트를 실행할 수 없습니다: {e}",
                details={"reason": "os_error", "command": self.command},
            ) from e
        finally:
            heartbeat.cancel()

        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[AgentRunner] 완료: {elapsed:.1f}초, returncode={result.returncode}")

        if result.returncode != 0:
            raise AgentError(
                f"에이전트가 종료 코드 {result.returncode}로 끝났습니다",
                details={
                    "reason": "exit_code",
                    "returncode": result.returncode,
                    "auth_required": result.returncode == AUTH_FAILURE_EXIT_CODE,
                    "stderr": (result.stderr or "")[-2000:],
                },
            )

        return AgentResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            elapsed_seconds=elapsed,
        )
