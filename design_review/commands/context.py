"""명령 실행에 공통으로 필요한 객체를 묶어두는 컨텍스트입니다."""

import logging
from typing import Callable, Optional

from design_review.config import Settings, get_settings
from design_review.services import ProjectStore, ProjectWorkflow, Telemetry, Workspace

logger = logging.getLogger(__name__)


class CommandContext:
    """
    워크스페이스는 프로세스마다 한 번만 찾고, 이후 모든 명령이 같은 저장소를 씁니다.

    Attributes:
        workspace: 찾은 워크스페이스
        store: 프로젝트 저장소
        workflow: 변환/리뷰 오케스트레이터
        telemetry: 익명 사용 통계 전송기
        input_fn: 대화형 입력 함수 (테스트에서 교체)
    """

    def __init__(
        self,
        workspace: Workspace,
        settings: Optional[Settings] = None,
        telemetry: Optional[Telemetry] = None,
        input_fn: Callable[[str], str] = input,
    ):
        self.settings = settings or get_settings()
        self.workspace = workspace
        self.store = ProjectStore(workspace)
        self.workflow = ProjectWorkflow(self.store)
        self.telemetry = telemetry or Telemetry(self.settings)
        self.input_fn = input_fn

    @classmethod
    def create(cls, no_telemetry: bool = False) -> "CommandContext":
        settings = get_settings()
        workspace = Workspace.discover(settings=settings)
        logger.info(f"[CLI] 워크스페이스: {workspace.root}")
        return cls(
            workspace=workspace,
            settings=settings,
            telemetry=Telemetry(settings, opt_out=no_telemetry),
        )

    async def track(self, event: str, props: Optional[dict] = None):
        await self.telemetry.track(event, props)
