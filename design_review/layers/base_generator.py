"""Base generator class for review document generators.

이 모듈은 리뷰 문서 생성기와 코멘트 생성기가 공통으로 사용하는
기본 기능을 제공하는 추상 베이스 클래스를 정의합니다.

주요 기능:
- 템플릿 메서드 패턴을 통한 일관된 생성 흐름
- 생성 컨텍스트(프로젝트 이름, 생성 날짜) 표준화
- 로깅 및 소요 시간 측정

생성기는 순수 함수처럼 동작합니다. 외부 호출이 없으며
같은 입력과 같은 날짜에 대해 항상 같은 결과를 돌려줍니다.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import TypeVar, Generic, Optional

from pydantic import BaseModel, Field

from design_review.models import ArtifactSet
from design_review.utils.slugify import slugify

# 제네릭 타입 변수
OutputT = TypeVar('OutputT')    # 출력 문서 타입 (DesignReview 등)

logger = logging.getLogger(__name__)


class ReviewContext(BaseModel):
    """리뷰 생성 컨텍스트"""

    project_name: str = Field(..., description="문서 제목에 들어가는 프로젝트 이름")
    slug: Optional[str] = Field(default=None, description="프로젝트 슬러그 (없으면 이름에서 생성)")
    generated_on: Optional[date] = Field(default=None, description="생성 날짜 (없으면 오늘)")

    @property
    def date_label(self) -> str:
        """YYYY-MM-DD 형식의 생성 날짜"""
        return (self.generated_on or date.today()).isoformat()

    @property
    def slug_label(self) -> str:
        return self.slug or slugify(self.project_name)


class BaseGenerator(ABC, Generic[OutputT]):
    """
    리뷰 생성기 추상 베이스 클래스.

    Template Method 패턴을 사용하여 일관된 생성 흐름을 보장합니다:
    1. 시작 로깅
    2. 문서 생성 (서브클래스에서 구현)
    3. 완료 로깅

    Attributes:
        _generator_name: 로깅에 사용되는 생성기 이름

    Example:
        class MyGenerator(BaseGenerator[MyOutput]):
            _generator_name = "MyGenerator"

            def _do_generate(self, artifacts, context):
                return MyOutput(...)
    """

    # 서브클래스에서 오버라이드해야 하는 클래스 속성
    _generator_name: str = "BaseGenerator"

    def generate(
        self,
        artifacts: ArtifactSet,
        context: ReviewContext,
    ) -> OutputT:
        """
        문서 생성 템플릿 메서드.

        서브클래스는 이 메서드를 직접 오버라이드하기보다
        _do_generate()를 구현해야 합니다.

        Args:
            artifacts: 프로젝트 아티팩트 (PRD, 리서치, Figma, 분석)
            context: 생성 컨텍스트

        Returns:
            생성된 출력 문서
        """
        logger.info(f"[{self._generator_name}] 생성 시작: {context.project_name}")
        start_time = datetime.now()

        try:
            result = self._do_generate(artifacts, context)

            elapsed = (datetime.now() - start_time).total_seconds()
            logger.info(f"[{self._generator_name}] 생성 완료: {elapsed:.3f}초")

            return result

        except Exception as e:
            elapsed = (datetime.now() - start_time).total_seconds()
            logger.error(f"[{self._generator_name}] 생성 실패 ({elapsed:.3f}초): {e}")
            raise

    @abstractmethod
    def _do_generate(
        self,
        artifacts: ArtifactSet,
        context: ReviewContext,
    ) -> OutputT:
        """
        실제 문서 생성 로직 (서브클래스에서 구현).

        Args:
            artifacts: 프로젝트 아티팩트
            context: 생성 컨텍스트

        Returns:
            생성된 출력 문서
        """
        pass
