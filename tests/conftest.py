"""공유 pytest fixture 모음."""

import pytest
from datetime import date, datetime
from pathlib import Path

from design_review.config import Settings, get_settings
from design_review.models import ArtifactSet
from design_review.services import ProjectStore, Telemetry, Workspace, get_project_store


SIGNUP_PRD = """---
Project: Sign Up Flow
Created: 2024-01-01T00:00:00
---

# Product Requirements Document

## Overview
Let new users create an account in under a minute.

## Problem statement
Users drop off during the current multi-step sign-up.

## Goals
- Reduce sign-up time
- Increase completion rate

## Happy path
1. Sign up
2. Verify email
3. See dashboard

## Sign Up Screen

## Dashboard View
"""

FIGMA_URL = "https://www.figma.com/design/ABC123/My-File?node-id=12-345"


@pytest.fixture(autouse=True)
def clear_caches(monkeypatch):
    """테스트마다 설정/저장소 캐시와 환경 변수를 초기화합니다."""
    for name in (
        "FIGMA_ACCESS_TOKEN",
        "DESIGN_REVIEW_WORKSPACE",
        "DESIGN_REVIEW_TELEMETRY",
        "DESIGN_REVIEW_TELEMETRY_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_project_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_project_store.cache_clear()


@pytest.fixture
def fixed_date():
    return date(2024, 1, 15)


@pytest.fixture
def fixed_datetime():
    return datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def signup_prd():
    return SIGNUP_PRD


@pytest.fixture
def signup_artifacts():
    """Happy path가 있고 Edge case 섹션이 없는 아티팩트."""
    return ArtifactSet(
        prd=SIGNUP_PRD,
        research="# Research\n\n- Users abandon long forms\n",
        figma=f"# Figma\n\n{FIGMA_URL}\n",
        analytics="# Analytics\n\n- signup_started\n- signup_completed\n",
    )


@pytest.fixture
def edge_case_artifacts():
    """Edge case 두 개만 있는 아티팩트."""
    return ArtifactSet(
        prd="## Edge cases\n- User has no network\n- Duplicate signup attempt\n",
    )


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """projects/ 폴더가 있는 임시 워크스페이스."""
    ws = Workspace(tmp_path)
    ws.ensure_projects_dir()
    return ws


@pytest.fixture
def store(workspace: Workspace) -> ProjectStore:
    return ProjectStore(workspace)


@pytest.fixture
def signup_project(store: ProjectStore, signup_artifacts: ArtifactSet) -> str:
    """템플릿으로 만든 뒤 sign-up 아티팩트로 덮어쓴 프로젝트."""
    slug = store.create("Sign Up Flow", created_at=datetime(2024, 1, 1))
    project_dir = store.project_path(slug)
    (project_dir / "prd.md").write_text(signup_artifacts.prd, encoding="utf-8")
    (project_dir / "research.md").write_text(signup_artifacts.research, encoding="utf-8")
    (project_dir / "figma.md").write_text(signup_artifacts.figma, encoding="utf-8")
    (project_dir / "analytics.md").write_text(signup_artifacts.analytics, encoding="utf-8")
    return slug


@pytest.fixture
def no_telemetry(tmp_path: Path) -> Telemetry:
    """전송하지 않는 Telemetry (설정 파일도 임시 폴더)."""
    return Telemetry(Settings(), opt_out=True, config_path=tmp_path / "telemetry.json")
