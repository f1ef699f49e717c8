"""doctor 명령 - 실행 환경과 워크스페이스 구성을 점검합니다."""

import argparse
import platform
import sys
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel

from design_review.models import ArtifactKey
from design_review.services import AgentRunner
from design_review.templates import template_path
from .context import CommandContext


MIN_PYTHON = (3, 11)


class CheckResult(BaseModel):
    """점검 항목 하나의 결과"""

    name: str
    ok: bool
    message: str
    fix: Optional[str] = None
    # ok가 False일 때 --fix로 고칠 수 있는 경우만 있음
    action: Optional[Callable[[], str]] = None
    informational: bool = False


def add_parser(subparsers):
    parser = subparsers.add_parser(
        "doctor",
        help="Check system requirements and configuration",
        description="Check the Python version, workspace, templates and agent CLI.",
    )
    parser.add_argument("--fix", action="store_true", help="Auto-fix issues where possible")
    parser.set_defaults(handler=run)


def check_python_version() -> CheckResult:
    version = platform.python_version()
    ok = sys.version_info[:2] >= MIN_PYTHON
    required = ".".join(str(part) for part in MIN_PYTHON)
    return CheckResult(
        name="Python version",
        ok=ok,
        message=f"Python {version}" if ok else f"Python {version} (requires >= {required})",
        fix=None if ok else f"Install Python {required}+ from https://www.python.org",
    )


def check_workspace_root(ctx: CommandContext) -> CheckResult:
    suffix = " (current directory)" if ctx.workspace.root == Path.cwd().resolve() else ""
    return CheckResult(name="Workspace root", ok=True, message=f"Workspace: {ctx.workspace.root}{suffix}")


def check_projects_folder(ctx: CommandContext) -> CheckResult:
    if ctx.workspace.has_projects_dir():
        return CheckResult(name="Projects folder", ok=True, message="projects/ folder exists")

    def create_projects_dir() -> str:
        ctx.workspace.ensure_projects_dir()
        return "Created projects/ folder"

    return CheckResult(
        name="Projects folder",
        ok=False,
        message="projects/ folder not found",
        fix="Run: mkdir projects",
        action=create_projects_dir,
    )


def check_templates() -> CheckResult:
    missing = [key.template_name for key in ArtifactKey if not template_path(key.template_name).is_file()]
    if not missing:
        return CheckResult(name="Templates", ok=True, message="Templates accessible")
    return CheckResult(
        name="Templates",
        ok=False,
        message=f"Templates not found: {', '.join(missing)}",
        fix="Reinstall design-review: pip install --force-reinstall design-review",
    )


def check_agent_cli(ctx: CommandContext) -> CheckResult:
    command = ctx.settings.agent_command
    available = AgentRunner(command=command).is_available()
    return CheckResult(
        name="Agent CLI",
        ok=True,
        informational=not available,
        message=f"Agent CLI available ({command})" if available else "Agent CLI not found (optional)",
        fix=None if available else "Run: curl https://cursor.com/install -fsS | bash",
    )


async def run(args: argparse.Namespace, ctx: CommandContext) -> int:
    await ctx.track("cmd_doctor", {"fix": args.fix})

    print("")
    print("🩺 Design Review Doctor")
    print("")

    results = [
        check_python_version(),
        check_workspace_root(ctx),
        check_projects_folder(ctx),
        check_templates(),
        check_agent_cli(ctx),
    ]

    all_ok = True
    fixable = []
    for result in results:
        icon = "ℹ️" if result.informational else ("✅" if result.ok else "❌")
        print(f"  {icon} {result.name}: {result.message}")
        if result.informational and result.fix:
            print(f"     💡 {result.fix}")
        if not result.ok:
            all_ok = False
            if result.fix:
                print(f"     💡 {result.fix}")
            if result.action:
                fixable.append(result)
    print("")

    if args.fix and fixable:
        print("🔧 Auto-fixing issues...")
        for result in fixable:
            print(f"   Fixing: {result.name}")
            print(f"     → {result.action()}")
        print("")
        # 고친 뒤 남은 문제가 있는지 다시 판단
        all_ok = all(r.ok or r.action is not None for r in results)

    if all_ok:
        print("All checks passed! design-review is ready to use.")
        print("")
        print("Quick start:")
        print('  design-review new "My Project"')
        print("  design-review review my-project --agent")
        print("")
        return 0

    print("Some checks failed. Fix the issues above and run again.")
    if fixable and not args.fix:
        print("")
        print("Run with --fix to auto-fix some issues:")
        print("  design-review doctor --fix")
    print("")
    return 1
