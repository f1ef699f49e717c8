"""
review 명령 - 디자인 리뷰와 코멘트 미리보기를 생성합니다.

1. 결정적(deterministic) 리뷰 문서와 코멘트 미리보기를 씁니다.
2. 에이전트용 리뷰 프롬프트/컨텍스트를 prompts/에 씁니다.
3. --agent가 있으면 에이전트 CLI를 실행해 결과물을 다시 쓰게 합니다. (단일 프로젝트만)
"""

import argparse
import logging
import sys
from typing import Optional

from design_review.exceptions import AgentError, DesignReviewError
from design_review.layers.layer5_prompts import REVIEW_CONTEXT_FILENAME, REVIEW_PROMPT_FILENAME
from design_review.services import AgentRunner
from design_review.services.project_store import (
    COMMENTS_FILENAME,
    PROMPTS_DIRNAME,
    REVIEW_FILENAME,
)
from design_review.utils import select_project
from .context import CommandContext

logger = logging.getLogger(__name__)


ALL_PROJECTS = "all"


def add_parser(subparsers):
    parser = subparsers.add_parser(
        "review",
        help="Generate design review and comments preview",
        description="Generate design-review.md, design-comments.preview.md and agent prompts.",
    )
    parser.add_argument("slug", nargs="?", help='Project slug or "all" (interactive when omitted)')
    parser.add_argument("--agent", action="store_true", help="Run the agent CLI after generating prompts")
    parser.add_argument(
        "--agent-timeout",
        type=int,
        default=None,
        metavar="MIN",
        help="Agent timeout in minutes (default: 10)",
    )
    parser.set_defaults(handler=run)


def print_missing_agent_instructions():
    print("")
    print("⚠️  Agent CLI not found.")
    print("")
    print("To install:")
    print("")
    print("  curl https://cursor.com/install -fsS | bash")
    print("  agent login")
    print("")
    print("Manual workflow (without CLI):")
    print("  Open prompts/_review_prompt.md in your editor's agent mode.")
    print("")


def print_auth_instructions():
    print("")
    print("⚠️  The agent CLI requires authentication.")
    print("")
    print("Run this once to log in:")
    print("")
    print("  agent login")
    print("")
    print("Or set CURSOR_API_KEY for automation:")
    print("  export CURSOR_API_KEY=your_api_key_here")
    print("")


def _select_slugs(args: argparse.Namespace, ctx: CommandContext) -> Optional[list[str]]:
    """리뷰할 프로젝트 목록. 프로젝트가 하나도 없으면 None, 선택을 취소하면 빈 목록"""
    if args.slug and args.slug != ALL_PROJECTS:
        ctx.store.require(args.slug)
        return [args.slug]

    projects = ctx.store.list_projects()
    if not projects:
        return None
    if args.slug == ALL_PROJECTS:
        return projects

    if len(projects) == 1:
        print(f"📂 Auto-selected: {projects[0]}")
    selected = select_project(projects, ctx.input_fn)
    return [selected] if selected else []


def _review_one(ctx: CommandContext, slug: str):
    result = ctx.workflow.review(slug)
    print(f"✅ {slug}")
    print(f"   → {REVIEW_FILENAME}")
    print(f"   → {COMMENTS_FILENAME} ({result.comment_count} comments)")
    print(f"   → {PROMPTS_DIRNAME}/{REVIEW_PROMPT_FILENAME}")
    print(f"   → {PROMPTS_DIRNAME}/{REVIEW_CONTEXT_FILENAME}")
    if result.artifacts_empty:
        print(f"   ⚠️  All artifacts are empty. Fill in projects/{slug}/prd.md for a useful review.")
    return result


async def _run_agent(ctx: CommandContext, slug: str, timeout_minutes: Optional[int]) -> int:
    project_dir = ctx.store.require(slug)
    prompt_path = project_dir / PROMPTS_DIRNAME / REVIEW_PROMPT_FILENAME
    review_path = project_dir / REVIEW_FILENAME

    prompt = ctx.store.read_file(prompt_path)
    if not prompt:
        print("", file=sys.stderr)
        print(f"❌ Prompt file not found: {prompt_path}", file=sys.stderr)
        print("", file=sys.stderr)
        return 1

    runner = AgentRunner(timeout_minutes=timeout_minutes)
    if not runner.is_available():
        print_missing_agent_instructions()
        print("📄 Prompt file ready at:")
        print(f"   {prompt_path}")
        print("")
        return 0

    before = review_path.stat().st_mtime_ns if review_path.exists() else None

    print("")
    print("🤖 Running agent...")
    print("")
    try:
        result = await runner.run(prompt, project_dir)
    except AgentError as e:
        print("")
        if (e.details or {}).get("auth_required"):
            print_auth_instructions()
            print("📄 Prompt file ready at:")
            print(f"   {prompt_path}")
            print("")
            print("After logging in, run again:")
            print(f"   design-review review {slug} --agent")
            print("")
        else:
            print("", file=sys.stderr)
            print(f"❌ Agent failed: {e.message}", file=sys.stderr)
            print("", file=sys.stderr)
        return 1

    print("")
    after = review_path.stat().st_mtime_ns if review_path.exists() else None
    if after is not None and after != before:
        print(f"✅ Review complete! ({result.elapsed_seconds:.0f}s)")
        print("")
        print("📝 Next steps:")
        print(f"   1. View the design review in projects/{slug}/")
        print(f"   2. Run: design-review comment {slug} --dry-run")
    else:
        print(f"⚠️  Agent completed but {REVIEW_FILENAME} was not updated.")
        print("   Try running again or check the prompt file manually.")
    print("")
    return 0


async def run(args: argparse.Namespace, ctx: CommandContext) -> int:
    await ctx.track("cmd_review_agent" if args.agent else "cmd_review", {"agent": args.agent})

    print("")
    print("🔍 Design Review")
    print("")

    slugs = _select_slugs(args, ctx)
    if slugs is None:
        print("❌ No projects found.", file=sys.stderr)
        print('   Create one with: design-review new "Project Name"', file=sys.stderr)
        return 1
    if not slugs:
        print("❌ No project selected.", file=sys.stderr)
        return 1

    if len(slugs) == 1 and args.slug != ALL_PROJECTS:
        _review_one(ctx, slugs[0])
    else:
        print(f"Preparing {len(slugs)} project(s)...")
        print("")
        success_count = 0
        for slug in slugs:
            try:
                _review_one(ctx, slug)
                success_count += 1
            except DesignReviewError as e:
                logger.error(f"[Review] {slug} 실패: {e.message}")
                print(f"❌ {slug}: {e.message}")
        print("")
        print(f"✅ Completed: {success_count}/{len(slugs)} projects")
    print("")

    if not args.agent:
        print("📝 Next step:")
        if len(slugs) == 1 and args.slug != ALL_PROJECTS:
            print(f"   Run: design-review review {slugs[0]} --agent")
        else:
            print("   Run: design-review review <project> --agent")
        print("")
        print(f"   Or manually: open {PROMPTS_DIRNAME}/{REVIEW_PROMPT_FILENAME} in your editor's agent mode")
        print("")
        return 0

    if args.slug == ALL_PROJECTS:
        print("⚠️  --agent requires a single project slug, not \"all\".")
        print("   Example: design-review review my-project --agent")
        print("")
        return 1

    return await _run_agent(ctx, slugs[0], args.agent_timeout)
