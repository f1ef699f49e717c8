"""convert 명령 - raw/ 폴더의 원본 파일을 에이전트용 변환 컨텍스트로 만듭니다."""

import argparse
import logging
import sys

from design_review.exceptions import DesignReviewError
from .context import CommandContext

logger = logging.getLogger(__name__)


def add_parser(subparsers):
    parser = subparsers.add_parser(
        "convert",
        help="Extract raw files into a convert prompt",
        description="Extract text from projects/<slug>/raw/ and write prompts/_convert_*.md.",
    )
    parser.add_argument("slug", help='Project slug or "all"')
    parser.set_defaults(handler=run)


async def _convert_one(ctx: CommandContext, slug: str) -> bool:
    raw_dir = ctx.store.raw_dir(slug)
    created = ctx.store.exists(slug) and not raw_dir.exists()

    result = await ctx.workflow.convert(slug)
    if created:
        print("   Created: raw/")

    if not result.files:
        print(f"ℹ️  No raw files found in projects/{slug}/raw/")
        print("")
        supported = ", ".join(ctx.workflow.extractor_factory.supported_extensions)
        print(f"   Supported formats: {supported}")
        print("   Drop your files there and run this command again.")
        return False

    print(f"📂 Found {len(result.files)} file(s) in raw/")
    for raw_file in result.files:
        print(f"   Extracting: {raw_file.filename}")
    print("")
    print(f"✅ {slug}")
    print("   → prompts/_convert_context.md")
    print("   → prompts/_convert_prompt.md")
    if result.has_placeholders:
        print("")
        print("   ⚠️  Some files need manual text paste (see context file)")
    return True


async def run(args: argparse.Namespace, ctx: CommandContext) -> int:
    await ctx.track("cmd_convert", {"all": args.slug == "all"})

    print("")
    print("🔄 Design Review Convert")
    print("")

    if args.slug != "all":
        ctx.store.require(args.slug)
        if not await _convert_one(ctx, args.slug):
            return 0
    else:
        projects = ctx.store.list_projects()
        if not projects:
            print('❌ No projects found.\n   Create one with: design-review new "Project Name"', file=sys.stderr)
            return 1

        print(f"Converting {len(projects)} project(s)...")
        print("")
        success_count = 0
        for slug in projects:
            print(f"--- {slug} ---")
            try:
                if await _convert_one(ctx, slug):
                    success_count += 1
            except DesignReviewError as e:
                logger.error(f"[Convert] {slug} 실패: {e.message}")
                print(f"❌ {slug}: {e.message}")
            print("")
        print(f"✅ Completed: {success_count}/{len(projects)} projects")

    print("")
    print("📝 Next steps:")
    print("   1. Run the agent with prompts/_convert_prompt.md")
    print("   2. It will fill in prd.md and research.md")
    print("   3. Then run: design-review review <slug>")
    print("")
    return 0
