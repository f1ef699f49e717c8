"""new / init 명령 - 템플릿으로 새 프로젝트를 만듭니다."""

import argparse

from .context import CommandContext


def add_parser(subparsers):
    parser = subparsers.add_parser(
        "new",
        aliases=["init"],
        help="Create a new project",
        description="Create a new project folder with artifact templates.",
    )
    parser.add_argument("name", nargs="+", help='Project name (e.g. "My Project")')
    parser.set_defaults(handler=run)


async def run(args: argparse.Namespace, ctx: CommandContext) -> int:
    await ctx.track("cmd_init")

    name = " ".join(args.name)
    slug = ctx.store.create(name)

    print("")
    print(f"✅ Created project: {name.strip()}")
    print(f"   Folder: projects/{slug}/")
    print("")
    print("📁 Files created:")
    print("   - prd.md         (Product requirements)")
    print("   - research.md    (Research notes)")
    print("   - figma.md       (Figma link)")
    print("   - analytics.md   (Analytics requirements)")
    print("   - raw/           (Drop source files here for convert)")
    print("   - prompts/       (Generated prompts go here)")
    print("")
    print("📝 Next steps:")
    print("   1. Fill out prd.md with your requirements")
    print("   2. Add research.md with findings (optional)")
    print("   3. Add your Figma artboard link in figma.md")
    print(f"   4. Run: design-review review {slug}")
    print("")
    return 0
