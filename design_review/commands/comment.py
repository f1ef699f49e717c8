"""comment 명령 - 미리보기 파일의 코멘트를 Figma에 게시합니다."""

import argparse
import logging
import sys

from design_review.exceptions import FigmaAPIError
from design_review.layers.layer4_comments import format_comment_for_figma
from design_review.models import ParsedComment
from design_review.services import FigmaClient
from design_review.services.project_store import COMMENTS_FILENAME
from .context import CommandContext

logger = logging.getLogger(__name__)


# 게시 결과 한 줄에 보여줄 최대 글자 수
DISPLAY_LIMIT = 50


def add_parser(subparsers):
    parser = subparsers.add_parser(
        "comment",
        help="Post preview comments to Figma",
        description=f"Post the comments in {COMMENTS_FILENAME} to the project's Figma file.",
    )
    parser.add_argument("slug", help="Project slug")
    parser.add_argument("--dry-run", action="store_true", help="Preview comments without posting")
    parser.set_defaults(handler=run)


def print_setup_instructions():
    print("")
    print("⚠️  FIGMA_ACCESS_TOKEN not found.")
    print("")
    print("To post comments to Figma, you need a personal access token:")
    print("")
    print("1. Go to Figma → Settings → Account → Personal access tokens")
    print("   https://www.figma.com/developers/api#access-tokens")
    print("")
    print('2. Create a new token with "File content" and "Comments" permissions')
    print("")
    print("3. Add your token to .env in the workspace root:")
    print("   FIGMA_ACCESS_TOKEN=your_token_here")
    print("")
    print("4. Run the comment command again:")
    print("   design-review comment <project-slug>")
    print("")


def _display_text(comment: ParsedComment) -> str:
    text = f"[{comment.type}] {comment.first_line}"
    if len(text) > DISPLAY_LIMIT:
        return text[:DISPLAY_LIMIT] + "..."
    return text


def _print_dry_run(comments: list[ParsedComment]):
    print("🔍 DRY RUN - Comments that would be posted:")
    print("")
    for number, comment in enumerate(comments, 1):
        node_info = f" (node: {comment.node_id})" if comment.node_id else " (file level)"
        print(f"  {number}. [{comment.type}] @ {comment.target_label}{node_info}")
        print(f"     {comment.first_line}")
        if comment.why:
            print(f"     📎 {comment.why}")
        print("")
    print("Run without --dry-run to post these comments.")
    print("")


async def _post_all(client: FigmaClient, file_key: str, comments: list[ParsedComment]) -> int:
    """코멘트를 순서대로 게시하고 실패 개수를 반환합니다. 하나가 실패해도 나머지는 계속합니다."""
    failed = 0
    for comment in comments:
        target_info = f" → node {comment.node_id}" if comment.node_id else " → file level"
        try:
            await client.post_comment(file_key, format_comment_for_figma(comment), comment.node_id)
            print(f'  ✅ Posted{target_info}: "{_display_text(comment)}"')
        except FigmaAPIError as e:
            failed += 1
            print(f'  ❌ Failed{target_info}: "{_display_text(comment)}"')
            print(f"     Error: {e.message}")
    return failed


async def run(args: argparse.Namespace, ctx: CommandContext) -> int:
    await ctx.track("cmd_comment", {"dry_run": args.dry_run})

    batch = ctx.workflow.load_comments(args.slug)

    if not batch.preview_found:
        print(f"❌ No {COMMENTS_FILENAME} found.", file=sys.stderr)
        print("", file=sys.stderr)
        print(f"Run: design-review review {args.slug}", file=sys.stderr)
        return 1

    if not batch.file_key:
        print("❌ Could not find Figma file key.", file=sys.stderr)
        print("", file=sys.stderr)
        print(f"Add a Figma URL to projects/{args.slug}/figma.md:", file=sys.stderr)
        print("  https://www.figma.com/file/YOUR_FILE_KEY/...", file=sys.stderr)
        print("", file=sys.stderr)
        print("Or add an explicit FileKey line:", file=sys.stderr)
        print("  FileKey: YOUR_FILE_KEY", file=sys.stderr)
        return 1

    comments = batch.comments
    if not comments:
        print("")
        print("ℹ️  No comments to post.")
        print("")
        return 0

    print("")
    print("💬 Design Review Comment")
    print("")
    print(f"Project: {args.slug}")
    print(f"File key: {batch.file_key}")
    print(f"Comments: {len(comments)}")
    print("")

    if args.dry_run:
        _print_dry_run(comments)
        return 0

    token = ctx.settings.figma_access_token
    if not token:
        print_setup_instructions()
        return 1

    print("📤 Posting comments to Figma...")
    print("")
    async with FigmaClient(token) as client:
        failed = await _post_all(client, batch.file_key, comments)

    posted = len(comments) - failed
    print("")
    if failed == 0:
        print(f"✅ Posted {posted} comments to {batch.file_key}")
    else:
        logger.warning(f"[Comment] {failed}개 코멘트 게시 실패")
        print(f"⚠️  Posted {posted}/{len(comments)} comments ({failed} failed)")
    print("")
    print("View comments in Figma:")
    print(f"  https://www.figma.com/file/{batch.file_key}")
    print("")
    return 0
