"""serve 명령 - HTTP API 서버를 실행합니다."""

import argparse
import logging

import uvicorn

from .context import CommandContext

logger = logging.getLogger(__name__)


def add_parser(subparsers):
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Run the design-review HTTP API with uvicorn.",
    )
    parser.add_argument("--host", default=None, help="Bind address (default: settings.host)")
    parser.add_argument("--port", type=int, default=None, help="Port (default: settings.port)")
    parser.set_defaults(handler=run)


async def run(args: argparse.Namespace, ctx: CommandContext) -> int:
    await ctx.track("cmd_serve")

    host = args.host or ctx.settings.host
    port = args.port or ctx.settings.port
    logger.info(f"[Serve] {host}:{port} (workspace={ctx.workspace.root})")

    config = uvicorn.Config(
        "design_review.main:app",
        host=host,
        port=port,
        log_level="info" if args.verbose else "warning",
    )
    await uvicorn.Server(config).serve()
    return 0
