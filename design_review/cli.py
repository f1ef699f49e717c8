#!/usr/bin/env python3
"""design-review command line interface.

Usage:
    design-review new "My Project"
    design-review convert my-project
    design-review review my-project --agent
    design-review comment my-project --dry-run
    design-review doctor --fix
    design-review serve --port 8000
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from design_review import __version__
from design_review.commands import COMMAND_MODULES, COMMAND_NAMES, CommandContext
from design_review.exceptions import DesignReviewError, ProjectNotFoundError
from design_review.utils import suggest_closest

logger = logging.getLogger(__name__)


# 서브커맨드 앞에 올 수 있는 전역 옵션 (값을 받지 않음)
GLOBAL_FLAGS = {"--verbose", "--no-telemetry"}


def build_parser() -> argparse.ArgumentParser:
    # 서브커맨드 앞뒤 어디서나 쓸 수 있도록 공통 부모 파서에 정의
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Show detailed logs",
    )
    common.add_argument(
        "--no-telemetry",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Disable anonymous usage statistics",
    )
    parser = argparse.ArgumentParser(
        prog="design-review",
        description="A lean design review workflow: PRD → review checklist → Figma comments",
        parents=[common],
    )
    parser.add_argument("-V", "--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    for module in COMMAND_MODULES:
        module.add_parser(_SubparserAdapter(subparsers, common))
    return parser


class _SubparserAdapter:
    """각 서브커맨드 파서에 공통 옵션을 붙여주는 래퍼"""

    def __init__(self, subparsers, common: argparse.ArgumentParser):
        self._subparsers = subparsers
        self._common = common

    def add_parser(self, name: str, **kwargs) -> argparse.ArgumentParser:
        kwargs.setdefault("parents", [self._common])
        return self._subparsers.add_parser(name, **kwargs)


def _first_command(argv: list[str]) -> Optional[str]:
    """전역 옵션을 건너뛴 첫 번째 인자 (없으면 None)"""
    for arg in argv:
        if arg in GLOBAL_FLAGS:
            continue
        return arg
    return None


def print_unknown_command(command: str):
    print(f"Unknown command: {command}", file=sys.stderr)
    print("", file=sys.stderr)

    suggestion = suggest_closest(command, COMMAND_NAMES)
    if suggestion:
        print(f'Did you mean "{suggestion}"?', file=sys.stderr)
        print("", file=sys.stderr)

    print(f"Available commands: {', '.join(COMMAND_NAMES)}", file=sys.stderr)
    print('Run "design-review --help" for usage information.', file=sys.stderr)


def print_error(error: DesignReviewError):
    print(f"❌ Error: {error.message}", file=sys.stderr)
    if isinstance(error, ProjectNotFoundError):
        available = (error.details or {}).get("available") or []
        print("", file=sys.stderr)
        print("Available projects:", file=sys.stderr)
        if available:
            for project in available:
                print(f"   - {project}", file=sys.stderr)
        else:
            print('   (none - create one with: design-review new "Project Name")', file=sys.stderr)


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


async def _dispatch(args: argparse.Namespace, ctx: CommandContext) -> int:
    return await args.handler(args, ctx)


def main(argv: Optional[list[str]] = None, ctx: Optional[CommandContext] = None) -> int:
    """
    CLI 진입점.

    Args:
        argv: 명령줄 인자 (기본값 sys.argv[1:])
        ctx: 명령 컨텍스트 (테스트에서 주입, 기본값은 워크스페이스 자동 탐색)

    Returns:
        종료 코드
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    command = _first_command(argv)
    if command is None:
        parser.print_help()
        return 0
    if not command.startswith("-") and command not in COMMAND_NAMES:
        print_unknown_command(command)
        return 1

    args = parser.parse_args(argv)
    args.verbose = getattr(args, "verbose", False)
    args.no_telemetry = getattr(args, "no_telemetry", False)
    configure_logging(args.verbose)

    if not getattr(args, "handler", None):
        parser.print_help()
        return 0

    try:
        ctx = ctx or CommandContext.create(no_telemetry=args.no_telemetry)
        return asyncio.run(_dispatch(args, ctx))
    except DesignReviewError as e:
        logger.info(f"[CLI] {e.error_code}: {e.message}")
        print_error(e)
        return 1
    except KeyboardInterrupt:
        print("", file=sys.stderr)
        return 130


def run():
    """콘솔 스크립트 진입점."""
    sys.exit(main())


if __name__ == "__main__":
    run()
