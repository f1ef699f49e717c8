"""
CLI 명령 모음입니다.

각 명령 모듈은 두 가지를 제공합니다:
- add_parser(subparsers): argparse 서브커맨드 등록
- async run(args, ctx) -> int: 명령 실행 (종료 코드 반환)
"""

from . import new, convert, review, comment, doctor, serve
from .context import CommandContext

COMMAND_MODULES = [new, convert, review, comment, doctor, serve]

# 오타 제안에 쓰는 명령 이름 (별칭 포함)
COMMAND_NAMES = ["init", "new", "convert", "review", "comment", "doctor", "serve"]

__all__ = [
    "CommandContext",
    "COMMAND_MODULES",
    "COMMAND_NAMES",
]
