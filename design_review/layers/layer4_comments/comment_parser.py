"""
코멘트 미리보기 파서입니다.
design-comments.preview.md의 `## Comment N` 블록을 ParsedComment 목록으로 다시 읽어들입니다.

미리보기 파일은 사람이 직접 고치거나 에이전트가 다시 쓸 수 있으므로
필드가 빠진 블록도 허용하고, 메시지가 없는 블록만 건너뜁니다.
"""

import logging
import re
from typing import Optional

from design_review.models import ParsedComment, MAX_COMMENTS

logger = logging.getLogger(__name__)


COMMENT_HEADER_PATTERN = re.compile(r"^## Comment \d+$", re.MULTILINE)
PAGE_PATTERN = re.compile(r"^\s*page:\s*(.+)$", re.MULTILINE)
FRAME_PATTERN = re.compile(r"^\s*frame:\s*(.+)$", re.MULTILINE)
NODE_ID_PATTERN = re.compile(r"^\s*nodeId:\s*(.+)$", re.MULTILINE)
TYPE_PATTERN = re.compile(r"^Type:\s*\n\s*(.+)$", re.MULTILINE)
MESSAGE_PATTERN = re.compile(r"^Message:\s*\n([\s\S]*?)(?=\nWhy:)", re.MULTILINE)
WHY_PATTERN = re.compile(r"^Why:\s*\n?(.*?)(?=\n---|\n\*|$)", re.MULTILINE | re.DOTALL)

# 프레임을 지정하지 않았을 때 미리보기에 쓰는 표시
FRAME_PLACEHOLDER = "(optional)"


def _search(pattern: re.Pattern, block: str) -> Optional[str]:
    match = pattern.search(block)
    if not match:
        return None
    return match.group(1).strip()


def parse_comment_block(block: str) -> Optional[ParsedComment]:
    """
    `## Comment N` 헤더 뒤의 블록 하나를 파싱합니다.

    Returns:
        메시지가 없으면 None
    """
    message = _search(MESSAGE_PATTERN, block)
    if not message:
        return None

    frame = _search(FRAME_PATTERN, block)
    if frame == FRAME_PLACEHOLDER:
        frame = None

    return ParsedComment(
        page=_search(PAGE_PATTERN, block),
        frame=frame,
        node_id=_search(NODE_ID_PATTERN, block),
        type=_search(TYPE_PATTERN, block),
        message=message,
        why=_search(WHY_PATTERN, block),
    )


def parse_comments(content: str, limit: int = MAX_COMMENTS) -> list[ParsedComment]:
    """
    미리보기 문서 전체를 파싱합니다.

    Args:
        content: design-comments.preview.md 내용
        limit: 최대 코멘트 수 (기본값 7)

    Returns:
        문서 순서대로 최대 limit개의 ParsedComment
    """
    blocks = COMMENT_HEADER_PATTERN.split(content)[1:]

    comments = []
    for index, block in enumerate(blocks, 1):
        comment = parse_comment_block(block)
        if comment is None:
            logger.debug(f"[CommentParser] Comment {index}: 메시지가 없어 건너뜁니다")
            continue
        comments.append(comment)

    if len(comments) > limit:
        logger.info(f"[CommentParser] 코멘트 {len(comments)}개 중 {limit}개만 사용합니다")
    return comments[:limit]


def format_comment_for_figma(comment: ParsedComment) -> str:
    """
    Figma에 게시할 코멘트 본문을 만듭니다.

    형식: `[<type>] <message> \\n\\n📎 <why>` (type과 why는 있을 때만)
    """
    parts = []
    if comment.type:
        parts.append(f"[{comment.type}]")
    parts.append(comment.message)
    if comment.why:
        parts.append(f"\n\n📎 {comment.why}")
    return " ".join(parts)
