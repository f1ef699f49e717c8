"""Layer 4: Comment Parsing - preview document back to structured comments."""

from .comment_parser import (
    parse_comments,
    parse_comment_block,
    format_comment_for_figma,
)

__all__ = [
    "parse_comments",
    "parse_comment_block",
    "format_comment_for_figma",
]
