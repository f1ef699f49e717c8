"""Layer 5: Agent prompts for convert and review hand-off."""

from .convert_prompts import (
    build_convert_prompt,
    build_convert_context,
    CONVERT_CONTEXT_FILENAME,
    CONVERT_PROMPT_FILENAME,
)
from .review_prompts import (
    build_review_prompt,
    build_review_context,
    REVIEW_CONTEXT_FILENAME,
    REVIEW_PROMPT_FILENAME,
)

__all__ = [
    "build_convert_prompt",
    "build_convert_context",
    "CONVERT_CONTEXT_FILENAME",
    "CONVERT_PROMPT_FILENAME",
    "build_review_prompt",
    "build_review_context",
    "REVIEW_CONTEXT_FILENAME",
    "REVIEW_PROMPT_FILENAME",
]
