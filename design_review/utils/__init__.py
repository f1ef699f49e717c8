"""유틸리티 모듈."""

from .slugify import slugify, validate_project_name, is_valid_slug
from .text import format_bytes, levenshtein, similarity, suggest_closest
from .prompt import select_project

__all__ = [
    "slugify",
    "validate_project_name",
    "is_valid_slug",
    "format_bytes",
    "levenshtein",
    "similarity",
    "suggest_closest",
    "select_project",
]
