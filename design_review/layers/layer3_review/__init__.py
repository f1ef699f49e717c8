"""Layer 3: Review Generation - artifacts to design review and comments."""

from .review_generator import ReviewGenerator, generate_review
from .comment_generator import CommentGenerator, generate_comments

__all__ = [
    "ReviewGenerator",
    "generate_review",
    "CommentGenerator",
    "generate_comments",
]
