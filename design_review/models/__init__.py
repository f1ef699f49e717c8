"""Data models for design review generation."""

from .artifacts import ArtifactKey, ArtifactSet
from .comment import CommentType, ReviewComment, ParsedComment, MAX_COMMENTS
from .extraction import ExtractedText, RawFile
from .review import DesignReview, CommentsPreview

__all__ = [
    # Artifact models
    "ArtifactKey",
    "ArtifactSet",
    # Comment models
    "CommentType",
    "ReviewComment",
    "ParsedComment",
    "MAX_COMMENTS",
    # Extraction models
    "ExtractedText",
    "RawFile",
    # Rendered documents
    "DesignReview",
    "CommentsPreview",
]
