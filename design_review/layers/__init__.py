"""Processing layers for the design review pipeline."""

# Note: Import layers individually to avoid circular imports
# Use: from design_review.layers.layer1_extraction import ExtractorFactory
# Use: from design_review.layers.layer2_markdown import PRDAnalysis
# Use: from design_review.layers.layer3_review import ReviewGenerator, CommentGenerator
# Use: from design_review.layers.layer4_comments import parse_comments

__all__ = [
    "layer1_extraction",
    "layer2_markdown",
    "layer3_review",
    "layer4_comments",
    "layer5_prompts",
]
