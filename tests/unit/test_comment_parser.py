"""Unit tests for parsing design-comments.preview.md back into comments."""

from design_review.layers.layer4_comments import (
    parse_comments,
    parse_comment_block,
    format_comment_for_figma,
)
from design_review.models import ParsedComment


HAND_EDITED = """# Design Comments Preview
Project: Demo
Generated: 2024-01-15

---

## Comment 1
Target:
  page: Checkout
  frame: Payment Form
  nodeId: 10:20

Type:
  Edge Case

Message:
What if the card is declined?
Show a retry option.

Why:
PRD → "Edge cases" → "Card declined"

---

## Comment 2
Target:
  page: Orphan

Type:
  Validation

---

## Comment 3
Target:
  page: Summary
  frame: (optional)

Type:
  Clarifying Question

Message:
Is the total shown before tax?

Why:
Pricing clarity

---

*Total: 3 comments*
"""


class TestParseComments:
    def test_parses_fields(self):
        comments = parse_comments(HAND_EDITED)
        first = comments[0]

        assert first.page == "Checkout"
        assert first.frame == "Payment Form"
        assert first.node_id == "10:20"
        assert first.type == "Edge Case"
        assert first.message == "What if the card is declined?\nShow a retry option."
        assert first.why == 'PRD → "Edge cases" → "Card declined"'

    def test_blocks_without_message_are_skipped(self):
        comments = parse_comments(HAND_EDITED)
        assert [c.page for c in comments] == ["Checkout", "Summary"]

    def test_optional_frame_becomes_none(self):
        comments = parse_comments(HAND_EDITED)
        assert comments[1].frame is None
        assert comments[1].node_id is None

    def test_limit(self):
        block = "## Comment {n}\nMessage:\nText {n}\n\nWhy:\nReason\n\n---\n\n"
        content = "".join(block.format(n=n) for n in range(1, 11))

        assert len(parse_comments(content)) == 7
        assert len(parse_comments(content, limit=3)) == 3

    def test_no_comment_headers(self):
        assert parse_comments("# Nothing here\n") == []
        assert parse_comments("") == []

    def test_block_without_message_returns_none(self):
        assert parse_comment_block("\nTarget:\n  page: X\n") is None


class TestFormatCommentForFigma:
    def test_full_comment(self):
        comment = ParsedComment(type="Validation", message="Check input", why="Forms")
        assert format_comment_for_figma(comment) == "[Validation] Check input \n\n📎 Forms"

    def test_message_only(self):
        assert format_comment_for_figma(ParsedComment(message="Just this")) == "Just this"

    def test_target_label(self):
        assert ParsedComment(page="A", frame="B", message="m").target_label == "A → B"
        assert ParsedComment(page="A", message="m").target_label == "A"
        assert ParsedComment(message="m").target_label == "(unknown page)"
