"""Unit tests for markdown extraction helpers.

Covers heading order, section scanning (first match opens, any heading
closes), bullet and numbered list extraction, and project name lookup.
"""

import pytest

from design_review.layers.layer2_markdown import (
    extract_headings,
    extract_bullets,
    extract_section,
    extract_project_name,
)
from design_review.layers.layer2_markdown.markdown import MAX_SECTION_LENGTH


# ===================================================================
# extract_headings
# ===================================================================

class TestExtractHeadings:
    def test_returns_level_two_and_three_in_order(self):
        md = "# Title\n## First\ntext\n### Second\n#### Too deep\n## Third\n"
        assert extract_headings(md) == ["First", "Second", "Third"]

    def test_keeps_duplicates(self):
        assert extract_headings("## Step\n## Step\n") == ["Step", "Step"]

    def test_inserting_heading_shifts_only_later_positions(self):
        before = extract_headings("## A\n## B\n## C\n")
        after = extract_headings("## A\n## New\n## B\n## C\n")
        assert after[0] == before[0]
        assert after[2:] == before[1:]

    def test_requires_space_after_hashes(self):
        assert extract_headings("##NoSpace\n## Yes\n") == ["Yes"]

    def test_empty_input(self):
        assert extract_headings("") == []


# ===================================================================
# extract_bullets
# ===================================================================

class TestExtractBullets:
    def test_dash_star_and_numbered_items(self):
        md = "## Goals\n- Fast\n* Cheap\n1. Simple\n  2. Nested\n"
        assert extract_bullets(md, "goals") == ["Fast", "Cheap", "Simple", "Nested"]

    def test_section_name_is_case_insensitive_substring(self):
        md = "## Edge Cases & unhappy paths\n- Offline\n"
        assert extract_bullets(md, "edge case") == ["Offline"]

    def test_section_closes_on_any_heading(self):
        md = "### Happy path\n1. Sign up\n# Unrelated\n2. Not collected\n"
        assert extract_bullets(md, "happy path") == ["Sign up"]

    def test_only_first_matching_section_is_used(self):
        md = "## Goals\n- One\n## Other\n- Skip\n## More goals\n- Two\n"
        assert extract_bullets(md, "goals") == ["One"]

    def test_plain_lines_are_ignored(self):
        md = "## Goals\nSome intro text\n- Real goal\n"
        assert extract_bullets(md, "goals") == ["Real goal"]

    def test_missing_section_returns_empty_list(self):
        assert extract_bullets("## Overview\n- x\n", "happy path") == []

    @pytest.mark.parametrize("md", ["", "\n\n", "no headings at all", "## \n-"])
    def test_never_raises_on_odd_input(self, md):
        assert extract_bullets(md, "goals") == []


# ===================================================================
# extract_section
# ===================================================================

class TestExtractSection:
    def test_joins_non_blank_lines_with_single_space(self):
        md = "## Overview\n  First line  \n\nSecond line\n## Next\nignored\n"
        assert extract_section(md, "overview") == "First line Second line"

    def test_truncates_to_max_length(self):
        md = "## Overview\n" + "x" * (MAX_SECTION_LENGTH + 100) + "\n"
        assert len(extract_section(md, "overview")) == MAX_SECTION_LENGTH

    def test_missing_section_returns_empty_string(self):
        assert extract_section("## Goals\n- a\n", "problem") == ""

    def test_level_one_heading_can_open_section(self):
        assert extract_section("# Problem\nIt is slow\n", "problem") == "It is slow"

    def test_only_first_matching_section_is_used(self):
        md = "## Problem\nFirst\n## Notes\nSkip\n## Problem details\nSecond\n"
        assert extract_section(md, "problem") == "First"


# ===================================================================
# extract_project_name
# ===================================================================

class TestExtractProjectName:
    def test_reads_front_matter_line(self, signup_prd):
        assert extract_project_name(signup_prd) == "Sign Up Flow"

    def test_missing_line_returns_none(self):
        assert extract_project_name("# PRD\n") is None

    def test_blank_value_returns_none(self):
        assert extract_project_name("Project:   \n") is None
