"""Unit tests for the design review generator.

Checks the fixed section layout, the happy path / edge case branches,
the Figma Make prompt, and idempotence for a fixed date.
"""

from datetime import date

import pytest

from design_review import __version__
from design_review.layers.base_generator import ReviewContext
from design_review.layers.layer3_review import ReviewGenerator, generate_review
from design_review.models import ArtifactSet


SECTION_HEADERS = [
    "## 1. Intended Flow (from PRD)",
    "## 2. Expected Screens (inferred)",
    "## 3. States Checklist",
    "## 4. Gaps & Risks",
    "## 5. Suggestions",
    "## 6. Figma Make Prompt",
]


def _section(markdown: str, header: str) -> str:
    """header 다음부터 다음 `## ` 번호 섹션 직전까지"""
    start = markdown.index(header) + len(header)
    rest = markdown[start:]
    ends = [rest.find(h) for h in SECTION_HEADERS if rest.find(h) != -1]
    return rest[: min(ends)] if ends else rest


# ===================================================================
# Layout
# ===================================================================

class TestReviewLayout:
    def test_empty_artifacts_still_have_all_sections(self, fixed_date):
        md = generate_review(ArtifactSet(), "Empty", fixed_date)
        for header in SECTION_HEADERS:
            assert header in md

    def test_sections_appear_in_order(self, signup_artifacts, fixed_date):
        md = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        positions = [md.index(h) for h in SECTION_HEADERS]
        assert positions == sorted(positions)

    def test_header_and_footer(self, fixed_date):
        md = generate_review(ArtifactSet(), "My Project", fixed_date)
        assert md.startswith("# Design Review: My Project\n\n*Generated on 2024-01-15*\n\n---\n\n")
        assert md.endswith(f"*Review generated by design-review v{__version__}*\n")

    def test_idempotent_for_fixed_date(self, signup_artifacts, fixed_date):
        first = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        second = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        assert first == second

    def test_only_date_changes_between_days(self, signup_artifacts):
        first = generate_review(signup_artifacts, "Sign Up Flow", date(2024, 1, 1))
        second = generate_review(signup_artifacts, "Sign Up Flow", date(2024, 1, 2))
        assert first.replace("2024-01-01", "X") == second.replace("2024-01-02", "X")

    def test_states_checklist_is_fixed(self, fixed_date):
        md = generate_review(ArtifactSet(), "P", fixed_date)
        section = _section(md, "## 3. States Checklist")
        assert "- [ ] **Happy path** — The ideal user journey" in section
        assert "- [ ] **Recovery** — How the user gets back on track" in section


# ===================================================================
# Happy path / edge cases
# ===================================================================

class TestReviewContent:
    def test_signup_happy_path_lists_three_steps(self, signup_artifacts, fixed_date):
        md = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        flow = _section(md, "## 1. Intended Flow (from PRD)")
        assert flow.strip().splitlines() == [
            "1. Sign up",
            "2. Verify email",
            "3. See dashboard",
        ]

    def test_missing_edge_cases_placeholder(self, signup_artifacts, fixed_date):
        md = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        gaps = _section(md, "## 4. Gaps & Risks")
        assert '*No explicit "Edge cases" section found in PRD.*' in gaps
        assert "### Common gaps to check:" in gaps

    def test_missing_happy_path_placeholder(self, edge_case_artifacts, fixed_date):
        md = generate_review(edge_case_artifacts, "Edge", fixed_date)
        flow = _section(md, "## 1. Intended Flow (from PRD)")
        assert '*No explicit "Happy path" section found in PRD.' in flow

    def test_edge_cases_listed_with_warning_marker(self, edge_case_artifacts, fixed_date):
        md = generate_review(edge_case_artifacts, "Edge", fixed_date)
        gaps = _section(md, "## 4. Gaps & Risks")
        assert "- ⚠️ User has no network" in gaps
        assert "- ⚠️ Duplicate signup attempt" in gaps

    def test_inferred_screens_are_checkboxes(self, signup_artifacts, fixed_date):
        md = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        screens = _section(md, "## 2. Expected Screens (inferred)")
        assert screens.strip().splitlines() == [
            "- [ ] Overview",
            "- [ ] Sign Up Screen",
            "- [ ] Dashboard View",
        ]

    def test_default_screens_for_empty_prd(self, fixed_date):
        md = generate_review(ArtifactSet(), "P", fixed_date)
        screens = _section(md, "## 2. Expected Screens (inferred)")
        assert "- [ ] Entry" in screens
        assert "- [ ] Error/Recovery" in screens


# ===================================================================
# Suggestions and Figma Make prompt
# ===================================================================

class TestSuggestionsAndPrompt:
    def test_suggestions_when_both_sections_missing(self, fixed_date):
        md = generate_review(ArtifactSet(), "P", fixed_date)
        suggestions = _section(md, "## 5. Suggestions")
        assert "**Document the happy path**" in suggestions
        assert "**Identify edge cases**" in suggestions

    def test_suggestions_when_both_sections_present(self, fixed_date):
        prd = "## Happy path\n1. Start\n## Edge cases\n- Offline\n"
        md = generate_review(ArtifactSet(prd=prd), "P", fixed_date)
        suggestions = _section(md, "## 5. Suggestions")
        assert "1. Review each edge case against your Figma screens." in suggestions
        assert "3. Consider adding loading skeletons for better perceived performance." in suggestions

    def test_prompt_includes_context_and_user_flow(self, signup_artifacts, fixed_date):
        md = generate_review(signup_artifacts, "Sign Up Flow", fixed_date)
        prompt = _section(md, "## 6. Figma Make Prompt")
        assert 'Create a prototype skeleton for "Sign Up Flow".' in prompt
        assert "## Context\nLet new users create an account in under a minute." in prompt
        assert "## Problem\nUsers drop off during the current multi-step sign-up." in prompt
        assert "## Goals\n- Reduce sign-up time\n- Increase completion rate" in prompt
        assert "## User Flow\n1. Sign up\n2. Verify email\n3. See dashboard" in prompt
        assert "## Required Frames\n- Overview\n- Sign Up Screen\n- Dashboard View" in prompt

    def test_prompt_lists_screens_without_happy_path(self, fixed_date):
        md = generate_review(ArtifactSet(), "P", fixed_date)
        prompt = _section(md, "## 6. Figma Make Prompt")
        assert "## Screens Needed\nEntry, Core Action, Confirmation, Error/Recovery" in prompt
        assert "## Context" not in prompt

    def test_prompt_keeps_at_most_five_goals(self, fixed_date):
        prd = "## Goals\n" + "".join(f"- Goal {i}\n" for i in range(1, 8))
        md = generate_review(ArtifactSet(prd=prd), "P", fixed_date)
        assert "- Goal 5" in md
        assert "- Goal 6" not in md


# ===================================================================
# Generator class
# ===================================================================

class TestReviewGeneratorClass:
    def test_generate_returns_model(self, signup_artifacts, fixed_date):
        context = ReviewContext(project_name="Sign Up Flow", generated_on=fixed_date)
        review = ReviewGenerator().generate(signup_artifacts, context)
        assert review.happy_path == ["Sign up", "Verify email", "See dashboard"]
        assert review.edge_cases == []
        assert review.generated_on == "2024-01-15"

    @pytest.mark.parametrize("prd", ["", "#", "## \n", "- orphan bullet", "\x00\n## Happy path"])
    def test_never_raises(self, prd, fixed_date):
        md = generate_review(ArtifactSet(prd=prd), "P", fixed_date)
        assert "## 1. Intended Flow (from PRD)" in md
