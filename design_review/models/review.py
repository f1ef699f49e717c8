"""
생성된 리뷰 문서 모델입니다.

DesignReview는 design-review.md, CommentsPreview는 design-comments.preview.md로
렌더링됩니다. 두 문서 모두 입력이 같으면 날짜를 제외하고 항상 같은 결과가 나옵니다.
"""

from pydantic import BaseModel, Field

from design_review import __version__
from .comment import ReviewComment, MAX_COMMENTS


# 모든 화면이 고려해야 하는 상태 체크리스트 (항상 그대로 출력)
STATES_CHECKLIST = [
    "- [ ] **Happy path** — The ideal user journey",
    "- [ ] **Empty** — No data, first-time user, or cleared state",
    "- [ ] **Loading** — Waiting for data or action completion",
    "- [ ] **Error** — Something went wrong (network, validation, permissions)",
    "- [ ] **Recovery** — How the user gets back on track",
]

# PRD와 무관하게 항상 점검을 권하는 공통 누락 항목
COMMON_GAPS = [
    "- [ ] Offline behavior",
    "- [ ] Permission denied states",
    "- [ ] Session timeout handling",
    "- [ ] Rate limiting / throttling",
    "- [ ] Accessibility considerations",
]

# Figma Make 프롬프트에 들어가는 목표는 최대 5개
MAX_PROMPT_GOALS = 5


class DesignReview(BaseModel):
    """
    체크리스트 형태의 디자인 리뷰 문서입니다.

    섹션 순서와 고정 문구는 바뀌지 않습니다:
    1. Intended Flow  2. Expected Screens  3. States Checklist
    4. Gaps & Risks  5. Suggestions  6. Figma Make Prompt
    """

    project_name: str
    generated_on: str = Field(..., description="생성 날짜 (YYYY-MM-DD)")
    happy_path: list[str] = Field(default_factory=list, description="PRD의 Happy path 단계")
    screens: list[str] = Field(..., min_length=1, description="추론된 화면 목록 (비어 있지 않음)")
    edge_cases: list[str] = Field(default_factory=list, description="PRD의 Edge case 항목")
    overview: str = ""
    problem: str = ""
    goals: list[str] = Field(default_factory=list)

    def to_markdown(self) -> str:
        """리뷰 문서를 마크다운으로 변환합니다."""
        lines = [
            f"# Design Review: {self.project_name}",
            "",
            f"*Generated on {self.generated_on}*",
            "",
            "---",
            "",
        ]

        # 1. 의도된 흐름
        lines.append("## 1. Intended Flow (from PRD)")
        lines.append("")
        if self.happy_path:
            lines.extend(self._numbered(self.happy_path))
        else:
            lines.append(
                '*No explicit "Happy path" section found in PRD. '
                'Please document the main user journey.*'
            )
        lines.append("")

        # 2. 예상 화면
        lines.append("## 2. Expected Screens (inferred)")
        lines.append("")
        for screen in self.screens:
            lines.append(f"- [ ] {screen}")
        lines.append("")

        # 3. 상태 체크리스트
        lines.append("## 3. States Checklist")
        lines.append("")
        lines.append("Every screen should account for these states:")
        lines.append("")
        lines.extend(STATES_CHECKLIST)
        lines.append("")

        # 4. 누락 및 위험 요소
        lines.append("## 4. Gaps & Risks")
        lines.append("")
        if self.edge_cases:
            lines.append("### Edge cases identified in PRD:")
            lines.append("")
            for edge in self.edge_cases:
                lines.append(f"- ⚠️ {edge}")
        else:
            lines.append('*No explicit "Edge cases" section found in PRD.*')
        lines.append("")
        lines.append("### Common gaps to check:")
        lines.append("")
        lines.extend(COMMON_GAPS)
        lines.append("")

        # 5. 제안
        lines.append("## 5. Suggestions")
        lines.append("")
        lines.append("Based on the PRD analysis:")
        lines.append("")
        lines.extend(self._suggestions())
        lines.append("")

        # 6. Figma Make 프롬프트
        lines.append("## 6. Figma Make Prompt")
        lines.append("")
        lines.append("Use this prompt with Figma's AI features to scaffold your prototype:")
        lines.append("")
        lines.append("```")
        lines.extend(self._figma_make_prompt())
        lines.append("```")
        lines.append("")
        lines.append("---")
        lines.append("")
        lines.append(f"*Review generated by design-review v{__version__}*")
        lines.append("")

        return "\n".join(lines)

    def _suggestions(self) -> list[str]:
        """PRD에 빠진 섹션에 따라 달라지는 제안 목록"""
        suggestions = []
        if not self.happy_path:
            suggestions.append(
                '1. **Document the happy path** — Add a "Happy path" section '
                'to your PRD with numbered steps.'
            )
        if not self.edge_cases:
            suggestions.append(
                '1. **Identify edge cases** — Add an "Edge cases" section to your PRD.'
            )
        if self.happy_path and self.edge_cases:
            suggestions.extend([
                "1. Review each edge case against your Figma screens.",
                "2. Ensure all states in the checklist are designed.",
                "3. Consider adding loading skeletons for better perceived performance.",
            ])
        return suggestions

    def _figma_make_prompt(self) -> list[str]:
        lines = [f'Create a prototype skeleton for "{self.project_name}".', ""]

        if self.overview:
            lines.extend(["## Context", self.overview, ""])
        if self.problem:
            lines.extend(["## Problem", self.problem, ""])
        if self.goals:
            lines.append("## Goals")
            for goal in self.goals[:MAX_PROMPT_GOALS]:
                lines.append(f"- {goal}")
            lines.append("")

        if self.happy_path:
            lines.append("## User Flow")
            lines.extend(self._numbered(self.happy_path))
        else:
            lines.append("## Screens Needed")
            lines.append(", ".join(self.screens))

        lines.append("")
        lines.append("## Required Frames")
        for screen in self.screens:
            lines.append(f"- {screen}")
        lines.extend([
            "",
            "## States (for each screen)",
            "- Default (happy path)",
            "- Empty state",
            "- Loading state",
            "- Error state",
            "",
            "Focus on flow and structure, not visual polish.",
        ])
        return lines

    @staticmethod
    def _numbered(items: list[str]) -> list[str]:
        return [f"{i}. {item}" for i, item in enumerate(items, 1)]


class CommentsPreview(BaseModel):
    """
    게시 전에 사람이 검토하는 코멘트 미리보기 문서입니다.

    comments는 최대 MAX_COMMENTS개이며, 렌더링된 문서는 comment_parser로 다시 읽을 수 있습니다.
    """

    project_name: str
    slug: str = Field(..., description="comment 명령 안내에 쓰는 프로젝트 슬러그")
    generated_on: str = Field(..., description="생성 날짜 (YYYY-MM-DD)")
    comments: list[ReviewComment] = Field(default_factory=list, max_length=MAX_COMMENTS)

    def to_markdown(self) -> str:
        """미리보기 문서를 마크다운으로 변환합니다."""
        parts = [
            "# Design Comments Preview\n"
            f"Project: {self.project_name}\n"
            f"Generated: {self.generated_on}\n"
            "\n"
            "---\n"
            "\n"
        ]
        for number, comment in enumerate(self.comments, 1):
            parts.append(comment.to_markdown(number))
        parts.append(f"*Total: {len(self.comments)} comments*\n")
        parts.append(f"*Run `design-review comment {self.slug}` to post to Figma.*\n")
        return "".join(parts)
