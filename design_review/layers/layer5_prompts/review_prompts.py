"""Prompts for handing the design review over to an agent."""

from datetime import datetime
from typing import Optional

from design_review.models import ArtifactSet


REVIEW_CONTEXT_FILENAME = "_review_context.md"
REVIEW_PROMPT_FILENAME = "_review_prompt.md"

# 컨텍스트에 넣는 아티팩트별 최대 글자 수 (figma는 링크가 잘리면 안 되므로 전체)
PRD_CONTEXT_LIMIT = 3000
RESEARCH_CONTEXT_LIMIT = 2000
ANALYTICS_CONTEXT_LIMIT = 1000

REVIEW_PROMPT = """# Review: {project_name}

Read the context files and generate design review insights.

## Context (read these files)

- projects/{slug}/prd.md
- projects/{slug}/research.md
- projects/{slug}/figma.md
- projects/{slug}/analytics.md
- projects/{slug}/prompts/{context_filename}

## Figma Analysis

If Figma tools are available to you:

1. Read `projects/{slug}/figma.md` to get Figma URLs and node IDs
2. Inspect the nested frame structure of each linked file
3. Extract specific nodeIds for nested screens (not just parent frames)
4. Use these specific nodeIds when generating design comments

## Output (write to these files)

1. **projects/{slug}/design-review.md** — keep the six numbered sections of the existing file:
   Intended Flow, Expected Screens, States Checklist, Gaps & Risks, Suggestions, Figma Make Prompt.

2. **projects/{slug}/design-comments.preview.md** — keep the EXACT block format of the existing file:

   ```
   ## Comment <N>
   Target:
     page: <page>
     frame: <frame or (optional)>
     nodeId: <node id>

   Type:
     <Missing State | Flow Mismatch | Clarifying Question | Edge Case | Validation>

   Message:
   <message>

   Why:
   <reason, citing the PRD section>

   ---
   ```

   Limit to {max_comments} comments. Each MUST have: page, Type, Message, Why.

## Rules

1. Review intent, not pixels
2. Write only to the two output files above
3. Check: states, edge cases, analytics assumptions, PRD/design alignment
4. Tone: direct, question-based, concise
"""


def build_review_prompt(project_name: str, slug: str, max_comments: int = 7) -> str:
    """에이전트에게 줄 리뷰 프롬프트를 만듭니다."""
    return REVIEW_PROMPT.format(
        project_name=project_name,
        slug=slug,
        context_filename=REVIEW_CONTEXT_FILENAME,
        max_comments=max_comments,
    )


def _excerpt(content: str, limit: Optional[int], missing: str) -> str:
    if not content:
        return missing
    return content[:limit] if limit else content


def build_review_context(
    artifacts: ArtifactSet,
    project_name: str,
    slug: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """아티팩트 요약을 담은 리뷰 컨텍스트 문서를 만듭니다."""
    generated_at = generated_at or datetime.now()

    return (
        f"# Review Context: {project_name}\n"
        "\n"
        f"Generated: {generated_at.isoformat()}\n"
        f"Slug: {slug}\n"
        "\n"
        "---\n"
        "\n"
        "## PRD Summary\n"
        "\n"
        f"{_excerpt(artifacts.prd, PRD_CONTEXT_LIMIT, '*No prd.md found*')}\n"
        "\n"
        "---\n"
        "\n"
        "## Research Summary\n"
        "\n"
        f"{_excerpt(artifacts.research, RESEARCH_CONTEXT_LIMIT, '*No research.md found*')}\n"
        "\n"
        "---\n"
        "\n"
        "## Figma\n"
        "\n"
        f"{_excerpt(artifacts.figma, None, '*No figma.md found*')}\n"
        "\n"
        "---\n"
        "\n"
        "## Analytics\n"
        "\n"
        f"{_excerpt(artifacts.analytics, ANALYTICS_CONTEXT_LIMIT, '*No analytics.md found*')}\n"
    )
