"""Prompts for converting raw artifacts into prd.md and research.md."""

from datetime import datetime
from typing import Optional

from design_review.models import RawFile
from design_review.templates import load_template


CONVERT_CONTEXT_FILENAME = "_convert_context.md"
CONVERT_PROMPT_FILENAME = "_convert_prompt.md"

# 에이전트가 채워 넣을 자리표시자가 들어간 front matter
TEMPLATE_FRONT_MATTER = """---
Project: <Project Name>
Created: <ISO>
---

"""

CONVERT_PROMPT = """# Design Review Convert Prompt

Read `prompts/{context_filename}` in this project folder and convert the raw content into structured PRD and research documents.

## Rules (STRICT)

1. **Do NOT invent requirements** — only extract what is explicitly stated or clearly implied in the source material.
2. **Preserve intent** — maintain the original meaning, flows, states, metrics, and edge cases.
3. **Remove noise** — strip slide headers, footers, page numbers, and repetition.
4. **Handle uncertainty** — if something is unclear or ambiguous, add it to "Open questions".
5. **Be concise** — use bullets and short sentences. No fluff.

## Output (EXACTLY two files)

Create these files in this project folder:

### 1. `prd.md`

Use this EXACT template structure:

```markdown
{prd_template}
```

### 2. `research.md`

Use this EXACT template structure:

```markdown
{research_template}
```

## Instructions

1. Read the raw content from `prompts/{context_filename}`
2. Identify PRD content (requirements, flows, features, metrics) → goes into `prd.md`
3. Identify research content (findings, quotes, insights, pain points) → goes into `research.md`
4. If content fits both, prioritize PRD for requirements and research for user insights
5. Leave empty sections as-is if no relevant content exists (don't remove them)
6. Replace `<Project Name>` with: {slug}
7. Replace `<ISO>` with the current date in ISO format

## After conversion

Run `design-review review {slug}` to generate the design review.
"""


def build_convert_prompt(slug: str) -> str:
    """
    에이전트에게 줄 변환 프롬프트를 만듭니다.
    PRD/리서치 템플릿은 패키지의 템플릿 파일을 그대로 포함합니다.
    """
    return CONVERT_PROMPT.format(
        context_filename=CONVERT_CONTEXT_FILENAME,
        prd_template=TEMPLATE_FRONT_MATTER + load_template("prd.template.md").rstrip("\n"),
        research_template=TEMPLATE_FRONT_MATTER + load_template("research.template.md").rstrip("\n"),
        slug=slug,
    )


def build_convert_context(
    slug: str,
    files: list[RawFile],
    generated_at: Optional[datetime] = None,
) -> str:
    """
    추출된 원본 파일 내용을 하나의 컨텍스트 문서로 합칩니다.

    형식:
        # Design Review Convert Context
        Project: <slug>
        Generated: <ISO>

        ## Raw Files Index
        - <filename> (<ext>, <bytes> bytes)[ [manual paste required]]

        ## Raw Content

        ### FILE: <filename>

        <text>
    """
    generated_at = generated_at or datetime.now()

    parts = [
        "# Design Review Convert Context\n"
        f"Project: {slug}\n"
        f"Generated: {generated_at.isoformat()}\n"
        "\n"
        "## Raw Files Index\n"
    ]
    for raw_file in files:
        parts.append(raw_file.index_line() + "\n")

    parts.append("\n## Raw Content\n")
    for raw_file in files:
        parts.append(f"\n### FILE: {raw_file.filename}\n\n{raw_file.text}\n")

    return "".join(parts)
