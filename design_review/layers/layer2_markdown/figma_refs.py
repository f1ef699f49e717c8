"""
figma.md에서 Figma 파일 키와 노드 ID를 찾아냅니다.

우선순위:
- 노드 ID: URL의 `node-id=12-345` (또는 `12:345`) → `NodeId: 12:345` 줄
- 파일 키: `figma.com/file/<KEY>` 또는 `figma.com/design/<KEY>` → `FileKey: <KEY>` 줄
"""

import re
from typing import Optional


NODE_ID_URL_PATTERN = re.compile(r"node-id=(\d+[-:]\d+)")
NODE_ID_LINE_PATTERN = re.compile(r"^NodeId:\s*(\d+[:-]\d+)", re.MULTILINE)
FILE_KEY_URL_PATTERN = re.compile(r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)")
FILE_KEY_LINE_PATTERN = re.compile(r"^FileKey:\s*([a-zA-Z0-9]+)", re.MULTILINE)


def _normalize_node_id(node_id: str) -> str:
    # Figma API는 콜론 형식(12:345)을 사용
    return node_id.replace("-", ":", 1)


def extract_node_id(figma_content: str) -> Optional[str]:
    """
    코멘트를 고정할 노드 ID를 추출합니다.

    Example:
        >>> extract_node_id("https://www.figma.com/design/ABC123/My-File?node-id=12-345")
        '12:345'
    """
    if not figma_content:
        return None

    match = NODE_ID_URL_PATTERN.search(figma_content) or NODE_ID_LINE_PATTERN.search(figma_content)
    if match:
        return _normalize_node_id(match.group(1))
    return None


def extract_file_key(figma_content: str) -> Optional[str]:
    """
    코멘트를 게시할 Figma 파일 키를 추출합니다.

    Example:
        >>> extract_file_key("https://www.figma.com/design/ABC123/My-File")
        'ABC123'
    """
    if not figma_content:
        return None

    match = FILE_KEY_URL_PATTERN.search(figma_content) or FILE_KEY_LINE_PATTERN.search(figma_content)
    if match:
        return match.group(1)
    return None
