"""Layer 2: 마크다운 추출 (제목, 섹션, 화면 추론, Figma 참조)."""

from .markdown import (
    extract_headings,
    extract_bullets,
    extract_section,
    extract_project_name,
    ScanState,
)
from .screens import infer_screens, DefaultScreen, SCREEN_KEYWORDS
from .figma_refs import extract_node_id, extract_file_key
from .analysis import PRDAnalysis

__all__ = [
    "extract_headings",
    "extract_bullets",
    "extract_section",
    "extract_project_name",
    "ScanState",
    "infer_screens",
    "DefaultScreen",
    "SCREEN_KEYWORDS",
    "extract_node_id",
    "extract_file_key",
    "PRDAnalysis",
]
