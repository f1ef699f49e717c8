"""Services for the design review workflow."""

from .workspace import Workspace
from .project_store import ProjectStore, get_project_store
from .figma_client import FigmaClient
from .agent_runner import AgentRunner, AgentResult
from .telemetry import Telemetry
from .workflow import ProjectWorkflow, ConvertResult, ReviewResult, CommentBatch

__all__ = [
    "Workspace",
    "ProjectStore",
    "get_project_store",
    "FigmaClient",
    "AgentRunner",
    "AgentResult",
    "Telemetry",
    "ProjectWorkflow",
    "ConvertResult",
    "ReviewResult",
    "CommentBatch",
]
