"""API endpoints package."""

from . import health
from . import projects
from . import review

__all__ = ["health", "projects", "review"]
