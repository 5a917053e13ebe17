"""Application services wrapping the upstream video API."""

from src.application.services.analysis import AnalysisService, resolve_prompt
from src.application.services.indexes import IndexService
from src.application.services.tasks import TaskService

__all__ = [
    "AnalysisService",
    "IndexService",
    "TaskService",
    "resolve_prompt",
]
