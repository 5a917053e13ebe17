"""Application layer - use cases and orchestration.

This layer contains:
- Services: One method per upstream endpoint
- DTOs: Tool argument models and re-shaped tool results
"""

from src.application.services import AnalysisService, IndexService, TaskService

__all__ = [
    "AnalysisService",
    "IndexService",
    "TaskService",
]
