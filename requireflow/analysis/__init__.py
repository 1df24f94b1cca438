"""Analysis facade."""

from requireflow.analysis.service import AnalysisService, create_service, get_default_service

__all__ = [
    "AnalysisService",
    "create_service",
    "get_default_service",
]
