"""Core shared models for requireflow."""

from requireflow.core.models import (
    AnalysisRequest,
    AnalysisResult,
    Priority,
    QuestionType,
    RawResponseItem,
    RequirementItem,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "Priority",
    "QuestionType",
    "RawResponseItem",
    "RequirementItem",
]
