"""Data models for analysis diagnostics.

Tracks which responses were used and which were skipped for each
analysis request.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ProcessingStatus(str, Enum):
    """Status of an analysis."""

    SUCCESS = "success"  # Every response produced a requirement
    PARTIAL = "partial"  # Some responses were skipped
    EMPTY = "empty"  # No usable responses


class DiagnosticWarning(BaseModel):
    """A warning raised while analyzing a request."""

    code: str  # Warning code like "EMPTY_ANSWER"
    message: str
    question: str | None = None
    position: int | None = None


class AnalysisDiagnostic(BaseModel):
    """Diagnostics for one analysis request."""

    status: ProcessingStatus
    responses_total: int = 0
    responses_used: int = 0
    warnings: list[DiagnosticWarning] = Field(default_factory=list)
