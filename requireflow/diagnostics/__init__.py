"""Diagnostics for analysis runs."""

from requireflow.diagnostics.models import (
    AnalysisDiagnostic,
    DiagnosticWarning,
    ProcessingStatus,
)

__all__ = [
    "AnalysisDiagnostic",
    "DiagnosticWarning",
    "ProcessingStatus",
]
