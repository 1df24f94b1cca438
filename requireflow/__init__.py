"""requireflow: Rule-based requirements analysis for questionnaire responses."""

__version__ = "0.1.0"

from requireflow.analysis import AnalysisService, get_default_service
from requireflow.callable import CallableResult, execute
from requireflow.core import AnalysisRequest, AnalysisResult, RawResponseItem, RequirementItem

__all__ = [
    "__version__",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisService",
    "CallableResult",
    "RawResponseItem",
    "RequirementItem",
    "execute",
    "get_default_service",
]
