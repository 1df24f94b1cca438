"""BRD document assembly."""

from requireflow.document.markdown import render_markdown, truncate
from requireflow.document.summary import RequirementsSummary, summarize_requirements

__all__ = [
    "RequirementsSummary",
    "render_markdown",
    "summarize_requirements",
    "truncate",
]
