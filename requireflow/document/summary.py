"""Requirement counts for the summary section."""

from pydantic import BaseModel

from requireflow.core.models import Priority, RequirementItem


class RequirementsSummary(BaseModel):
    """Counts by priority and the categories present."""

    total: int
    high: int
    medium: int
    low: int
    categories: list[str]


def summarize_requirements(requirements: list[RequirementItem]) -> RequirementsSummary:
    """Count requirements per priority.

    Categories are distinct, in order of first appearance.
    """
    return RequirementsSummary(
        total=len(requirements),
        high=sum(1 for r in requirements if r.priority == Priority.HIGH),
        medium=sum(1 for r in requirements if r.priority == Priority.MEDIUM),
        low=sum(1 for r in requirements if r.priority == Priority.LOW),
        categories=list(dict.fromkeys(r.category for r in requirements)),
    )
