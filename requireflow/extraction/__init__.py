"""Requirement extraction layer."""

from requireflow.extraction.extractor import RequirementExtractor, requirement_id

__all__ = [
    "RequirementExtractor",
    "requirement_id",
]
