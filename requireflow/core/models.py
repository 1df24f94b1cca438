"""Core models for requirements analysis.

These models represent the input contract (raw question/answer pairs)
and the output contract (requirements and the aggregate analysis)
shared by every stage of the pipeline.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    """Question type tags understood by the analysis rules."""

    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"


class Priority(str, Enum):
    """Urgency tier of a requirement."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class CamelModel(BaseModel):
    """Base model serializing with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RawResponseItem(CamelModel):
    """A single answered question as submitted by a client."""

    question: str
    answer: Any = None
    question_type: QuestionType


class AnalysisRequest(CamelModel):
    """Form metadata plus every raw response to analyze."""

    form_title: str
    client_name: str
    form_description: str | None = None
    responses: list[RawResponseItem] = Field(default_factory=list)


class RequirementItem(CamelModel):
    """A structured requirement extracted from one valid response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    category: str
    priority: Priority
    description: str
    acceptance_criteria: list[str]
    business_value: str
    technical_notes: str = ""


class AnalysisResult(CamelModel):
    """Document-level payload handed to the BRD renderer."""

    executive_summary: str
    project_overview: str
    business_objectives: list[str]
    stakeholders: list[str]
    requirements: list[RequirementItem]
    assumptions: list[str]
    constraints: list[str]
    risks: list[str]
    success_criteria: list[str]
