"""Form and session records from the persistence layer.

Converts stored client submissions (one session per submission, each
holding several answered questions) into an AnalysisRequest.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from requireflow.core.models import AnalysisRequest, QuestionType, RawResponseItem


class InvalidRequestError(ValueError):
    """Raised when a raw payload does not describe a valid request."""

    pass


class FormRecord(BaseModel):
    """A published form."""

    id: str
    title: str
    client_name: str
    description: str | None = None
    created_at: datetime


class SessionAnswer(BaseModel):
    """One answered question within a session."""

    question_id: str
    question_label: str
    question_type: QuestionType
    answer: Any = None


class SessionResponse(BaseModel):
    """A single client submission."""

    session_id: str
    created_at: datetime
    responses: list[SessionAnswer] = Field(default_factory=list)


def build_analysis_request(
    form: FormRecord,
    sessions: list[SessionResponse],
) -> AnalysisRequest:
    """Flatten every session's answers into one analysis request.

    Args:
        form: The form the sessions were submitted against.
        sessions: Submissions, in the order they should be analyzed.

    Returns:
        AnalysisRequest with answers in session order, then answer order.
    """
    responses = [
        RawResponseItem(
            question=answer.question_label,
            answer=answer.answer,
            question_type=answer.question_type,
        )
        for session in sessions
        for answer in session.responses
    ]
    return AnalysisRequest(
        form_title=form.title,
        client_name=form.client_name,
        form_description=form.description,
        responses=responses,
    )


def parse_request(payload: dict[str, Any]) -> AnalysisRequest:
    """Validate a raw analysis request payload.

    Raises:
        InvalidRequestError: If the payload is malformed.
    """
    try:
        return AnalysisRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid analysis request: {e}") from e


def parse_submission(payload: dict[str, Any]) -> tuple[FormRecord, list[SessionResponse]]:
    """Validate a {"form": ..., "sessions": [...]} payload.

    Raises:
        InvalidRequestError: If the form or any session is malformed.
    """
    if "form" not in payload:
        raise InvalidRequestError("Submission is missing 'form'")

    try:
        form = FormRecord.model_validate(payload["form"])
        sessions = [SessionResponse.model_validate(s) for s in payload.get("sessions", [])]
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid submission: {e}") from e

    return form, sessions
