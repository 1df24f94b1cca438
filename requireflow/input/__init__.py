"""Input handling for stored forms and client sessions."""

from requireflow.input.sessions import (
    FormRecord,
    InvalidRequestError,
    SessionAnswer,
    SessionResponse,
    build_analysis_request,
    parse_request,
    parse_submission,
)

__all__ = [
    "FormRecord",
    "InvalidRequestError",
    "SessionAnswer",
    "SessionResponse",
    "build_analysis_request",
    "parse_request",
    "parse_submission",
]
