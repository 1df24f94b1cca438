"""Answer normalization and validity checks."""

from requireflow.normalization.normalizer import (
    NO_ANSWER,
    format_answer,
    format_long_date,
    is_valid_response,
    parse_date,
    plain_text,
)

__all__ = [
    "NO_ANSWER",
    "format_answer",
    "format_long_date",
    "is_valid_response",
    "parse_date",
    "plain_text",
]
