"""Answer normalization.

Turns raw answers of any shape (missing, scalar, multi-select list,
date string, keyed structure) into display text, and decides which
answers are substantive enough to become requirements.
"""

import json
import math
from datetime import date, datetime
from typing import Any

from requireflow.core.models import QuestionType

NO_ANSWER = "No answer provided"

# Accepted in addition to ISO 8601
_DATE_FORMATS = (
    "%m/%d/%Y",
    "%d %B %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


def format_answer(answer: Any, question_type: str) -> str:
    """Render an answer as display text.

    Args:
        answer: The raw answer value.
        question_type: The question type tag.

    Returns:
        Display text. Never raises.
    """
    if answer is None:
        return NO_ANSWER

    if isinstance(answer, (list, tuple)):
        return ", ".join(_scalar_text(item) for item in answer)

    if question_type == QuestionType.DATE:
        parsed = parse_date(answer)
        if parsed is None:
            return plain_text(answer)
        return format_long_date(parsed)

    if isinstance(answer, dict):
        return json.dumps(answer, indent=2, sort_keys=True, default=str)

    return _scalar_text(answer)


def is_valid_response(answer: Any) -> bool:
    """Whether an answer should produce a requirement.

    Falsy scalars (None, 0, False, ""), empty lists, NaN and the
    no-answer sentinel are rejected. Keyed answers are always kept, even
    when empty.
    """
    if isinstance(answer, dict):
        return True
    if not answer:
        return False
    if isinstance(answer, float) and math.isnan(answer):
        return False
    if answer == NO_ANSWER:
        return False
    return True


def plain_text(answer: Any) -> str:
    """Flatten an answer into text for keyword matching."""
    if answer is None:
        return ""
    if isinstance(answer, (list, tuple)):
        return ", ".join(_scalar_text(item) for item in answer)
    if isinstance(answer, dict):
        return json.dumps(answer, sort_keys=True, default=str)
    return _scalar_text(answer)


def parse_date(value: Any) -> date | None:
    """Parse a calendar date, returning None when it can't be read."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_long_date(value: date) -> str:
    """Format a date as e.g. 'March 5, 2024'."""
    return f"{value:%B} {value.day}, {value.year}"


def _scalar_text(item: Any) -> str:
    """Scalar display text: lower-case booleans, whole floats without ".0"."""
    if item is None:
        return ""
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)
