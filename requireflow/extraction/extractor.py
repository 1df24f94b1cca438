"""Requirement extraction from question/answer pairs.

Each valid response becomes one RequirementItem. Classification is a
fixed set of case-insensitive keyword rules; no rule ever fails, and
generic fallback text is used when nothing matches.
"""

import re
from typing import Any

from requireflow.core.models import Priority, QuestionType, RawResponseItem, RequirementItem
from requireflow.extraction.rules import (
    BASELINE_CRITERIA,
    BUSINESS_VALUE_RULES,
    CATEGORY_RULES,
    DEFAULT_BUSINESS_VALUE,
    GENERAL_CATEGORY,
    KEYWORD_CRITERIA,
    KEYWORD_NOTES,
    LONG_ANSWER_THRESHOLD,
    MANY_SELECTIONS_THRESHOLD,
    TYPE_NOTES,
    contains_any,
    priority_from_keywords,
)
from requireflow.normalization import format_answer, is_valid_response, plain_text

_QUESTION_PUNCTUATION = re.compile(r"[?:]")


def requirement_id(number: int) -> str:
    """Format a 1-based requirement number (7 -> 'REQ-007')."""
    return f"REQ-{number:03d}"


class RequirementExtractor:
    """Converts raw responses into structured requirements.

    Stateless: ids are numbered per call, so repeated calls with the
    same input produce identical output.
    """

    def extract(self, responses: list[RawResponseItem]) -> list[RequirementItem]:
        """Extract one requirement per valid response, in input order.

        Invalid responses are skipped and do not consume an id.

        Args:
            responses: Raw responses in submission order.

        Returns:
            Requirements numbered REQ-001, REQ-002, ... over valid responses.
        """
        requirements: list[RequirementItem] = []

        for response in responses:
            if not is_valid_response(response.answer):
                continue
            requirements.append(
                self.build_requirement(
                    number=len(requirements) + 1,
                    question=response.question,
                    answer=response.answer,
                    question_type=response.question_type,
                )
            )

        return requirements

    def build_requirement(
        self,
        number: int,
        question: str,
        answer: Any,
        question_type: str,
    ) -> RequirementItem:
        """Build a single requirement from one question/answer pair."""
        return RequirementItem(
            id=requirement_id(number),
            category=self.categorize(question),
            priority=self.determine_priority(question, answer),
            description=self.format_description(question, answer, question_type),
            acceptance_criteria=self.acceptance_criteria(question, answer, question_type),
            business_value=self.business_value(question, answer),
            technical_notes=self.technical_notes(question, answer, question_type),
        )

    def categorize(self, question: str) -> str:
        """Return the first category whose keywords occur in the question."""
        question_lower = question.lower()
        for keywords, category in CATEGORY_RULES:
            if contains_any(question_lower, keywords):
                return category
        return GENERAL_CATEGORY

    def determine_priority(self, question: str, answer: Any) -> Priority:
        """Classify urgency.

        Question keywords win over answer keywords; answer size is the
        last resort before Medium.
        """
        for text in (question.lower(), plain_text(answer).lower()):
            priority = priority_from_keywords(text)
            if priority is not None:
                return priority

        if isinstance(answer, str) and len(answer) > LONG_ANSWER_THRESHOLD:
            return Priority.HIGH
        if isinstance(answer, (list, tuple)) and len(answer) > MANY_SELECTIONS_THRESHOLD:
            return Priority.HIGH
        return Priority.MEDIUM

    def format_description(self, question: str, answer: Any, question_type: str) -> str:
        """Phrase the requirement as a 'system shall' sentence."""
        formatted = format_answer(answer, question_type)
        subject = _QUESTION_PUNCTUATION.sub("", question.lower())

        if question_type == QuestionType.CHECKBOX and isinstance(answer, (list, tuple)):
            return (
                f"The system shall support {subject} "
                f"with the following capabilities: {formatted}"
            )
        if question_type in (QuestionType.RADIO, QuestionType.SELECT):
            return f"For {subject}, the system shall implement: {formatted}"
        if question_type == QuestionType.NUMBER:
            return f"The system shall meet the requirement for {subject} with a value of {formatted}"
        if question_type == QuestionType.DATE:
            return f"The system shall handle {subject} with the specified date: {formatted}"
        return f"Regarding {subject}: {formatted}"

    def acceptance_criteria(self, question: str, answer: Any, question_type: str) -> list[str]:
        """Baseline criteria, then type-specific, then keyword-triggered."""
        criteria = list(BASELINE_CRITERIA)

        if question_type == QuestionType.CHECKBOX and isinstance(answer, (list, tuple)):
            criteria.extend(f"System successfully supports: {item}" for item in answer)
            criteria.append("All selected options are fully functional")
        elif question_type == QuestionType.NUMBER:
            criteria.append(f"Numeric value validation is implemented ({plain_text(answer)})")
            criteria.append("Input constraints are properly enforced")
        elif question_type == QuestionType.EMAIL:
            criteria.append("Email format validation is implemented")
            criteria.append("Invalid email addresses are rejected")
        elif question_type == QuestionType.DATE:
            criteria.append("Date picker functionality is available")
            criteria.append("Date format validation is implemented")
            criteria.append("Invalid dates are handled appropriately")

        question_lower = question.lower()
        for keyword, extra in KEYWORD_CRITERIA:
            if keyword in question_lower:
                criteria.extend(extra)

        return criteria

    def business_value(self, question: str, answer: Any) -> str:
        """Pick the first business-value line whose keywords match."""
        question_lower = question.lower()
        answer_lower = plain_text(answer).lower()

        for question_keywords, answer_keywords, value in BUSINESS_VALUE_RULES:
            if contains_any(question_lower, question_keywords) or contains_any(
                answer_lower, answer_keywords
            ):
                return value
        return DEFAULT_BUSINESS_VALUE

    def technical_notes(self, question: str, answer: Any, question_type: str) -> str:
        """Join type-driven and keyword-driven notes with '; '."""
        notes: list[str] = []

        for types, note in TYPE_NOTES:
            if question_type in types:
                notes.append(note)

        question_lower = question.lower()
        for keyword, note in KEYWORD_NOTES:
            if keyword in question_lower:
                notes.append(note)

        return "; ".join(notes)
