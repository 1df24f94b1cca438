"""Markdown rendition of the Business Requirements Document."""

from datetime import datetime, timezone

from requireflow.core.models import AnalysisResult, RequirementItem
from requireflow.document.summary import summarize_requirements
from requireflow.input.sessions import FormRecord, SessionResponse
from requireflow.normalization import format_answer, format_long_date

DESCRIPTION_LIMIT = 80
BUSINESS_VALUE_LIMIT = 60


def truncate(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with '...'."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def _bullets(lines: list[str]) -> list[str]:
    return [f"- {line}" for line in lines]


def _table_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _requirements_table(requirements: list[RequirementItem]) -> list[str]:
    lines = [
        "| ID | Category | Priority | Description | Business Value |",
        "| --- | --- | --- | --- | --- |",
    ]
    for req in requirements:
        cells = [
            req.id,
            req.category,
            req.priority.value,
            truncate(req.description, DESCRIPTION_LIMIT),
            truncate(req.business_value, BUSINESS_VALUE_LIMIT),
        ]
        lines.append("| " + " | ".join(_table_cell(c) for c in cells) + " |")
    return lines


def _detailed_requirements(requirements: list[RequirementItem]) -> list[str]:
    lines: list[str] = []
    categories = list(dict.fromkeys(r.category for r in requirements))

    for index, category in enumerate(categories, 1):
        lines.extend([f"### 8.{index} {category}", ""])
        for req in requirements:
            if req.category != category:
                continue
            lines.extend(
                [
                    f"#### {req.id}: {truncate(req.description, DESCRIPTION_LIMIT)}",
                    "",
                    f"**Priority:** {req.priority.value}",
                    "",
                    "**Description:**",
                    "",
                    req.description,
                    "",
                    "**Business Value:**",
                    "",
                    req.business_value,
                    "",
                    "**Acceptance Criteria:**",
                    "",
                    *_bullets(req.acceptance_criteria),
                    "",
                ]
            )
            if req.technical_notes:
                lines.extend(["**Technical Notes:**", "", req.technical_notes, ""])
    return lines


def render_markdown(
    analysis: AnalysisResult,
    form: FormRecord,
    sessions: list[SessionResponse],
    generated_at: datetime | None = None,
    document_version: str = "1.0",
    company_name: str = "RequireFlow",
) -> str:
    """Lay out an analysis as a numbered Markdown BRD.

    Args:
        analysis: The analysis result to render.
        form: The form the sessions belong to.
        sessions: The client submissions, listed in the appendix.
        generated_at: Generation timestamp. Defaults to now (UTC).
        document_version: Version string shown in the document information.
        company_name: Name shown in the footer.

    Returns:
        The document as Markdown text.
    """
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    summary = summarize_requirements(analysis.requirements)

    lines: list[str] = [
        "# BUSINESS REQUIREMENTS DOCUMENT",
        "",
        f"## {form.title}",
        "",
        f"_Business Requirements Document for {form.client_name}_",
        "",
        "## 1. Document Information",
        "",
        *_bullets(
            [
                f"Document Title: Business Requirements Document - {form.title}",
                f"Client: {form.client_name}",
                f"Document Version: {document_version}",
                f"Date Created: {format_long_date(generated_at.date())}",
                f"Form Created: {format_long_date(form.created_at.date())}",
                f"Total Responses Analyzed: {len(sessions)}",
                "Document Status: Final",
                "Analysis Method: Rule-Based Requirements Analysis",
            ]
        ),
        "",
        "## 2. Executive Summary",
        "",
        analysis.executive_summary,
        "",
        "## 3. Project Overview",
        "",
        analysis.project_overview,
        "",
        "## 4. Business Objectives",
        "",
        *_bullets(analysis.business_objectives),
        "",
        "## 5. Stakeholders",
        "",
        *_bullets(analysis.stakeholders),
        "",
        "## 6. Requirements Summary",
        "",
        *_bullets(
            [
                f"Total Requirements Identified: {summary.total}",
                f"High Priority: {summary.high}",
                f"Medium Priority: {summary.medium}",
                f"Low Priority: {summary.low}",
                f"Categories: {', '.join(summary.categories)}",
            ]
        ),
        "",
        "## 7. Requirements Overview",
        "",
        *_requirements_table(analysis.requirements),
        "",
        "## 8. Detailed Requirements",
        "",
        *_detailed_requirements(analysis.requirements),
        "## 9. Assumptions",
        "",
        *_bullets(analysis.assumptions),
        "",
        "## 10. Constraints",
        "",
        *_bullets(analysis.constraints),
        "",
        "## 11. Risks and Mitigation",
        "",
        *_bullets(analysis.risks),
        "",
        "## 12. Success Criteria",
        "",
        *_bullets(analysis.success_criteria),
        "",
        "## 13. Appendices",
        "",
        "### 13.1 Response Analysis Summary",
        "",
    ]

    for index, session in enumerate(sessions, 1):
        lines.extend(
            [f"#### Response #{index} ({format_long_date(session.created_at.date())})", ""]
        )
        for answer in session.responses:
            answer_text = format_answer(answer.answer, answer.question_type)
            lines.extend([f"**Q:** {answer.question_label}", "", f"A: {answer_text}", ""])

    lines.extend(
        [
            "---",
            "",
            f"Generated on {format_long_date(generated_at.date())} "
            f"at {generated_at:%H:%M} - {company_name}",
            "",
        ]
    )
    return "\n".join(lines)
