"""Tests for the analysis facade."""

import asyncio

from requireflow.analysis import AnalysisService, create_service, get_default_service
from requireflow.core import AnalysisRequest, AnalysisResult, Priority
from requireflow.synthesis.synthesizer import DEFAULT_OBJECTIVES


class TestAnalysisService:
    """Tests for AnalysisService.analyze."""

    def test_sample_analysis(self, sample_request: AnalysisRequest) -> None:
        """Every section is populated from the sample request."""
        result = create_service().analyze(sample_request)

        assert isinstance(result, AnalysisResult)
        assert [r.id for r in result.requirements] == ["REQ-001", "REQ-002", "REQ-003", "REQ-004"]
        assert result.business_objectives == [
            "Enhance customer experience and satisfaction",
            "Strengthen security measures and ensure data protection",
        ]
        assert result.stakeholders[0] == "acme-corp - Primary Client"
        assert len(result.stakeholders) == 6
        assert len(result.assumptions) == 5
        assert len(result.constraints) == 4
        assert result.risks[-1] == "Security vulnerabilities could compromise system integrity"
        assert result.success_criteria[-1] == "Customer satisfaction scores meet or exceed targets"
        assert "identified 4 distinct requirements across 3 major categories" in (
            result.executive_summary
        )
        assert "Of these, 2 are classified as high priority" in result.executive_summary
        assert "involving 5 detailed response(s)" in result.project_overview

    def test_no_valid_responses(self, empty_request: AnalysisRequest) -> None:
        """Zero valid responses still produce a complete result."""
        result = AnalysisService().analyze(empty_request)

        assert result.requirements == []
        assert result.business_objectives == list(DEFAULT_OBJECTIVES)
        assert "identified 0 distinct requirements across 0 major categories" in (
            result.executive_summary
        )

    def test_idempotent(self, sample_request: AnalysisRequest) -> None:
        """Repeated calls yield equal results."""
        service = get_default_service()
        first = service.analyze(sample_request)
        second = service.analyze(sample_request)

        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_independent_services_agree(self, sample_request: AnalysisRequest) -> None:
        """Separate instances share no state."""
        assert AnalysisService().analyze(sample_request) == AnalysisService().analyze(
            sample_request
        )

    def test_async_matches_sync(self, sample_request: AnalysisRequest) -> None:
        """The awaitable form returns the same result."""
        service = AnalysisService()
        result = asyncio.run(service.analyze_brd(sample_request))
        assert result == service.analyze(sample_request)

    def test_description_used_in_overview(self, sample_request: AnalysisRequest) -> None:
        request = sample_request.model_copy(update={"form_description": "Self-service billing."})
        result = AnalysisService().analyze(request)
        assert "Self-service billing." in result.project_overview


class TestSerialization:
    """Tests for the renderer-facing payload shape."""

    def test_camel_case_dump(self, sample_request: AnalysisRequest) -> None:
        """Results dump with camelCase keys."""
        data = AnalysisService().analyze(sample_request).model_dump(mode="json", by_alias=True)

        assert set(data) == {
            "executiveSummary",
            "projectOverview",
            "businessObjectives",
            "stakeholders",
            "requirements",
            "assumptions",
            "constraints",
            "risks",
            "successCriteria",
        }
        requirement = data["requirements"][0]
        assert requirement["priority"] == "High"
        assert len(requirement["acceptanceCriteria"]) >= 3
        assert "businessValue" in requirement
        assert "technicalNotes" in requirement

    def test_request_accepts_camel_case(self) -> None:
        """Requests validate from the renderer's camelCase payload."""
        request = AnalysisRequest.model_validate(
            {
                "formTitle": "Intake",
                "clientName": "acme-corp",
                "responses": [{"question": "Q?", "answer": "A", "questionType": "text"}],
            }
        )
        result = AnalysisService().analyze(request)
        assert result.requirements[0].priority == Priority.MEDIUM
