"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from requireflow.core import AnalysisRequest, RawResponseItem


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_request() -> AnalysisRequest:
    """A request mixing every answer shape, including skipped answers."""
    return AnalysisRequest(
        form_title="Customer Portal Discovery",
        client_name="acme-corp",
        form_description=None,
        responses=[
            RawResponseItem(
                question="Which features must the portal include?",
                answer=["Login", "Billing", "Support tickets", "Reports"],
                question_type="checkbox",
            ),
            RawResponseItem(
                question="Preferred contact email?",
                answer="",
                question_type="email",
            ),
            RawResponseItem(
                question="What is critical for security access control?",
                answer="Yes",
                question_type="radio",
            ),
            RawResponseItem(
                question="How many concurrent users?",
                answer=500,
                question_type="number",
            ),
            RawResponseItem(
                question="Target go-live date?",
                answer="2024-03-15",
                question_type="date",
            ),
        ],
    )


@pytest.fixture
def empty_request() -> AnalysisRequest:
    """A request where no response carries a usable answer."""
    return AnalysisRequest(
        form_title="Blank Form",
        client_name="nobody",
        responses=[
            RawResponseItem(question="Anything?", answer=None, question_type="text"),
            RawResponseItem(question="Pick some", answer=[], question_type="checkbox"),
            RawResponseItem(question="Count", answer=0, question_type="number"),
        ],
    )
