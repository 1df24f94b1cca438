"""Tests for narrative synthesis."""

import pytest

from requireflow.core import Priority, RawResponseItem, RequirementItem
from requireflow.synthesis import NarrativeSynthesizer, response_text
from requireflow.synthesis.synthesizer import (
    BASE_ASSUMPTIONS,
    BASE_CONSTRAINTS,
    BASE_RISKS,
    BASE_SUCCESS_CRITERIA,
    DEFAULT_OBJECTIVES,
)

EFFICIENCY = "Improve operational efficiency and streamline processes"
CUSTOMER = "Enhance customer experience and satisfaction"
AUTOMATION = "Automate manual processes to reduce errors and save time"
SECURITY = "Strengthen security measures and ensure data protection"
COMPLIANCE = "Ensure regulatory compliance and risk management"


@pytest.fixture
def synthesizer() -> NarrativeSynthesizer:
    """Create a synthesizer instance."""
    return NarrativeSynthesizer()


def make_responses(*pairs: tuple[str, object]) -> list[RawResponseItem]:
    """Create text responses from (question, answer) pairs."""
    return [RawResponseItem(question=q, answer=a, question_type="text") for q, a in pairs]


def make_requirement(number: int, category: str, priority: Priority) -> RequirementItem:
    """Create a RequirementItem for testing."""
    return RequirementItem(
        id=f"REQ-{number:03d}",
        category=category,
        priority=priority,
        description="Regarding something: yes",
        acceptance_criteria=["a", "b", "c"],
        business_value="Medium - Supports business objectives and user needs",
    )


class TestResponseText:
    """Tests for the shared keyword text."""

    def test_joins_and_lowers(self) -> None:
        responses = make_responses(("Q One?", "Yes"), ("Q Two?", ["A", "B"]))
        assert response_text(responses) == "q one? yes q two? a, b"


class TestBusinessObjectives:
    """Tests for objective identification."""

    def test_defaults_when_no_theme(self, synthesizer: NarrativeSynthesizer) -> None:
        """Generic objectives are used when no theme appears."""
        responses = make_responses(("Favorite color?", "blue"))
        objectives = synthesizer.business_objectives(responses, "Intake")
        assert objectives == list(DEFAULT_OBJECTIVES)

    def test_theme_order(self, synthesizer: NarrativeSynthesizer) -> None:
        """Objectives follow the fixed theme order, not the text order."""
        responses = make_responses(("Compliance first?", "then efficiency"))
        objectives = synthesizer.business_objectives(responses, "Intake")
        assert objectives == [EFFICIENCY, COMPLIANCE]

    def test_title_is_scanned(self, synthesizer: NarrativeSynthesizer) -> None:
        """The form title contributes themes."""
        assert synthesizer.business_objectives([], "Security Review") == [SECURITY]

    def test_no_duplicates(self, synthesizer: NarrativeSynthesizer) -> None:
        """Repeated keywords yield a single objective."""
        responses = make_responses(("Customer needs?", "customer portal"), ("Customer?", "yes"))
        objectives = synthesizer.business_objectives(responses, "Customer Intake")
        assert objectives == [CUSTOMER]
        assert len(set(objectives)) == len(objectives)


class TestStakeholders:
    """Tests for stakeholder identification."""

    def test_baseline_only(self, synthesizer: NarrativeSynthesizer) -> None:
        """Without keywords only the six fixed roles are listed."""
        responses = make_responses(("Favorite color?", "blue"))
        stakeholders = synthesizer.stakeholders(responses, "acme-corp")

        assert len(stakeholders) == 6
        assert "acme-corp" in stakeholders[0]
        assert stakeholders[0] == "acme-corp - Primary Client"

    def test_all_optional_roles(self, synthesizer: NarrativeSynthesizer) -> None:
        """Each optional role is gated independently."""
        responses = make_responses(("Admin and manager roles?", "customer finance"))
        stakeholders = synthesizer.stakeholders(responses, "acme-corp")

        assert len(stakeholders) == 10
        assert stakeholders[6:] == [
            "System Administrator - System maintenance and configuration",
            "Management Team - Strategic oversight and approval",
            "Customer Support Team - User assistance and feedback",
            "Finance Team - Budget and financial oversight",
        ]

    def test_single_optional_role(self, synthesizer: NarrativeSynthesizer) -> None:
        responses = make_responses(("Who handles accounting?", "Jo"))
        stakeholders = synthesizer.stakeholders(responses, "acme-corp")
        assert stakeholders[6:] == ["Finance Team - Budget and financial oversight"]


class TestBaselineSections:
    """Tests for assumptions, constraints and risks."""

    def test_baselines(self, synthesizer: NarrativeSynthesizer) -> None:
        """Keyword-free input yields only the baseline lists."""
        responses = make_responses(("Favorite color?", "blue"))

        assert synthesizer.assumptions(responses) == list(BASE_ASSUMPTIONS)
        assert synthesizer.constraints(responses) == list(BASE_CONSTRAINTS)
        assert synthesizer.risks(responses) == list(BASE_RISKS)

    def test_assumptions_all_topics(self, synthesizer: NarrativeSynthesizer) -> None:
        responses = make_responses(("Mobile integration?", "with our database"))
        assumptions = synthesizer.assumptions(responses)

        assert len(assumptions) == 10
        assert assumptions[:5] == list(BASE_ASSUMPTIONS)
        assert assumptions[-1] == "Mobile device compatibility requirements are clearly defined"

    def test_constraints_all_topics(self, synthesizer: NarrativeSynthesizer) -> None:
        responses = make_responses(("Budget and deadline?", "legacy compliance"))
        constraints = synthesizer.constraints(responses)

        assert constraints[4:] == [
            "Budget limitations may impact scope and timeline",
            "Fixed timeline requirements must be met",
            "Must maintain compatibility with legacy systems",
            "Must adhere to regulatory and compliance requirements",
        ]

    def test_risks_all_topics(self, synthesizer: NarrativeSynthesizer) -> None:
        responses = make_responses(("API load?", "security and migration"))
        risks = synthesizer.risks(responses)

        assert len(risks) == 9
        assert risks[5:] == [
            "Third-party system dependencies may cause integration delays",
            "Performance requirements may not be met under high load",
            "Security vulnerabilities could compromise system integrity",
            "Data migration complexity may cause project delays",
        ]


class TestSuccessCriteria:
    """Tests for success criteria."""

    def test_baseline_for_default_objectives(self, synthesizer: NarrativeSynthesizer) -> None:
        criteria = synthesizer.success_criteria([], list(DEFAULT_OBJECTIVES))
        assert criteria == list(BASE_SUCCESS_CRITERIA)

    def test_objective_specific(self, synthesizer: NarrativeSynthesizer) -> None:
        """Criteria are added for objectives whose text names the theme."""
        criteria = synthesizer.success_criteria([], [EFFICIENCY, CUSTOMER, AUTOMATION])

        assert criteria == list(BASE_SUCCESS_CRITERIA) + [
            "Process efficiency improvements are measurable and documented",
            "Customer satisfaction scores meet or exceed targets",
        ]

    def test_matches_objective_text(self, synthesizer: NarrativeSynthesizer) -> None:
        criteria = synthesizer.success_criteria([], ["Drive automation everywhere"])
        assert criteria[-1] == "Manual process reduction is achieved as specified"


class TestExecutiveSummary:
    """Tests for the executive summary."""

    def test_zero_requirements(self, synthesizer: NarrativeSynthesizer) -> None:
        summary = synthesizer.executive_summary("Intake", "acme-corp", [], list(DEFAULT_OBJECTIVES))

        assert "identified 0 distinct requirements across 0 major categories" in summary
        assert "Of these, 0 are classified as high priority" in summary

    def test_exact_counts(self, synthesizer: NarrativeSynthesizer) -> None:
        requirements = [
            make_requirement(1, "Security Requirements", Priority.HIGH),
            make_requirement(2, "Data Requirements", Priority.LOW),
            make_requirement(3, "Security Requirements", Priority.HIGH),
            make_requirement(4, "General Requirements", Priority.MEDIUM),
            make_requirement(5, "Compliance Requirements", Priority.HIGH),
        ]
        summary = synthesizer.executive_summary(
            "Portal", "acme-corp", requirements, [SECURITY, COMPLIANCE, EFFICIENCY]
        )
        paragraphs = summary.split("\n\n")

        assert len(paragraphs) == 3
        assert "the Portal project for acme-corp" in paragraphs[0]
        assert "identified 5 distinct requirements across 4 major categories" in paragraphs[0]
        assert "Of these, 3 are classified as high priority" in paragraphs[0]
        assert paragraphs[1].startswith(
            "The project aims to strengthen security measures and ensure data protection "
            "and ensure regulatory compliance and risk management."
        )
        assert paragraphs[2].startswith(
            "Key focus areas include Security Requirements, Data Requirements, "
            "General Requirements, which"
        )


class TestProjectOverview:
    """Tests for the project overview."""

    def test_with_description(self, synthesizer: NarrativeSynthesizer) -> None:
        overview = synthesizer.project_overview("Portal", "A self-service portal.", [])

        assert overview.startswith("The Portal project represents a strategic initiative")
        assert "A self-service portal." in overview
        assert "response(s)" not in overview

    def test_without_description(self, synthesizer: NarrativeSynthesizer) -> None:
        responses = make_responses(("A?", "x"), ("B?", ""))
        overview = synthesizer.project_overview("Portal", None, responses)
        assert "involving 2 detailed response(s)" in overview

    def test_empty_description_uses_count(self, synthesizer: NarrativeSynthesizer) -> None:
        overview = synthesizer.project_overview("Portal", "", make_responses(("A?", "x")))
        assert "involving 1 detailed response(s)" in overview

    def test_no_responses(self, synthesizer: NarrativeSynthesizer) -> None:
        overview = synthesizer.project_overview("Portal")
        assert "involving 0 detailed response(s)" in overview
