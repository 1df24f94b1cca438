"""Narrative synthesis for document-level BRD sections.

Every section starts from a fixed baseline and adds lines gated on
keywords found in the lower-cased text of all question/answer pairs.
"""

from requireflow.core.models import Priority, RawResponseItem, RequirementItem
from requireflow.normalization import plain_text

# (keyword, objective) in the order objectives are reported
OBJECTIVE_THEMES: tuple[tuple[str, str], ...] = (
    ("efficiency", "Improve operational efficiency and streamline processes"),
    ("customer", "Enhance customer experience and satisfaction"),
    ("automation", "Automate manual processes to reduce errors and save time"),
    ("integration", "Integrate systems for better data flow and coordination"),
    ("reporting", "Provide comprehensive reporting and analytics capabilities"),
    ("security", "Strengthen security measures and ensure data protection"),
    ("scalability", "Build scalable solutions to support business growth"),
    ("compliance", "Ensure regulatory compliance and risk management"),
)

DEFAULT_OBJECTIVES = (
    "Deliver a solution that meets specified requirements",
    "Ensure user satisfaction and system usability",
    "Maintain system reliability and performance",
)

BASE_STAKEHOLDERS = (
    "Project Manager - Overall project coordination",
    "Business Analyst - Requirements analysis and documentation",
    "Development Team - System implementation",
    "Quality Assurance Team - Testing and validation",
    "End Users - System users and beneficiaries",
)

STAKEHOLDER_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("admin", "administrator"), ("System Administrator - System maintenance and configuration",)),
    (("manager", "management"), ("Management Team - Strategic oversight and approval",)),
    (("customer", "client"), ("Customer Support Team - User assistance and feedback",)),
    (("finance", "accounting"), ("Finance Team - Budget and financial oversight",)),
)

BASE_ASSUMPTIONS = (
    "All required resources and personnel will be available as planned",
    "Stakeholders will provide timely feedback and approvals",
    "Technical infrastructure meets minimum system requirements",
    "User training will be provided before system deployment",
    "Data migration (if required) will be completed successfully",
)

ASSUMPTION_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (
        ("integration",),
        (
            "Third-party systems will be available for integration testing",
            "API documentation and access will be provided by external vendors",
        ),
    ),
    (
        ("data", "database"),
        (
            "Data quality meets acceptable standards for migration",
            "Backup and recovery procedures are in place",
        ),
    ),
    (("mobile", "app"), ("Mobile device compatibility requirements are clearly defined",)),
)

BASE_CONSTRAINTS = (
    "Project must be completed within approved budget",
    "Solution must comply with existing security policies",
    "System must integrate with current technology stack",
    "Implementation must minimize disruption to ongoing operations",
)

CONSTRAINT_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("budget", "cost"), ("Budget limitations may impact scope and timeline",)),
    (("timeline", "deadline"), ("Fixed timeline requirements must be met",)),
    (("legacy", "existing"), ("Must maintain compatibility with legacy systems",)),
    (("regulation", "compliance"), ("Must adhere to regulatory and compliance requirements",)),
)

BASE_RISKS = (
    "Technical complexity may lead to implementation delays",
    "Scope creep could impact timeline and budget",
    "Integration challenges with existing systems",
    "User adoption may be slower than anticipated",
    "Data quality issues could affect system performance",
)

RISK_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("integration", "api"), ("Third-party system dependencies may cause integration delays",)),
    (("performance", "load"), ("Performance requirements may not be met under high load",)),
    (("security",), ("Security vulnerabilities could compromise system integrity",)),
    (("data", "migration"), ("Data migration complexity may cause project delays",)),
)

BASE_SUCCESS_CRITERIA = (
    "All functional requirements are implemented and tested",
    "System performance meets specified benchmarks",
    "User acceptance testing is completed successfully",
    "System is deployed without critical issues",
    "User training is completed and feedback is positive",
)

# Matched against the objective text itself, case-sensitive
OBJECTIVE_CRITERIA: tuple[tuple[str, str], ...] = (
    ("efficiency", "Process efficiency improvements are measurable and documented"),
    ("customer", "Customer satisfaction scores meet or exceed targets"),
    ("automation", "Manual process reduction is achieved as specified"),
)


def response_text(responses: list[RawResponseItem]) -> str:
    """Lower-cased 'question answer' text of every response, space-joined."""
    return " ".join(
        f"{response.question} {plain_text(response.answer)}" for response in responses
    ).lower()


def _apply_rules(
    baseline: tuple[str, ...],
    rules: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...],
    text: str,
) -> list[str]:
    lines = list(baseline)
    for keywords, extra in rules:
        if any(keyword in text for keyword in keywords):
            lines.extend(extra)
    return lines


class NarrativeSynthesizer:
    """Builds the document-level sections of a BRD.

    All methods are pure; they read the raw responses and the already
    extracted requirements and return fresh lists or strings.
    """

    def business_objectives(self, responses: list[RawResponseItem], form_title: str) -> list[str]:
        """Objectives for every theme mentioned in the title or responses.

        Falls back to generic objectives when no theme matches. The
        result is de-duplicated, keeping first-occurrence order.
        """
        text = " ".join([form_title.lower(), response_text(responses)])
        objectives = [objective for keyword, objective in OBJECTIVE_THEMES if keyword in text]

        if not objectives:
            objectives = list(DEFAULT_OBJECTIVES)

        return list(dict.fromkeys(objectives))

    def stakeholders(self, responses: list[RawResponseItem], client_name: str) -> list[str]:
        baseline = (f"{client_name} - Primary Client", *BASE_STAKEHOLDERS)
        return _apply_rules(baseline, STAKEHOLDER_RULES, response_text(responses))

    def assumptions(self, responses: list[RawResponseItem]) -> list[str]:
        return _apply_rules(BASE_ASSUMPTIONS, ASSUMPTION_RULES, response_text(responses))

    def constraints(self, responses: list[RawResponseItem]) -> list[str]:
        return _apply_rules(BASE_CONSTRAINTS, CONSTRAINT_RULES, response_text(responses))

    def risks(self, responses: list[RawResponseItem]) -> list[str]:
        return _apply_rules(BASE_RISKS, RISK_RULES, response_text(responses))

    def success_criteria(
        self,
        responses: list[RawResponseItem],
        objectives: list[str],
    ) -> list[str]:
        """Baseline criteria plus one per objective theme found."""
        criteria = list(BASE_SUCCESS_CRITERIA)
        for objective in objectives:
            for keyword, criterion in OBJECTIVE_CRITERIA:
                if keyword in objective:
                    criteria.append(criterion)
        return criteria

    def executive_summary(
        self,
        form_title: str,
        client_name: str,
        requirements: list[RequirementItem],
        objectives: list[str],
    ) -> str:
        """Three-paragraph summary with exact counts from the requirements."""
        total = len(requirements)
        high_priority = sum(1 for r in requirements if r.priority == Priority.HIGH)
        categories = list(dict.fromkeys(r.category for r in requirements))
        aims = " and ".join(objectives[:2]).lower()

        return (
            f"This Business Requirements Document (BRD) presents a comprehensive analysis "
            f"of the {form_title} project for {client_name}. Through systematic requirements "
            f"gathering and analysis, we have identified {total} distinct requirements across "
            f"{len(categories)} major categories. Of these, {high_priority} are classified as "
            f"high priority and require immediate attention during the implementation phase."
            "\n\n"
            f"The project aims to {aims}. This document serves as the foundation for system "
            f"design, development planning, and project execution. All requirements have been "
            f"analyzed for business value, technical feasibility, and implementation priority "
            f"to ensure successful project delivery."
            "\n\n"
            f"Key focus areas include {', '.join(categories[:3])}, which represent the core "
            f"functional domains of the proposed solution. The requirements outlined in this "
            f"document will guide the development team in creating a solution that meets "
            f"business objectives while maintaining technical excellence and user satisfaction."
        )

    def project_overview(
        self,
        form_title: str,
        form_description: str | None = None,
        responses: list[RawResponseItem] | None = None,
    ) -> str:
        base = (
            f"The {form_title} project represents a strategic initiative designed to address "
            f"specific business needs and operational requirements. "
        )

        if form_description:
            return (
                base
                + form_description
                + " This project will deliver a comprehensive solution that aligns with "
                "business objectives and provides measurable value to stakeholders."
            )

        response_count = len(responses) if responses else 0
        return base + (
            f"Based on comprehensive requirements gathering involving {response_count} "
            f"detailed response(s), this project will deliver a tailored solution that "
            f"addresses identified business needs and operational challenges. The solution "
            f"will be designed to provide immediate value while supporting long-term "
            f"business growth and scalability."
        )
