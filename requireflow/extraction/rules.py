"""Keyword tables for requirement classification.

Tables are ordered tuples evaluated first-match-wins; groups overlap,
so their order decides the outcome.
"""

from requireflow.core.models import Priority

GENERAL_CATEGORY = "General Requirements"

CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("function", "feature", "capability", "what should", "how should", "behavior"),
        "Functional Requirements",
    ),
    (
        ("performance", "speed", "load", "response time", "throughput", "scalability"),
        "Performance Requirements",
    ),
    (
        ("security", "authentication", "authorization", "access", "permission", "privacy"),
        "Security Requirements",
    ),
    (
        ("interface", "ui", "ux", "design", "layout", "appearance"),
        "User Interface Requirements",
    ),
    (
        ("integration", "api", "external", "third-party", "connect", "sync"),
        "Integration Requirements",
    ),
    (
        ("data", "database", "storage", "backup", "migration", "import"),
        "Data Requirements",
    ),
    (
        ("process", "workflow", "business", "procedure", "approval", "review"),
        "Business Process Requirements",
    ),
    (
        ("compliance", "regulation", "standard", "audit", "legal", "policy"),
        "Compliance Requirements",
    ),
)

HIGH_PRIORITY_KEYWORDS = (
    "critical",
    "essential",
    "must",
    "required",
    "mandatory",
    "urgent",
    "important",
    "vital",
    "crucial",
    "necessary",
    "core",
    "primary",
)

LOW_PRIORITY_KEYWORDS = (
    "nice to have",
    "optional",
    "future",
    "enhancement",
    "wish",
    "would like",
    "could",
    "maybe",
    "eventually",
    "later",
)

# Detailed answers and broad selections read as high priority
LONG_ANSWER_THRESHOLD = 100
MANY_SELECTIONS_THRESHOLD = 3

BASELINE_CRITERIA = (
    "Requirement is clearly defined and testable",
    "Implementation meets specified functionality",
    "User acceptance testing passes successfully",
)

# (question keyword, criteria)
KEYWORD_CRITERIA: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "security",
        (
            "Security requirements are met and verified",
            "Access controls are properly implemented",
        ),
    ),
    (
        "performance",
        (
            "Performance benchmarks are met",
            "Load testing validates performance requirements",
        ),
    ),
    (
        "integration",
        (
            "Integration points are tested and functional",
            "Data flow between systems is verified",
        ),
    ),
)

# (question keywords, answer keywords, value)
BUSINESS_VALUE_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...], str], ...] = (
    (
        ("revenue", "profit", "cost"),
        ("money",),
        "High - Direct financial impact on business operations",
    ),
    (
        ("customer", "user", "client"),
        ("satisfaction",),
        "High - Improves customer experience and satisfaction",
    ),
    (
        ("efficiency", "productivity", "automation"),
        ("faster",),
        "Medium - Enhances operational efficiency",
    ),
    (
        ("compliance", "regulation", "legal"),
        ("required",),
        "High - Ensures regulatory compliance and risk mitigation",
    ),
    (
        ("reporting", "analytics", "insight"),
        ("decision",),
        "Medium - Supports data-driven decision making",
    ),
)

DEFAULT_BUSINESS_VALUE = "Medium - Supports business objectives and user needs"

TYPE_NOTES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("checkbox", "radio"), "Consider using enumeration or configuration-driven approach"),
    (("number",), "Implement proper input validation and range checking"),
    (("date",), "Consider timezone handling and date format localization"),
    (("email",), "Implement RFC-compliant email validation"),
)

KEYWORD_NOTES: tuple[tuple[str, str], ...] = (
    ("integration", "Design with API versioning and error handling in mind"),
    ("security", "Follow security best practices and conduct security review"),
    ("performance", "Consider caching strategies and performance monitoring"),
)


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Whether any keyword occurs as a substring of text."""
    return any(keyword in text for keyword in keywords)


def priority_from_keywords(text: str) -> Priority | None:
    """High if an urgency keyword occurs, Low if a deferral keyword does."""
    if contains_any(text, HIGH_PRIORITY_KEYWORDS):
        return Priority.HIGH
    if contains_any(text, LOW_PRIORITY_KEYWORDS):
        return Priority.LOW
    return None
