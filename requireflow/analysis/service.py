"""Analysis facade.

Runs normalization, extraction and synthesis over one request and
returns the aggregate AnalysisResult for the document renderer.
"""

import logging

from requireflow.core.models import AnalysisRequest, AnalysisResult
from requireflow.extraction import RequirementExtractor
from requireflow.synthesis import NarrativeSynthesizer

logger = logging.getLogger(__name__)


class AnalysisService:
    """Stateless entry point for BRD analysis.

    Holds no state between calls; any number of instances may be used
    concurrently.
    """

    def __init__(
        self,
        extractor: RequirementExtractor | None = None,
        synthesizer: NarrativeSynthesizer | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            extractor: Optional requirement extractor. Defaults to a new one.
            synthesizer: Optional narrative synthesizer. Defaults to a new one.
        """
        self.extractor = extractor if extractor is not None else RequirementExtractor()
        self.synthesizer = synthesizer if synthesizer is not None else NarrativeSynthesizer()

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Analyze a request.

        Args:
            request: Form metadata and raw responses.

        Returns:
            The aggregate AnalysisResult.
        """
        logger.debug(
            "Analyzing %r for %r (%d responses)",
            request.form_title,
            request.client_name,
            len(request.responses),
        )
        responses = request.responses
        synth = self.synthesizer

        requirements = self.extractor.extract(responses)
        objectives = synth.business_objectives(responses, request.form_title)

        result = AnalysisResult(
            executive_summary=synth.executive_summary(
                request.form_title,
                request.client_name,
                requirements,
                objectives,
            ),
            project_overview=synth.project_overview(
                request.form_title,
                request.form_description,
                responses,
            ),
            business_objectives=objectives,
            stakeholders=synth.stakeholders(responses, request.client_name),
            requirements=requirements,
            assumptions=synth.assumptions(responses),
            constraints=synth.constraints(responses),
            risks=synth.risks(responses),
            success_criteria=synth.success_criteria(responses, objectives),
        )

        logger.debug("Extracted %d requirements", len(requirements))
        return result

    async def analyze_brd(self, request: AnalysisRequest) -> AnalysisResult:
        """Awaitable form of analyze() for async callers."""
        return self.analyze(request)


def create_service() -> AnalysisService:
    """Create an analysis service with the default rule set."""
    return AnalysisService()


_default_service = create_service()


def get_default_service() -> AnalysisService:
    """Return the shared module-level service.

    Sharing is safe because the service is stateless.
    """
    return _default_service
