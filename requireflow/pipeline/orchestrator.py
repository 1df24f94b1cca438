"""Pipeline for analysis requests.

Runs the analysis service and attaches diagnostics describing which
responses contributed requirements.
"""

import logging
from datetime import datetime

from pydantic import BaseModel

from requireflow.analysis import AnalysisService, create_service
from requireflow.core.models import AnalysisRequest, AnalysisResult
from requireflow.diagnostics import AnalysisDiagnostic, DiagnosticWarning, ProcessingStatus
from requireflow.document import render_markdown
from requireflow.input import FormRecord, SessionResponse, build_analysis_request
from requireflow.normalization import is_valid_response

logger = logging.getLogger(__name__)


class PipelineConfig(BaseModel):
    """Configuration for the analysis pipeline."""

    document_version: str = "1.0"
    company_name: str = "RequireFlow"


class ProcessingResult(BaseModel):
    """Result of analyzing a single request."""

    analysis: AnalysisResult
    diagnostics: AnalysisDiagnostic

    @property
    def success(self) -> bool:
        """Whether at least one requirement was produced."""
        return self.diagnostics.status != ProcessingStatus.EMPTY


class Pipeline:
    """Analyzes requests and renders BRD documents."""

    def __init__(
        self,
        config: PipelineConfig | None = None,
        service: AnalysisService | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration. Defaults to PipelineConfig().
            service: Optional analysis service. If not provided, creates one.
        """
        self.config = config if config is not None else PipelineConfig()
        self.service = service if service is not None else create_service()

    def process(self, request: AnalysisRequest) -> ProcessingResult:
        """Analyze a request and collect diagnostics."""
        analysis = self.service.analyze(request)
        return ProcessingResult(
            analysis=analysis,
            diagnostics=self._diagnose(request),
        )

    def process_batch(self, requests: list[AnalysisRequest]) -> list[ProcessingResult]:
        """Process a batch of requests."""
        results = [self.process(r) for r in requests]
        logger.info(
            "Processed %d requests (%d requirements)",
            len(results),
            sum(len(r.analysis.requirements) for r in results),
        )
        return results

    def render_brd(
        self,
        form: FormRecord,
        sessions: list[SessionResponse],
        generated_at: datetime | None = None,
    ) -> tuple[ProcessingResult, str]:
        """Analyze stored sessions and render the Markdown BRD.

        Returns:
            The processing result and the rendered document.
        """
        result = self.process(build_analysis_request(form, sessions))
        document = render_markdown(
            result.analysis,
            form,
            sessions,
            generated_at=generated_at,
            document_version=self.config.document_version,
            company_name=self.config.company_name,
        )
        return result, document

    def _diagnose(self, request: AnalysisRequest) -> AnalysisDiagnostic:
        warnings: list[DiagnosticWarning] = []

        for position, response in enumerate(request.responses):
            if is_valid_response(response.answer):
                continue
            logger.debug("Skipping unanswered question %d: %r", position, response.question)
            warnings.append(
                DiagnosticWarning(
                    code="EMPTY_ANSWER",
                    message="Response has no usable answer and was skipped",
                    question=response.question,
                    position=position,
                )
            )

        total = len(request.responses)
        used = total - len(warnings)
        if used == 0:
            status = ProcessingStatus.EMPTY
        elif warnings:
            status = ProcessingStatus.PARTIAL
        else:
            status = ProcessingStatus.SUCCESS

        return AnalysisDiagnostic(
            status=status,
            responses_total=total,
            responses_used=used,
            warnings=warnings,
        )
