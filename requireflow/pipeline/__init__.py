"""Pipeline for analysis requests."""

from requireflow.pipeline.orchestrator import Pipeline, PipelineConfig, ProcessingResult

__all__ = [
    "Pipeline",
    "PipelineConfig",
    "ProcessingResult",
]
