"""Execute interface for the requireflow callable protocol.

Provides the in-proc execute() function for orchestrators that call
requireflow directly rather than through the CLI.
"""

from __future__ import annotations

from typing import Any

from requireflow.callable.result import CallableResult
from requireflow.input import parse_request
from requireflow.pipeline import Pipeline, PipelineConfig


def execute(params: dict[str, Any]) -> dict[str, Any]:
    """Analyze one or more requests and return serialized results.

    Args:
        params: Dictionary containing:
            - request: dict | list[dict] - Analysis request payload(s) with
              formTitle, clientName, formDescription and responses
            - config: dict - Optional PipelineConfig overrides

    Returns:
        CallableResult dict with:
            - schema_version: "1.0"
            - items: list[dict] - AnalysisResults (camelCase keys)
            - stats: dict - input/output counts, skipped responses and
              requests without any usable response ("errors")

    Raises:
        ValueError: If 'request' is missing or has the wrong shape.
        InvalidRequestError: If a request payload fails validation.
    """
    payload = params.get("request")
    if payload is None:
        raise ValueError("'request' is required in params")

    if isinstance(payload, dict):
        payloads = [payload]
    elif isinstance(payload, list):
        payloads = payload
    else:
        raise ValueError("'request' must be a request dict or list of request dicts")

    config = PipelineConfig.model_validate(params.get("config", {}))
    pipeline = Pipeline(config)

    requests = [parse_request(p) for p in payloads]
    results = pipeline.process_batch(requests)

    items = [r.analysis.model_dump(mode="json", by_alias=True) for r in results]
    stats = {
        "input": len(requests),
        "output": len(items),
        "skipped": sum(len(r.diagnostics.warnings) for r in results),
        "errors": sum(1 for r in results if not r.success),
    }

    return CallableResult(schema_version="1.0", items=items, stats=stats).to_dict()
