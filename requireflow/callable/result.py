"""CallableResult model for the requireflow callable protocol."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CallableResult(BaseModel):
    """Result returned by the requireflow execute() interface.

    Attributes:
        schema_version: Version of the CallableResult schema.
        items: Serialized AnalysisResults, one per request, in input order.
        stats: input/output counts, skipped responses and requests with
            no usable response ("errors").
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    items: list[dict[str, Any]]
    stats: dict[str, int] = {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, leaving out empty stats."""
        result: dict[str, Any] = {"schema_version": self.schema_version, "items": self.items}
        if self.stats:
            result["stats"] = self.stats
        return result
