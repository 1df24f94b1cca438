"""Narrative synthesis layer."""

from requireflow.synthesis.synthesizer import NarrativeSynthesizer, response_text

__all__ = [
    "NarrativeSynthesizer",
    "response_text",
]
