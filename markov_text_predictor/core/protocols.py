# markov_text_predictor/core/protocols.py
"""
Protocol interfaces for the core components of the predictor.

They describe the methods PredictionEngine, the generation loop and the tests
rely on, so stubs can stand in for real engines or random sources.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable
from typing_extensions import TypedDict

T = TypeVar("T")


# Typed structures used across components ------------------------------------

class OrderStats(TypedDict):
    """
    Per-order diagnostic row, as produced by PredictionEngine.hit_stats().

    Example:
      {"order": 3, "contexts": 412, "hits": 87}
    """
    order: int
    contexts: int
    hits: int


# Protocols ------------------------------------------------------------------

@runtime_checkable
class RandomSource(Protocol):
    """Anything that can pick an element uniformly, e.g. random.Random."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class CharPredictor(Protocol):
    """What the generation loop needs from an engine."""

    def predict_next_char(self, context: str) -> str:
        ...
