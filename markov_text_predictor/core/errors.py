# errors.py - error taxonomy for the predictor core.

from __future__ import annotations


class PredictorError(Exception):
    """Base class for every error raised by markov_text_predictor."""


class ConfigurationError(PredictorError, ValueError):
    """Invalid engine or CLI configuration (negative max_order, bad option...)."""


class EmptyCorpusError(PredictorError, ValueError):
    """Raised at construction time when the training corpus is empty."""


class PreconditionError(PredictorError, RuntimeError):
    """Programmer error: a ContextModel was used outside its lifecycle."""


class ModelNotBuiltError(PreconditionError):
    def __init__(self, order: int) -> None:
        super().__init__(f"context model of order {order} queried before build()")
        self.order = order


class ModelAlreadyBuiltError(PreconditionError):
    def __init__(self, order: int) -> None:
        super().__init__(f"context model of order {order} built twice")
        self.order = order


class NoPredictionError(PredictorError, LookupError):
    """
    No model, including order 0, had a continuation for the context.
    Only reachable when the engine was built without data.
    """


class CorpusLoadError(PredictorError, OSError):
    """The corpus file could not be read."""
