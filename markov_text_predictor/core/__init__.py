"""
markov_text_predictor.core

The prediction core:
 - per-order character frequency models (ContextModel)
 - the back-off ensemble that builds them concurrently (PredictionEngine)
 - injectable random sources and the error taxonomy
"""

from .context_model import ContextModel
from .errors import (
    ConfigurationError,
    CorpusLoadError,
    EmptyCorpusError,
    ModelAlreadyBuiltError,
    ModelNotBuiltError,
    NoPredictionError,
    PreconditionError,
    PredictorError,
)
from .prediction_engine import DEFAULT_MAX_ORDER, EngineConfig, PredictionEngine
from .randomness import LockedRandom, independent_sources, shared_source

__all__ = [
    "ContextModel",
    "PredictionEngine",
    "EngineConfig",
    "DEFAULT_MAX_ORDER",
    "LockedRandom",
    "independent_sources",
    "shared_source",
    "PredictorError",
    "ConfigurationError",
    "EmptyCorpusError",
    "PreconditionError",
    "ModelNotBuiltError",
    "ModelAlreadyBuiltError",
    "NoPredictionError",
    "CorpusLoadError",
]
