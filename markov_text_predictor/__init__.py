"""
markov_text_predictor

Character-level text generation from a back-off ensemble of Markov models
built concurrently from a training corpus.
"""

from .core import (
    ConfigurationError,
    ContextModel,
    EmptyCorpusError,
    EngineConfig,
    NoPredictionError,
    PredictionEngine,
    PredictorError,
)
from .corpus import load_corpus
from .generation import generate, iter_generate, normalize_output

__all__ = [
    "ContextModel",
    "PredictionEngine",
    "EngineConfig",
    "PredictorError",
    "ConfigurationError",
    "EmptyCorpusError",
    "NoPredictionError",
    "load_corpus",
    "generate",
    "iter_generate",
    "normalize_output",
]

__version__ = "0.1.0"
