# markov_text_predictor/core/prediction_engine.py
"""
PredictionEngine - multi-order back-off character predictor.
Purpose:
 - Owns one ContextModel per context length 0..max_order.
 - Builds all of them concurrently at construction (one task per order) and
   joins before returning, so an engine is never seen half-built.
 - predict_next_char() tries the longest context first and backs off to
   shorter ones until some order has observed data.
 - Keeps per-order hit counts for diagnostics (hit_stats/print_stats).

Order 0 has the single key "" holding every corpus character, so any engine
built from a non-empty corpus always answers. Empty corpora are rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table

from .context_model import ContextModel
from .errors import ConfigurationError, EmptyCorpusError, NoPredictionError
from .protocols import OrderStats, RandomSource
from .randomness import independent_sources, shared_source

from markov_text_predictor.utils.logger_utils import Log
from markov_text_predictor.utils.threaded_runner import run_parallel

logger = logging.getLogger(__name__)

DEFAULT_MAX_ORDER = 15


@dataclass(frozen=True)
class EngineConfig:
    """
    Construction knobs for PredictionEngine.
    """
    max_order: int = DEFAULT_MAX_ORDER
    seed: Optional[int] = None
    workers: Optional[int] = None  # None -> one thread per order, capped at CPU count


def _validate(max_order, workers) -> None:
    if isinstance(max_order, bool) or not isinstance(max_order, int):
        raise ConfigurationError(f"max_order must be an integer, got {max_order!r}")
    if max_order < 0:
        raise ConfigurationError(f"max_order must be >= 0, got {max_order}")
    if workers is not None:
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ConfigurationError(f"workers must be a positive integer, got {workers!r}")


class PredictionEngine:
    """
    Back-off ensemble of ContextModels.

    Public API:
      - PredictionEngine(corpus, max_order=15, seed=None, rng=None, workers=None)
      - predict_next_char(context) -> str
      - hit_stats() / print_stats()
      - models, max_order, build_seconds

    Randomness: with `rng` every model samples from that one generator behind a
    lock. Otherwise each model gets its own random.Random, seeded seed + order
    when `seed` is given.
    """

    def __init__(self,
                 corpus: str,
                 max_order: int = DEFAULT_MAX_ORDER,
                 *,
                 seed: Optional[int] = None,
                 rng: Optional[RandomSource] = None,
                 workers: Optional[int] = None) -> None:
        _validate(max_order, workers)
        if not corpus:
            raise EmptyCorpusError("cannot build a predictor from an empty corpus")

        self.max_order = max_order
        make_rng = shared_source(rng) if rng is not None else independent_sources(seed)
        models = [ContextModel(order, make_rng(order)) for order in range(max_order + 1)]

        with Log.time_block("engine.build") as timer:
            run_parallel([self._build_task(m, corpus) for m in models], max_workers=workers)
        self.build_seconds = timer.duration

        self._models: Tuple[ContextModel, ...] = tuple(models)
        logger.debug("built %d models from %d characters", len(models), len(corpus))

    @classmethod
    def from_config(cls, corpus: str, config: EngineConfig,
                    rng: Optional[RandomSource] = None) -> "PredictionEngine":
        return cls(corpus, config.max_order, seed=config.seed, rng=rng, workers=config.workers)

    @staticmethod
    def _build_task(model: ContextModel, corpus: str):
        def task() -> ContextModel:
            Log.info(f"Predictor(size={model.order}): Initializing...")
            model.build(corpus)
            Log.info(f"Predictor(size={model.order}): Done.")
            return model
        return task

    # -------------------------
    # Prediction
    # -------------------------
    def predict_next_char(self, context: str) -> str:
        """Longest matching context wins; falls back order by order down to 0."""
        for model in reversed(self._models):
            nxt = model.predict(context)
            if nxt is not None:
                return nxt
        # order 0 always answers for a non-empty corpus
        raise NoPredictionError(f"no model produced a continuation for {context[-20:]!r}")

    # -------------------------
    # Diagnostics
    # -------------------------
    @property
    def models(self) -> Tuple[ContextModel, ...]:
        return self._models

    def hit_stats(self) -> List[OrderStats]:
        return [
            OrderStats(order=m.order, contexts=len(m), hits=m.get_hits())
            for m in self._models
        ]

    def total_hits(self) -> int:
        return sum(m.get_hits() for m in self._models)

    def print_stats(self, console=None) -> None:
        """Render per-order hit counts as a table (rich console, stdout by default)."""
        console = console or Console()
        table = Table(title="Predictor hits", box=box.SIMPLE, show_edge=False)
        table.add_column("Order", justify="right", style="cyan")
        table.add_column("Contexts", justify="right", style="dim")
        table.add_column("Hits", justify="right", style="magenta")
        for row in self.hit_stats():
            table.add_row(str(row["order"]), str(row["contexts"]), str(row["hits"]))
        console.print(table)

    def __repr__(self) -> str:
        return f"PredictionEngine(max_order={self.max_order})"
