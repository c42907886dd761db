# context_model.py
# fixed-order character model: context string -> observed next characters.

from __future__ import annotations

import logging
import random
import threading
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import ModelAlreadyBuiltError, ModelNotBuiltError
from .protocols import RandomSource

logger = logging.getLogger(__name__)

Context = str
Continuations = Tuple[str, ...]


class ContextModel:
    """
    Frequency model for a single context length (`order`).

    table maps every context of exactly `order` characters seen in the corpus
    to the tuple of characters that followed it. Duplicates are kept, so a
    uniform pick from the tuple is a pick weighted by observed frequency.

    Lifecycle: created empty, build() once, then read-only apart from the hit
    counter. predict() may be called from several threads at once.
    """

    def __init__(self, order: int, rng: Optional[RandomSource] = None) -> None:
        self.order = order
        self._rng = rng if rng is not None else random.Random()
        self._table: Dict[Context, Continuations] = {}
        self._hits = 0
        self._built = False
        # guards _hits and the draw from _rng
        self._lock = threading.Lock()

    @classmethod
    def from_corpus(cls, corpus: str, order: int,
                    rng: Optional[RandomSource] = None) -> "ContextModel":
        model = cls(order, rng)
        model.build(corpus)
        return model

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def build(self, corpus: str) -> None:
        """Scan the corpus once with a window of width `order`."""
        if self._built:
            raise ModelAlreadyBuiltError(self.order)

        k = self.order
        table: Dict[Context, List[str]] = defaultdict(list)
        for i in range(len(corpus) - k):
            table[corpus[i:i + k]].append(corpus[i + k])

        # frozen: values become tuples, callers only ever see a read-only proxy
        self._table = {key: tuple(nxt) for key, nxt in table.items()}
        self._built = True
        logger.debug("order %d: %d contexts", k, len(self._table))

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def predict(self, context: str) -> Optional[str]:
        """
        Sample a continuation for the trailing `order` characters of context.
        Returns None when the context is too short or was never observed.
        """
        if not self._built:
            raise ModelNotBuiltError(self.order)

        k = self.order
        if len(context) < k:
            return None

        key = context[len(context) - k:]
        options = self._table.get(key)
        if not options:
            return None

        with self._lock:
            nxt = self._rng.choice(options)
            self._hits += 1
        return nxt

    def get_hits(self) -> int:
        return self._hits

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def table(self) -> Mapping[Context, Continuations]:
        """Read-only view of context -> continuations."""
        return MappingProxyType(self._table)

    def continuations(self, key: str) -> List[str]:
        return list(self._table.get(key, ()))

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"ContextModel(order={self.order}, contexts={len(self._table)}, hits={self._hits})"
