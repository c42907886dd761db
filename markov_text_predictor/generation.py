# generation.py
# Autoregressive text production on top of a PredictionEngine.
# The loop is owned by the caller: the engine only ever answers one step.

from __future__ import annotations

from typing import Iterator

from markov_text_predictor.core.errors import ConfigurationError
from markov_text_predictor.core.protocols import CharPredictor

DEFAULT_LENGTH = 1000


def iter_generate(engine: CharPredictor, prompt: str = "", length: int = DEFAULT_LENGTH) -> Iterator[str]:
    """
    Yield `length` characters, each predicted from the prompt plus everything
    generated so far.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ConfigurationError(f"length must be a non-negative integer, got {length!r}")

    text = prompt
    for _ in range(length):
        ch = engine.predict_next_char(text)
        text += ch
        yield ch


def generate(engine: CharPredictor, prompt: str = "", length: int = DEFAULT_LENGTH) -> str:
    """Return the prompt followed by `length` generated characters."""
    return prompt + "".join(iter_generate(engine, prompt, length))


def normalize_output(text: str, replace_newlines: bool = True) -> str:
    """Flatten line breaks to spaces for single-line display."""
    if not replace_newlines:
        return text
    return text.replace("\n", " ")
