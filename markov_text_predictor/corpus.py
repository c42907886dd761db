# corpus.py - read a training corpus into a single in-memory string

import os

from markov_text_predictor.core.errors import CorpusLoadError
from markov_text_predictor.utils.logger_utils import Log


def load_corpus(path: str, encoding: str = "utf-8") -> str:
    """
    Read the whole file at `path`.
    Undecodable bytes are replaced rather than rejected, a corpus is just characters.
    Raises CorpusLoadError if the file is missing or unreadable.
    """
    if not os.path.isfile(path):
        raise CorpusLoadError(f"Could not open file {path}")
    try:
        with open(path, "r", encoding=encoding, errors="replace", newline="") as f:
            text = f.read()
    except OSError as e:
        raise CorpusLoadError(f"Could not read file {path}: {e}") from e
    Log.debug(f"loaded corpus {path} ({len(text)} chars)")
    return text
