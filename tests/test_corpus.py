# tests/test_corpus.py
import pytest

from markov_text_predictor.core.errors import CorpusLoadError, PredictorError
from markov_text_predictor.corpus import load_corpus


def test_reads_whole_file_verbatim(tmp_path):
    path = tmp_path / "c.txt"
    path.write_bytes("line one\r\nline two\né".encode("utf-8"))
    assert load_corpus(str(path)) == "line one\r\nline two\né"


def test_undecodable_bytes_are_replaced(tmp_path):
    path = tmp_path / "c.bin"
    path.write_bytes(b"ab\xffcd")
    assert load_corpus(str(path)) == "ab\ufffdcd"


def test_missing_file(tmp_path):
    with pytest.raises(CorpusLoadError) as exc:
        load_corpus(str(tmp_path / "missing.txt"))
    assert isinstance(exc.value, PredictorError)


def test_directory_is_not_a_corpus(tmp_path):
    with pytest.raises(CorpusLoadError):
        load_corpus(str(tmp_path))
