import pytest

from markov_text_predictor.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    Log.reset()


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("the cat sat on the mat.\nthe dog sat on the log.\n", encoding="utf-8")
    return path
