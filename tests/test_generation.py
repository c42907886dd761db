# tests/test_generation.py
import pytest

from markov_text_predictor.core.errors import ConfigurationError
from markov_text_predictor.core.prediction_engine import PredictionEngine
from markov_text_predictor.generation import generate, iter_generate, normalize_output


class StubEngine:
    def __init__(self):
        self.contexts = []

    def predict_next_char(self, context):
        self.contexts.append(context)
        return "x"


def test_each_step_sees_whole_output_so_far():
    stub = StubEngine()
    out = generate(stub, "ab", 3)
    assert out == "abxxx"
    assert stub.contexts == ["ab", "abx", "abxx"]


def test_iter_generate_is_lazy():
    stub = StubEngine()
    it = iter_generate(stub, "", 5)
    assert stub.contexts == []
    assert next(it) == "x"
    assert stub.contexts == [""]


def test_zero_length_returns_prompt():
    assert generate(StubEngine(), "hello", 0) == "hello"


@pytest.mark.parametrize("bad", [-1, 2.0, "10"])
def test_invalid_length_rejected(bad):
    with pytest.raises(ConfigurationError):
        generate(StubEngine(), "", bad)


def test_generate_with_real_engine():
    eng = PredictionEngine("abcabcabc", max_order=2, seed=0)
    # every order >= 1 context in this corpus has one continuation
    assert generate(eng, "ab", 7) == "abcabcabc"


def test_normalize_output():
    assert normalize_output("a\nb\n") == "a b "
    assert normalize_output("a\nb", replace_newlines=False) == "a\nb"
