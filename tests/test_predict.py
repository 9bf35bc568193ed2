import numpy as np
import pytest

from errors import InferenceError
from learning import ModelHandle
from predict import argmax_first, predict_digit
from fakes import FakeModel


def _tensor():
    return np.zeros((1, 28, 28, 1), dtype=np.float32)


def test_argmax_picks_maximum():
    assert argmax_first([0.1, 0.05, 0.7, 0.15]) == 2


def test_argmax_first_occurrence_wins_on_ties():
    assert argmax_first([0.2, 0.4, 0.4, 0.0]) == 1
    assert argmax_first(np.full(10, 0.1, dtype=np.float32)) == 0


def test_argmax_empty_vector_fails():
    with pytest.raises(InferenceError):
        argmax_first([])


def test_predict_returns_label():
    probs = [0.0] * 10
    probs[7] = 0.9
    model = FakeModel(probs)
    assert predict_digit(ModelHandle(model, "fake"), _tensor()) == 7
    assert model.calls[0].shape == (1, 28, 28, 1)


def test_predict_without_model_fails():
    with pytest.raises(InferenceError):
        predict_digit(None, _tensor())


def test_predict_with_closed_handle_fails():
    handle = ModelHandle(FakeModel(), "fake")
    handle.close()
    with pytest.raises(InferenceError):
        predict_digit(handle, _tensor())


def test_predict_without_tensor_fails():
    with pytest.raises(InferenceError):
        predict_digit(ModelHandle(FakeModel(), "fake"), None)


def test_predict_rejects_too_many_classes():
    with pytest.raises(InferenceError):
        predict_digit(ModelHandle(FakeModel([0.0] * 11 + [1.0]), "fake"), _tensor())


def test_predict_rejects_wrong_class_count_even_when_max_is_a_digit():
    probs = [0.0] * 11
    probs[2] = 0.9
    with pytest.raises(InferenceError, match="11 clases"):
        predict_digit(ModelHandle(FakeModel(probs), "fake"), _tensor())
