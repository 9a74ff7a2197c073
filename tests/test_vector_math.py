# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-07
# Description: test_vector_math.py
# -----------------------------------------------------------------------------
import numpy as np
import pytest

from utility.VectorMath import cosine_similarity


@pytest.mark.parametrize("vec", [[1.0, 0.0], [3.0, -4.0, 12.0], [0.1, 0.2, 0.3, 0.4]])
def test_self_similarity_is_one(vec):
    assert cosine_similarity(vec, vec) == pytest.approx(1.0)


def test_symmetric():
    a = [0.3, -1.2, 4.5, 0.0]
    b = [2.0, 0.7, -0.1, 9.9]
    assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_zero_vector_scores_zero():
    assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0
    assert cosine_similarity([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]) == 0.0
    assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


def test_orthogonal_and_opposite():
    assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)
    assert cosine_similarity([1, 2], [-1, -2]) == pytest.approx(-1.0)


def test_scale_invariant():
    assert cosine_similarity([1, 2, 3], [10, 20, 30]) == pytest.approx(1.0)


def test_accepts_numpy_arrays_and_returns_float():
    score = cosine_similarity(np.array([1.0, 1.0]), np.array([1.0, 0.0]))
    assert isinstance(score, float)
    assert score == pytest.approx(1 / np.sqrt(2))


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])


def test_non_vector_input_raises():
    with pytest.raises(ValueError):
        cosine_similarity([[1.0, 0.0]], [[1.0, 0.0]])
