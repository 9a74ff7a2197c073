# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: VectorMath
# -----------------------------------------------------------------------------
from typing import Sequence, Union

import numpy as np

Vector = Union[np.ndarray, Sequence[float]]


def as_vector(values: Vector) -> np.ndarray:
    """Coerce a sequence of numbers into a 1-D float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {arr.shape}")
    return arr


def cosine_similarity(vec_a: Vector, vec_b: Vector) -> float:
    """
    Cosine of the angle between two equal-length vectors.

    Returns 0.0 when either vector has zero norm, so null embeddings score
    as unrelated rather than raising. Vectors of different length are a
    caller error and raise ValueError.
    """
    a = as_vector(vec_a)
    b = as_vector(vec_b)
    if a.shape != b.shape:
        raise ValueError(f"Vector length mismatch: {a.shape[0]} != {b.shape[0]}")

    dot_product = float(np.dot(a, b))
    norm_a = float(np.dot(a, a))
    norm_b = float(np.dot(b, b))

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(dot_product / (np.sqrt(norm_a) * np.sqrt(norm_b)))
