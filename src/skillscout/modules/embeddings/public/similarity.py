from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from skillscout.shared.errors import VectorLengthMismatchError

VectorLike = Union[np.ndarray, Sequence[float]]


def cosine_similarity(a: VectorLike, b: VectorLike) -> float:
    """
    Cosine of the angle between two vectors, in [-1, 1].

    Raises VectorLengthMismatchError when lengths differ. Returns exactly 0.0
    when either vector has zero magnitude or holds non-finite values.
    """
    va = np.asarray(a, dtype=np.float64).reshape(-1)
    vb = np.asarray(b, dtype=np.float64).reshape(-1)
    if va.shape[0] != vb.shape[0]:
        raise VectorLengthMismatchError(
            f"Vectors must have the same length (got {va.shape[0]} and {vb.shape[0]})"
        )

    norm_a = float(np.dot(va, va))
    norm_b = float(np.dot(vb, vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    score = float(np.dot(va, vb)) / (np.sqrt(norm_a) * np.sqrt(norm_b))
    if not np.isfinite(score):
        return 0.0
    return max(-1.0, min(1.0, score))


__all__ = ["cosine_similarity", "VectorLike"]
