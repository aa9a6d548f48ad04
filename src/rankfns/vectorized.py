"""
NumPy counterparts of the scalar kernels.

Every function accepts scalars or array-likes, broadcasts them with NumPy rules and
returns ``float64`` arrays. Element ``i`` of the result equals the scalar kernel
evaluated on element ``i`` of the inputs, including the degenerate-input policy.
Degenerate elements are replaced by safe placeholders before any division or log,
so no NaN, inf or RuntimeWarning is produced.

Usage:
    from rankfns.vectorized import bm25_idf_plus1_array, bm25_tf_array

    idf = bm25_idf_plus1_array(n_docs, df_array)
    scores = idf[:, np.newaxis] * bm25_tf_array(tf_matrix, doc_lengths, avgdl)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rankfns.idf import IdfVariant
from rankfns.smoothing import DEFAULT_SMOOTHING, Dirichlet, JelinekMercer, SmoothingMethod
from rankfns.tf import DEFAULT_B, DEFAULT_K1, EPSILON, TfVariant

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

_MAX_RATIO = np.finfo(np.float64).max


def _as_float(*values: ArrayLike) -> list[NDArray[np.float64]]:
    return list(np.broadcast_arrays(*(np.asarray(v, dtype=np.float64) for v in values)))


# =============================================================================
# IDF
# =============================================================================


def _smoothed_idf(n: NDArray[np.float64], df: NDArray[np.float64]) -> NDArray[np.float64]:
    valid = (n > 0) & (df > 0)
    n_safe = np.where(valid, n, 1.0)
    df_safe = np.where(valid, np.minimum(df, n_safe), 1.0)
    idf = np.log(n_safe + 1.0) - np.log(df_safe + 0.5)
    return np.where(valid, idf, 0.0)


def bm25_idf_plus1_array(n_docs: ArrayLike, df: ArrayLike) -> NDArray[np.float64]:
    """Vectorized ``bm25_idf_plus1``: ln(1 + (N - df + 0.5) / (df + 0.5)), df clamped to N."""
    n, d = _as_float(n_docs, df)
    return _smoothed_idf(n, d)


def idf_transform_array(
    n_docs: ArrayLike,
    df: ArrayLike,
    variant: IdfVariant = IdfVariant.STANDARD,
) -> NDArray[np.float64]:
    """Vectorized ``idf_transform``. ``STANDARD`` goes negative where df > N."""
    n, d = _as_float(n_docs, df)
    if variant is IdfVariant.STANDARD:
        valid = (n > 0) & (d > 0)
        idf = np.log(np.where(valid, n, 1.0)) - np.log(np.where(valid, d, 1.0))
        return np.where(valid, idf, 0.0)
    if variant is IdfVariant.SMOOTHED:
        return _smoothed_idf(n, d)
    raise TypeError(f"Unknown IDF variant: {variant!r}")


# =============================================================================
# TF
# =============================================================================


def bm25_tf_array(
    tf: ArrayLike,
    doc_len: ArrayLike,
    avg_doc_len: ArrayLike,
    k1: float = DEFAULT_K1,
    b: float = DEFAULT_B,
) -> NDArray[np.float64]:
    """
    Vectorized ``bm25_tf``.

    Args:
        tf: Term frequencies, e.g. a (num_terms, num_docs) block.
        doc_len: Document lengths, broadcast against ``tf``.
        avg_doc_len: Average document length (scalar or broadcastable).
        k1: TF saturation, clamped to >= 0.
        b: Length normalization, clamped to [0, 1].

    Returns:
        Array of saturated TF values, 0.0 wherever tf <= 0.
    """
    tf_arr, dl, avg = _as_float(tf, doc_len, avg_doc_len)
    k1 = max(float(k1), 0.0)
    b = min(max(float(b), 0.0), 1.0)
    with np.errstate(over="ignore"):
        length_ratio = np.minimum(dl / np.maximum(avg, EPSILON), _MAX_RATIO)
        denominator = np.maximum(tf_arr + k1 * (1.0 - b + b * length_ratio), EPSILON)
    return np.where(tf_arr > 0, (tf_arr / denominator) * (k1 + 1.0), 0.0)


def tf_transform_array(tf: ArrayLike, variant: TfVariant = TfVariant.LINEAR) -> NDArray[np.float64]:
    """Vectorized ``tf_transform``."""
    (tf_arr,) = _as_float(tf)
    if variant is TfVariant.LINEAR:
        return tf_arr.copy()
    if variant is TfVariant.LOG_SCALED:
        positive = tf_arr > 0
        return np.where(positive, 1.0 + np.log(np.where(positive, tf_arr, 1.0)), 0.0)
    raise TypeError(f"Unknown TF variant: {variant!r}")


# =============================================================================
# Language-model smoothing
# =============================================================================


def lm_smoothed_p_array(
    tf: ArrayLike,
    doc_len: ArrayLike,
    p_corpus: ArrayLike,
    smoothing: SmoothingMethod | None = None,
) -> NDArray[np.float64]:
    """Vectorized ``lm_smoothed_p``; one smoothing method for all elements."""
    if smoothing is None:
        smoothing = DEFAULT_SMOOTHING
    tf_arr, dl, p = _as_float(tf, doc_len, p_corpus)
    p = np.clip(p, 0.0, 1.0)

    if isinstance(smoothing, JelinekMercer):
        lam = min(max(float(smoothing.lambda_), 0.0), 1.0)
        has_len = dl > 0
        p_doc = np.where(has_len, tf_arr / np.where(has_len, dl, 1.0), 0.0)
        return lam * p_doc + (1.0 - lam) * p

    if isinstance(smoothing, Dirichlet):
        mu = max(float(smoothing.mu), 0.0)
        denominator = dl + mu
        valid = denominator > 0
        return np.where(valid, (tf_arr + mu * p) / np.where(valid, denominator, 1.0), 0.0)

    raise TypeError(f"Unknown smoothing method: {smoothing!r}")


__all__ = [
    "bm25_idf_plus1_array",
    "bm25_tf_array",
    "idf_transform_array",
    "lm_smoothed_p_array",
    "tf_transform_array",
]
