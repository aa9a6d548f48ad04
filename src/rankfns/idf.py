"""
Inverse document frequency kernels.

Two families live here:

1. ``bm25_idf_plus1`` - Okapi/BM25 IDF with a +1 inside the log (Lucene style),
   which keeps the weight non-negative.
2. ``idf_transform`` - generic IDF selected by ``IdfVariant``.

Both take corpus statistics as plain numbers and never see an index.
"""

from __future__ import annotations

import math
from enum import Enum


class IdfVariant(Enum):
    """IDF transform variants."""

    STANDARD = "standard"  # ln(N / df)
    SMOOTHED = "smoothed"  # ln(1 + (N - df + 0.5) / (df + 0.5))


def _smoothed_idf(n: float, d: float) -> float:
    # ln(1 + (N - d + 0.5) / (d + 0.5)) == ln(N + 1) - ln(d + 0.5); the ratio
    # form overflows near the float64 limit.
    d = min(d, n)
    return math.log(n + 1.0) - math.log(d + 0.5)


def bm25_idf_plus1(n_docs: float, df: float) -> float:
    """
    BM25 IDF with a +1 inside the log:
        idf = ln(1 + (N - df + 0.5) / (df + 0.5))

    Args:
        n_docs: Total number of documents N.
        df: Number of documents containing the term.

    Returns:
        Non-negative, finite IDF weight. ``0.0`` when ``n_docs`` or ``df`` is zero
        (no evidence). A ``df`` larger than ``n_docs`` is clamped to ``n_docs``.
    """
    if n_docs <= 0 or df <= 0:
        return 0.0
    return _smoothed_idf(float(n_docs), float(df))


def idf_transform(n_docs: float, df: float, variant: IdfVariant = IdfVariant.STANDARD) -> float:
    """
    Generic IDF.

    ``STANDARD`` is not clamped: when ``df > n_docs`` the result is negative, which
    flags inconsistent corpus statistics to the caller. ``SMOOTHED`` clamps ``df``
    to ``n_docs`` and stays non-negative.
    """
    if n_docs <= 0 or df <= 0:
        return 0.0
    n = float(n_docs)
    d = float(df)
    if variant is IdfVariant.STANDARD:
        return math.log(n) - math.log(d)
    if variant is IdfVariant.SMOOTHED:
        return _smoothed_idf(n, d)
    raise TypeError(f"Unknown IDF variant: {variant!r}")


__all__ = ["IdfVariant", "bm25_idf_plus1", "idf_transform"]
