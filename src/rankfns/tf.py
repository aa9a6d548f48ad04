"""Term frequency kernels: BM25 saturation and the generic TF transforms."""

from __future__ import annotations

import math
import sys
from enum import Enum

EPSILON = 1e-9  # floor for avg_doc_len and the BM25 denominator
_MAX_RATIO = sys.float_info.max  # cap for doc_len / avg_doc_len

# Classic Robertson defaults
DEFAULT_K1 = 1.2
DEFAULT_B = 0.75


class TfVariant(Enum):
    """TF transform variants."""

    LINEAR = "linear"  # tf
    LOG_SCALED = "log_scaled"  # 1 + ln(tf) for tf > 0


def bm25_tf(
    tf: float,
    doc_len: float,
    avg_doc_len: float,
    k1: float = DEFAULT_K1,
    b: float = DEFAULT_B,
) -> float:
    """
    BM25 term-frequency normalization (the TF part of BM25):
        tf * (k1 + 1) / (tf + k1 * (1 - b + b * doc_len / avg_doc_len))

    Args:
        tf: Raw term frequency in the document.
        doc_len: Document length.
        avg_doc_len: Average document length in the corpus.
        k1: TF saturation, clamped to >= 0.
        b: Length normalization, clamped to [0, 1].

    Returns:
        Score in [0, k1 + 1). ``0.0`` when ``tf <= 0``.
    """
    if tf <= 0:
        return 0.0
    avg = max(avg_doc_len, EPSILON)
    k1 = max(k1, 0.0)
    b = min(max(b, 0.0), 1.0)
    length_ratio = min(doc_len / avg, _MAX_RATIO)
    denominator = tf + k1 * (1.0 - b + b * length_ratio)
    # tf / denominator <= 1 for doc_len >= 0; scaling afterwards keeps it finite
    return (tf / max(denominator, EPSILON)) * (k1 + 1.0)


def tf_transform(tf: float, variant: TfVariant = TfVariant.LINEAR) -> float:
    """Raw TF transform. ``LOG_SCALED`` gives 1.0 at tf == 1 and 0.0 at tf == 0."""
    if variant is TfVariant.LINEAR:
        return float(tf)
    if variant is TfVariant.LOG_SCALED:
        return 1.0 + math.log(tf) if tf > 0 else 0.0
    raise TypeError(f"Unknown TF variant: {variant!r}")


__all__ = ["DEFAULT_B", "DEFAULT_K1", "EPSILON", "TfVariant", "bm25_tf", "tf_transform"]
