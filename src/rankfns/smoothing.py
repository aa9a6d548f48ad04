"""
Query-likelihood language-model smoothing.

Estimates P(t | D) for a term in a document by mixing the maximum-likelihood
document model with the collection model P(t | C):

    Jelinek-Mercer:  P(t|D) = λ * tf / |D| + (1 - λ) * P(t|C)
    Dirichlet:       P(t|D) = (tf + μ * P(t|C)) / (|D| + μ)

Jelinek-Mercer uses a fixed interpolation weight; Dirichlet smooths short
documents more than long ones. As μ -> 0 Dirichlet reduces to tf / |D|, and as
μ -> inf it approaches P(t|C).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_MU = 1000.0  # conventional Dirichlet prior in IR baselines


@dataclass(frozen=True)
class JelinekMercer:
    """Jelinek-Mercer interpolation; ``lambda_`` is the document-model weight in [0, 1]."""

    lambda_: float


@dataclass(frozen=True)
class Dirichlet:
    """Dirichlet prior smoothing; ``mu`` is the prior strength (>= 0)."""

    mu: float = DEFAULT_MU


SmoothingMethod = Union[JelinekMercer, Dirichlet]

DEFAULT_SMOOTHING: SmoothingMethod = Dirichlet(mu=DEFAULT_MU)


def lm_smoothed_p(
    tf: float,
    doc_len: float,
    p_corpus: float,
    smoothing: SmoothingMethod | None = None,
) -> float:
    """
    Smoothed within-document probability P(t | D).

    Args:
        tf: Term frequency in the document.
        doc_len: Document length.
        p_corpus: Collection probability P(t | C), clamped to [0, 1].
        smoothing: ``JelinekMercer`` or ``Dirichlet``. Defaults to ``Dirichlet(mu=1000)``.

    Returns:
        Probability in [0, 1] for non-negative counts with ``tf <= doc_len``.
    """
    if smoothing is None:
        smoothing = DEFAULT_SMOOTHING
    p_corpus = min(max(p_corpus, 0.0), 1.0)

    if isinstance(smoothing, JelinekMercer):
        lam = min(max(smoothing.lambda_, 0.0), 1.0)
        p_doc = tf / doc_len if doc_len > 0 else 0.0
        return lam * p_doc + (1.0 - lam) * p_corpus

    if isinstance(smoothing, Dirichlet):
        mu = max(smoothing.mu, 0.0)
        denominator = doc_len + mu
        if denominator <= 0:
            return 0.0
        return (tf + mu * p_corpus) / denominator

    raise TypeError(f"Unknown smoothing method: {smoothing!r}")


__all__ = [
    "DEFAULT_MU",
    "DEFAULT_SMOOTHING",
    "Dirichlet",
    "JelinekMercer",
    "SmoothingMethod",
    "lm_smoothed_p",
]
