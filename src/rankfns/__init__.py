"""
Ranking math kernels for information retrieval.

This package is index-free: it contains TF/IDF transforms and scoring kernels that
any index structure (postings, positional, fielded, ...) can compose. A full BM25
term score is ``bm25_idf_plus1(N, df) * bm25_tf(tf, dl, avgdl, k1, b)``.
"""

from rankfns.idf import IdfVariant, bm25_idf_plus1, idf_transform
from rankfns.retriever import RetrievalError, Retriever
from rankfns.smoothing import (
    DEFAULT_MU,
    DEFAULT_SMOOTHING,
    Dirichlet,
    JelinekMercer,
    SmoothingMethod,
    lm_smoothed_p,
)
from rankfns.tf import DEFAULT_B, DEFAULT_K1, EPSILON, TfVariant, bm25_tf, tf_transform

__all__ = [
    "DEFAULT_B",
    "DEFAULT_K1",
    "DEFAULT_MU",
    "DEFAULT_SMOOTHING",
    "EPSILON",
    "Dirichlet",
    "IdfVariant",
    "JelinekMercer",
    "RetrievalError",
    "Retriever",
    "SmoothingMethod",
    "TfVariant",
    "bm25_idf_plus1",
    "bm25_tf",
    "idf_transform",
    "lm_smoothed_p",
    "tf_transform",
]
