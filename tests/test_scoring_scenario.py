"""End-to-end composition of the kernels on a five-document corpus."""

import math

import pytest

from rankfns import (
    Dirichlet,
    IdfVariant,
    JelinekMercer,
    RetrievalError,
    Retriever,
    TfVariant,
    bm25_idf_plus1,
    bm25_tf,
    idf_transform,
    lm_smoothed_p,
    tf_transform,
)

N_DOCS = 5
AVG_DOC_LEN = 10.0


def test_bm25_full_score():
    idf = bm25_idf_plus1(N_DOCS, 2)
    tf = bm25_tf(3.0, 12.0, AVG_DOC_LEN, 1.2, 0.75)

    assert idf == pytest.approx(0.8755, abs=1e-4)
    assert tf == pytest.approx(1.5068, abs=1e-4)
    assert idf * tf == pytest.approx(1.3192, abs=1e-4)


def test_term_in_every_document_scores_below_rare_term():
    assert bm25_idf_plus1(N_DOCS, N_DOCS) < bm25_idf_plus1(N_DOCS, 2)
    assert idf_transform(N_DOCS, N_DOCS, IdfVariant.STANDARD) == 0.0


def test_tfidf_composition():
    score = tf_transform(3, TfVariant.LINEAR) * idf_transform(N_DOCS, 2, IdfVariant.STANDARD)
    assert score == pytest.approx(3 * math.log(2.5))

    sublinear = tf_transform(3, TfVariant.LOG_SCALED) * idf_transform(N_DOCS, 2, IdfVariant.SMOOTHED)
    assert 0.0 < sublinear < score


def test_query_likelihood_ranks_matching_document_first():
    # Two documents of equal length; only the first contains the term.
    p_corpus = 3.0 / (N_DOCS * AVG_DOC_LEN)
    for smoothing in (JelinekMercer(lambda_=0.7), Dirichlet(mu=1000.0)):
        matching = math.log(lm_smoothed_p(3.0, 10.0, p_corpus, smoothing))
        missing = math.log(lm_smoothed_p(0.0, 10.0, p_corpus, smoothing))
        assert matching > missing


class _StaticRetriever:
    def __init__(self, scores: dict[str, float]):
        self.scores = scores

    def retrieve(self, query: str, k: int) -> list[tuple[str, float]]:
        if not query:
            raise RetrievalError("empty query")
        ranked = sorted(self.scores.items(), key=lambda item: item[1], reverse=True)
        return ranked[:k]


def test_retriever_protocol():
    retriever = _StaticRetriever(
        {
            "d1": bm25_idf_plus1(N_DOCS, 2) * bm25_tf(3.0, 12.0, AVG_DOC_LEN),
            "d2": bm25_idf_plus1(N_DOCS, 2) * bm25_tf(1.0, 8.0, AVG_DOC_LEN),
            "d3": 0.0,
        }
    )
    assert isinstance(retriever, Retriever)
    assert not isinstance(object(), Retriever)

    results = retriever.retrieve("rust", k=2)
    assert [doc_id for doc_id, _ in results] == ["d1", "d2"]
    with pytest.raises(RetrievalError):
        retriever.retrieve("", k=2)
