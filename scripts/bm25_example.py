"""
BM25, TF-IDF and query-likelihood scores on a tiny corpus.

Usage (example):
    uv run python scripts/bm25_example.py --n-docs 5 --avg-doc-len 10 --df 2

Corpus statistics are given directly on the command line; nothing is indexed.
"""

from __future__ import annotations

import argparse

from rankfns import (
    Dirichlet,
    IdfVariant,
    JelinekMercer,
    TfVariant,
    bm25_idf_plus1,
    bm25_tf,
    idf_transform,
    lm_smoothed_p,
    tf_transform,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Print ranking kernel values for a toy corpus.")
    parser.add_argument("--n-docs", type=int, default=5, help="Number of documents (default: 5).")
    parser.add_argument("--avg-doc-len", type=float, default=10.0, help="Average document length (default: 10).")
    parser.add_argument("--df", type=int, default=2, help="Document frequency of the rare term (default: 2).")
    parser.add_argument("--tf", type=int, default=3, help="Term frequency in the scored document (default: 3).")
    parser.add_argument("--doc-len", type=float, default=12.0, help="Length of the scored document (default: 12).")
    parser.add_argument("--k1", type=float, default=1.2, help="BM25 k1 (default: 1.2).")
    parser.add_argument("--b", type=float, default=0.75, help="BM25 b (default: 0.75).")
    parser.add_argument("--p-corpus", type=float, default=0.01, help="Collection probability P(t|C) (default: 0.01).")
    args = parser.parse_args()

    n_docs = args.n_docs
    df_common = n_docs  # a stopword-like term present everywhere

    print("=== BM25 IDF (log(1 + (N-df+0.5)/(df+0.5))) ===")
    print(f"  rare   (df={args.df}): {bm25_idf_plus1(n_docs, args.df):.4f}")
    print(f"  common (df={df_common}): {bm25_idf_plus1(n_docs, df_common):.4f}")

    print(f"\n=== BM25 TF (k1={args.k1}, b={args.b}) ===")
    for tf, doc_len in [(float(args.tf), args.doc_len), (1.0, 8.0), (0.0, 10.0)]:
        score = bm25_tf(tf, doc_len, args.avg_doc_len, args.k1, args.b)
        print(f"  tf={tf:.0f}, doc_len={doc_len:.0f} => {score:.4f}")

    print("\n=== Full BM25 score (IDF * TF) ===")
    idf = bm25_idf_plus1(n_docs, args.df)
    tf_score = bm25_tf(args.tf, args.doc_len, args.avg_doc_len, args.k1, args.b)
    print(f"  rare term in doc (tf={args.tf}, len={args.doc_len:.0f}): {idf * tf_score:.4f}")

    print("\n=== TF-IDF variants ===")
    tf_lin = tf_transform(args.tf, TfVariant.LINEAR)
    tf_log = tf_transform(args.tf, TfVariant.LOG_SCALED)
    idf_std = idf_transform(n_docs, args.df, IdfVariant.STANDARD)
    idf_smooth = idf_transform(n_docs, args.df, IdfVariant.SMOOTHED)
    print(f"  Linear TF({args.tf})={tf_lin:.2f}, LogScaled TF({args.tf})={tf_log:.4f}")
    print(f"  Standard IDF={idf_std:.4f}, Smoothed IDF={idf_smooth:.4f}")
    print(f"  TF-IDF (linear, standard): {tf_lin * idf_std:.4f}")

    print("\n=== Language model P(t|D) ===")
    p_jm = lm_smoothed_p(args.tf, args.doc_len, args.p_corpus, JelinekMercer(lambda_=0.7))
    p_dir = lm_smoothed_p(args.tf, args.doc_len, args.p_corpus, Dirichlet(mu=1000.0))
    print(f"  Jelinek-Mercer (lambda=0.7): {p_jm:.4f}")
    print(f"  Dirichlet      (mu=1000):    {p_dir:.4f}")


if __name__ == "__main__":
    main()
