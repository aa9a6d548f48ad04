"""
Retriever contract.

The scoring kernels in this package are composed by an external index. That index
exposes retrieval through this protocol; no implementation ships here.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class RetrievalError(Exception):
    """Recoverable failure raised by a ``Retriever`` implementation (I/O, missing index, ...)."""


@runtime_checkable
class Retriever(Protocol):
    """Anything that maps a query to a ranked list of (document id, score) pairs."""

    def retrieve(self, query: str, k: int) -> list[tuple[str, float]]:
        """Return at most ``k`` pairs ordered by descending score, or raise ``RetrievalError``."""
        ...


__all__ = ["RetrievalError", "Retriever"]
