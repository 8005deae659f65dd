"""In-memory index for scoring a query against many sparse vectors."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from sparsevec.vectors.base import VectorOps

logger = logging.getLogger(__name__)

METRICS = ("cosine", "dot")


@dataclass
class SearchResult:
    """
    Represents a scored match from the index.

    Attributes:
        doc_id: Identifier the vector was added under
        score: Similarity score (higher is better)
    """
    doc_id: str
    score: float

    def __repr__(self) -> str:
        return f"SearchResult(doc_id='{self.doc_id}', score={self.score:.3f})"


class SparseIndex:
    """
    Brute-force sparse index with range-based candidate pruning.

    Every stored vector is first checked with could_overlap, which only
    compares dimension ranges, so most non-overlapping vectors are skipped
    without walking their pairs.

    Usage:
        index = SparseIndex(metric="cosine")
        index.add("doc-1", vec)
        results = index.search(query_vec, top_k=5)
    """

    def __init__(self, metric: str = "cosine", top_k: int = 10):
        """
        Args:
            metric: Scoring function ('cosine' or 'dot')
            top_k: Default number of results for search
        """
        if metric not in METRICS:
            raise ValueError(f"Unknown metric: '{metric}'. Available: {list(METRICS)}")
        if top_k <= 0:
            raise ValueError(f"top_k must be positive, got {top_k}")

        self.metric = metric
        self.top_k = top_k
        self._vectors: Dict[str, VectorOps] = {}

        logger.info(f"Initialized SparseIndex: metric={metric}, top_k={top_k}")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "SparseIndex":
        """Create index from the `index` config section."""
        return cls(
            metric=config.get("metric", "cosine"),
            top_k=config.get("top_k", 10),
        )

    def add(self, doc_id: str, vector: VectorOps) -> None:
        """Add or replace the vector stored under doc_id."""
        if doc_id in self._vectors:
            logger.debug(f"Replacing vector for {doc_id}")
        self._vectors[doc_id] = vector

    def add_batch(self, doc_ids: List[str], vectors: List[VectorOps]) -> None:
        """Add several vectors at once."""
        if len(doc_ids) != len(vectors):
            raise ValueError(
                f"doc_ids and vectors differ in length: {len(doc_ids)} vs {len(vectors)}"
            )
        for doc_id, vector in zip(doc_ids, vectors):
            self.add(doc_id, vector)
        logger.info(f"Indexed {len(vectors)} vectors, total: {len(self._vectors)}")

    def remove(self, doc_id: str) -> bool:
        """
        Remove a vector.

        Returns:
            True if doc_id was present
        """
        return self._vectors.pop(doc_id, None) is not None

    def get(self, doc_id: str) -> Optional[VectorOps]:
        return self._vectors.get(doc_id)

    def _score(self, query: VectorOps, vector: VectorOps) -> float:
        if self.metric == "dot":
            return float(query.dot(vector))
        return float(query.cosine(vector))

    def _candidates(self, query: VectorOps) -> Iterator[str]:
        for doc_id, vector in self._vectors.items():
            if query.could_overlap(vector):
                yield doc_id

    def overlapping(self, query: VectorOps) -> List[str]:
        """Return ids of stored vectors sharing at least one dimension with query."""
        return [
            doc_id for doc_id in self._candidates(query)
            if query.overlaps_with(self._vectors[doc_id])
        ]

    def search(self, query: VectorOps, top_k: Optional[int] = None) -> List[SearchResult]:
        """
        Score stored vectors against a query.

        Args:
            query: Query vector
            top_k: Number of results (defaults to the index's top_k)

        Returns:
            Results with non-zero score, best first; ties keep insertion order
        """
        if top_k is None:
            top_k = self.top_k
        elif top_k <= 0:
            raise ValueError(f"top_k must be positive, got {top_k}")

        results = []
        candidates = 0
        for doc_id in self._candidates(query):
            candidates += 1
            score = self._score(query, self._vectors[doc_id])
            if score != 0.0:
                results.append(SearchResult(doc_id=doc_id, score=score))

        results.sort(key=lambda r: r.score, reverse=True)

        logger.debug(
            f"Search scored {candidates}/{len(self._vectors)} candidates, "
            f"{len(results)} matched"
        )
        return results[:top_k]

    def __len__(self) -> int:
        return len(self._vectors)

    def __contains__(self, doc_id: str) -> bool:
        return doc_id in self._vectors

    def __repr__(self) -> str:
        return f"SparseIndex(metric='{self.metric}', size={len(self._vectors)})"
