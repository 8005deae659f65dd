"""Index module - score a query against many stored sparse vectors."""
from sparsevec.index.sparse_index import SearchResult, SparseIndex

__all__ = ["SearchResult", "SparseIndex"]
