"""Vectors module - sparse vector store, iterators, factory, persistence."""
from sparsevec.vectors.base import VectorOps
from sparsevec.vectors.factory import (
    VectorFactory,
    get_registered_vectors,
    register_vector,
)
from sparsevec.vectors.iterators import (
    DimensionIterator,
    SparseVectorIterator,
    WeightIterator,
)
from sparsevec.vectors.sparse_vector import SparseVector, SpVec32, SpVec64
from sparsevec.vectors.serialization import (
    from_indices_values,
    from_json,
    load_vectors,
    save_vectors,
    to_indices_values,
    to_json,
)

__all__ = [
    "VectorOps",
    "VectorFactory",
    "get_registered_vectors",
    "register_vector",
    "SparseVectorIterator",
    "DimensionIterator",
    "WeightIterator",
    "SparseVector",
    "SpVec32",
    "SpVec64",
    "to_json",
    "from_json",
    "save_vectors",
    "load_vectors",
    "to_indices_values",
    "from_indices_values",
]
