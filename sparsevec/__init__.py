"""sparsevec - sparse vectors with merge-based overlap and similarity."""
from sparsevec.core import Config, configure_logging
from sparsevec.core.exceptions import (
    ConcurrentModificationError,
    DimensionMismatchError,
    EncoderNotFittedError,
    InvalidDimensionError,
    SerializationError,
    SparseVectorError,
    UnsortedEntriesError,
)
from sparsevec.merge import merge_intersect, merge_union
from sparsevec.vectors import (
    SparseVector,
    SpVec32,
    SpVec64,
    VectorFactory,
    VectorOps,
)
from sparsevec.encoders import BM25Encoder, SparseEncoderFactory, TFIDFEncoder
from sparsevec.index import SearchResult, SparseIndex

__version__ = "0.1.0"

__all__ = [
    "Config",
    "configure_logging",
    "SparseVectorError",
    "InvalidDimensionError",
    "UnsortedEntriesError",
    "DimensionMismatchError",
    "ConcurrentModificationError",
    "SerializationError",
    "EncoderNotFittedError",
    "merge_intersect",
    "merge_union",
    "VectorOps",
    "SparseVector",
    "SpVec32",
    "SpVec64",
    "VectorFactory",
    "TFIDFEncoder",
    "BM25Encoder",
    "SparseEncoderFactory",
    "SearchResult",
    "SparseIndex",
]
