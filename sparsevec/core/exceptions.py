"""Custom exceptions for sparse vector operations."""


class SparseVectorError(Exception):
    """Base class for all sparsevec errors."""
    pass


class InvalidDimensionError(SparseVectorError, ValueError):
    """Raised when a dimension is negative, non-integral or out of range."""
    pass


class UnsortedEntriesError(SparseVectorError, ValueError):
    """Raised when pre-sorted entries fail validation."""
    pass


class DimensionMismatchError(SparseVectorError, ValueError):
    """Raised when positional addition is attempted on incompatible vectors."""
    pass


class ConcurrentModificationError(SparseVectorError, RuntimeError):
    """Raised when a vector is mutated while one of its iterators is in use."""
    pass


class SerializationError(SparseVectorError, ValueError):
    """Raised when a serialized vector payload is malformed."""
    pass


class EncoderNotFittedError(SparseVectorError, RuntimeError):
    """Raised when an encoder is used before fit()."""
    pass
