"""Core module - config, exceptions, shared types."""

from sparsevec.core.config import Config
from sparsevec.core.exceptions import (
    SparseVectorError,
    InvalidDimensionError,
    UnsortedEntriesError,
    DimensionMismatchError,
    ConcurrentModificationError,
    SerializationError,
    EncoderNotFittedError,
)
from sparsevec.core.logging_setup import configure_logging, configure_from_config
from sparsevec.core.types import MAX_DIMENSION

__all__ = [
    "Config",
    "SparseVectorError",
    "InvalidDimensionError",
    "UnsortedEntriesError",
    "DimensionMismatchError",
    "ConcurrentModificationError",
    "SerializationError",
    "EncoderNotFittedError",
    "configure_logging",
    "configure_from_config",
    "MAX_DIMENSION",
]
