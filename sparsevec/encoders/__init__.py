"""Encoders module - turn text into sparse term-weight vectors."""
from sparsevec.encoders.base import BaseSparseEncoder
from sparsevec.encoders.factory import (
    SparseEncoderFactory,
    get_registered_encoders,
    register_encoder,
)
from sparsevec.encoders.tfidf_encoder import BM25Encoder, TFIDFEncoder

__all__ = [
    "BaseSparseEncoder",
    "SparseEncoderFactory",
    "get_registered_encoders",
    "register_encoder",
    "TFIDFEncoder",
    "BM25Encoder",
]
