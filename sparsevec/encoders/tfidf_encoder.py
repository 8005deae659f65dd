"""Vocabulary-based TF-IDF and BM25 sparse encoders."""
import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Tuple, Type

from sparsevec.core.exceptions import EncoderNotFittedError
from sparsevec.encoders.base import BaseSparseEncoder
from sparsevec.encoders.factory import register_encoder
from sparsevec.utils.text_utils import tokenize
from sparsevec.vectors.base import VectorOps
from sparsevec.vectors.sparse_vector import SparseVector, SpVec64

logger = logging.getLogger(__name__)


@register_encoder("tfidf")
class TFIDFEncoder(BaseSparseEncoder):
    """
    TF-IDF encoder producing document vectors over a fitted vocabulary.

    Each vocabulary token gets a dimension in first-seen order. The weight
    of a token in a text is its raw count times the smoothed idf
    ln((1 + N) / (1 + df)) + 1. Tokens not seen during fit are ignored.

    Usage:
        encoder = TFIDFEncoder().fit(corpus)
        vec = encoder.encode("kafka streaming platform")
    """

    def __init__(
        self,
        lowercase: bool = True,
        min_df: int = 1,
        vector_cls: Type[SparseVector] = SpVec64,
    ):
        """
        Args:
            lowercase: Fold tokens to lower case
            min_df: Minimum number of documents a token must occur in
            vector_cls: Vector class produced by encode
        """
        if min_df < 1:
            raise ValueError(f"min_df must be >= 1, got {min_df}")

        self.lowercase = lowercase
        self.min_df = min_df
        self.vector_cls = vector_cls

        self._vocabulary: Dict[str, int] = {}
        self._tokens: List[str] = []
        self._idf: List[float] = []
        self._n_docs = 0
        self._avg_doc_len = 0.0

        logger.info(f"Initialized {type(self).__name__}: min_df={min_df}, lowercase={lowercase}")

    @property
    def is_fitted(self) -> bool:
        """True once fit() has run."""
        return self._n_docs > 0

    @property
    def vocabulary(self) -> Dict[str, int]:
        """Token -> dimension mapping."""
        return dict(self._vocabulary)

    @property
    def vocabulary_size(self) -> int:
        return len(self._tokens)

    def fit(self, corpus: List[str]) -> "TFIDFEncoder":
        """
        Build vocabulary and document frequencies.

        Args:
            corpus: List of document texts

        Returns:
            self
        """
        if not corpus:
            raise ValueError("Cannot fit encoder on an empty corpus")

        doc_freq: Counter = Counter()
        first_seen: Dict[str, int] = {}
        total_tokens = 0

        for text in corpus:
            tokens = tokenize(text, lowercase=self.lowercase)
            total_tokens += len(tokens)
            for token in tokens:
                first_seen.setdefault(token, len(first_seen))
            doc_freq.update(set(tokens))

        self._tokens = [
            token for token in sorted(first_seen, key=first_seen.get)
            if doc_freq[token] >= self.min_df
        ]
        self._vocabulary = {token: dim for dim, token in enumerate(self._tokens)}
        self._n_docs = len(corpus)
        self._avg_doc_len = total_tokens / self._n_docs
        self._idf = [self._compute_idf(doc_freq[token]) for token in self._tokens]

        logger.info(
            f"Fitted {type(self).__name__} on {self._n_docs} docs, "
            f"vocabulary size: {len(self._tokens)}"
        )
        return self

    def _compute_idf(self, df: int) -> float:
        return math.log((1 + self._n_docs) / (1 + df)) + 1.0

    def _term_weight(self, tf: int, dim: int, doc_len: int) -> float:
        return tf * self._idf[dim]

    def _check_fitted(self) -> None:
        if not self.is_fitted:
            raise EncoderNotFittedError(f"{type(self).__name__} must be fitted before encoding")

    def encode(self, text: str) -> SparseVector:
        """
        Encode text to a sparse vector.

        Args:
            text: Input text

        Returns:
            Sparse vector of term weights
        """
        self._check_fitted()

        tokens = tokenize(text, lowercase=self.lowercase)
        counts = Counter(token for token in tokens if token in self._vocabulary)
        doc_len = len(tokens)

        pairs = [
            (self._vocabulary[token], self._term_weight(tf, self._vocabulary[token], doc_len))
            for token, tf in counts.items()
        ]
        vector = self.vector_cls.create_from_unordered(pairs)

        logger.debug(f"Encoded text with {doc_len} tokens into {vector!r}")
        return vector

    def token_for(self, dim: int) -> Optional[str]:
        """Return the token for a dimension, or None if out of vocabulary."""
        if 0 <= dim < len(self._tokens):
            return self._tokens[dim]
        return None

    def decode(self, vector: VectorOps, top_k: int = 10) -> List[Tuple[str, float]]:
        """
        Decode sparse vector to human-readable tokens.

        Args:
            vector: Sparse vector to decode
            top_k: Number of top tokens to return

        Returns:
            List of (token, weight) tuples sorted by weight
        """
        pairs = sorted(vector.pairs(), key=lambda x: x[1], reverse=True)

        decoded = []
        for dim, weight in pairs:
            token = self.token_for(dim)
            if token is None:
                continue
            decoded.append((token, float(weight)))
            if len(decoded) >= top_k:
                break

        return decoded

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vocabulary_size={self.vocabulary_size})"


@register_encoder("bm25")
class BM25Encoder(TFIDFEncoder):
    """
    BM25 encoder.

    Document weights saturate term frequency and normalize by document
    length relative to the corpus average:
        idf * tf * (k1 + 1) / (tf + k1 * (1 - b + b * dl / avgdl))
    with idf = ln(1 + (N - df + 0.5) / (df + 0.5)).
    Queries are encoded with encode_query (idf weights only).
    """

    def __init__(
        self,
        lowercase: bool = True,
        min_df: int = 1,
        k1: float = 1.5,
        b: float = 0.75,
        vector_cls: Type[SparseVector] = SpVec64,
    ):
        """
        Args:
            lowercase: Fold tokens to lower case
            min_df: Minimum number of documents a token must occur in
            k1: Term frequency saturation
            b: Document length normalization strength (0..1)
            vector_cls: Vector class produced by encode
        """
        if k1 < 0:
            raise ValueError(f"k1 must be >= 0, got {k1}")
        if not 0.0 <= b <= 1.0:
            raise ValueError(f"b must be in [0, 1], got {b}")

        self.k1 = k1
        self.b = b
        super().__init__(lowercase=lowercase, min_df=min_df, vector_cls=vector_cls)

    def _compute_idf(self, df: int) -> float:
        return math.log(1 + (self._n_docs - df + 0.5) / (df + 0.5))

    def _term_weight(self, tf: int, dim: int, doc_len: int) -> float:
        if self._avg_doc_len:
            norm = 1 - self.b + self.b * (doc_len / self._avg_doc_len)
        else:
            norm = 1.0
        return self._idf[dim] * tf * (self.k1 + 1) / (tf + self.k1 * norm)

    def encode_query(self, query: str) -> SparseVector:
        """
        Encode a query as idf weights of its distinct known tokens.

        Dot product of a query vector with a document vector is the BM25 score.
        """
        self._check_fitted()

        tokens = set(tokenize(query, lowercase=self.lowercase))
        pairs = [
            (self._vocabulary[token], self._idf[self._vocabulary[token]])
            for token in tokens if token in self._vocabulary
        ]
        return self.vector_cls.create_from_unordered(pairs)

    def __repr__(self) -> str:
        return f"BM25Encoder(vocabulary_size={self.vocabulary_size}, k1={self.k1}, b={self.b})"
