"""Sparse vector backed by a sorted list of (dimension, weight) pairs."""
import logging
import math
import operator
from bisect import bisect_left
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from sparsevec.core.exceptions import (
    DimensionMismatchError,
    InvalidDimensionError,
    SerializationError,
    UnsortedEntriesError,
)
from sparsevec.core.types import MAX_DIMENSION, Dimension, Pair, Pairs, Weight
from sparsevec.merge import merge_union
from sparsevec.vectors.base import VectorOps
from sparsevec.vectors.factory import register_vector
from sparsevec.vectors.iterators import (
    DimensionIterator,
    SparseVectorIterator,
    WeightIterator,
)

logger = logging.getLogger(__name__)


def _as_dimension(dim: Any) -> Optional[int]:
    """Return dim as int if it is a valid dimension, else None."""
    if isinstance(dim, bool):
        return None
    try:
        value = operator.index(dim)
    except TypeError:
        return None
    if value < 0 or value > MAX_DIMENSION:
        return None
    return value


class SparseVector(VectorOps):
    """
    Sparse vector storing only materialized (dimension, weight) pairs.

    Pairs are kept strictly increasing by dimension with no duplicates,
    and the Euclidean length is cached. Every guarded mutation (set_dim,
    delete_dim, update_weights, add_positional) re-establishes both before
    returning.

    Attributes:
        weight_type: Numeric type every weight is coerced to

    Usage:
        vec = SparseVector([(3, 1.0), (1, 2.0)])
        vec.get_dim(1)         # 2.0
        vec.dot(other)
        vec.cosine(other)
    """

    weight_type = float

    def __init__(self, pairs: Optional[Pairs] = None):
        """
        Build a vector from (dimension, weight) pairs in any order.

        Args:
            pairs: Pairs to store. Duplicated dimensions keep the last weight.
        """
        self._entries: List[Pair] = []
        self._length: Weight = self.zero()
        self._generation = 0

        if pairs is not None:
            self._entries = [
                (self._check_dimension(dim), self.weight_type(weight))
                for dim, weight in pairs
            ]
            self.normalize()

    @classmethod
    def create_from_unordered(cls, pairs: Pairs) -> "SparseVector":
        """Build a vector from pairs in any order (sorts and deduplicates)."""
        return cls(pairs)

    @classmethod
    def create_from_sorted(
        cls,
        pairs: Pairs,
        length: Weight,
        validate: bool = False,
    ) -> "SparseVector":
        """
        Build a vector from pairs the caller guarantees are sorted.

        No sorting or length computation happens. Pairs that are not
        strictly increasing by dimension, or a wrong length, silently
        produce wrong results in every later operation.

        Args:
            pairs: Pairs strictly increasing by dimension
            length: Euclidean length of the vector the pairs describe
            validate: Check dimensions and ordering first

        Raises:
            UnsortedEntriesError: If validate is set and pairs are unordered
            InvalidDimensionError: If validate is set and a dimension is invalid
        """
        vec = cls()
        to_dimension = cls._check_dimension if validate else operator.index
        entries = [(to_dimension(dim), cls.weight_type(weight)) for dim, weight in pairs]

        if validate:
            previous = None
            for dim, _ in entries:
                if previous is not None and dim <= previous:
                    raise UnsortedEntriesError(
                        f"Dimension {dim} follows {previous}; pairs must be strictly increasing"
                    )
                previous = dim

        vec._entries = entries
        vec._length = cls.weight_type(length)
        return vec

    @classmethod
    def empty(cls) -> "SparseVector":
        """Create an empty, zero-length vector."""
        return cls()

    @staticmethod
    def _check_dimension(dim: Any) -> int:
        value = _as_dimension(dim)
        if value is None:
            raise InvalidDimensionError(
                f"Invalid dimension {dim!r}: expected integer in [0, {MAX_DIMENSION}]"
            )
        return value

    def _dim_index(self, dim: int) -> Optional[int]:
        """Binary search for the position of dim."""
        index = bisect_left(self._entries, (dim,))
        if index < len(self._entries) and self._entries[index][0] == dim:
            return index
        return None

    def _calc_length(self) -> Weight:
        return self.weight_type(math.sqrt(self.squared_length()))

    def _touch(self) -> None:
        """Invalidate outstanding iterators."""
        self._generation += 1

    @property
    def generation(self) -> int:
        """Mutation counter; changes whenever the stored pairs change."""
        return self._generation

    def squared_length(self) -> Weight:
        """Sum of squared weights (the length before the square root)."""
        total = self.zero()
        for _, weight in self._entries:
            total = total + weight * weight
        return self.weight_type(total)

    def get_length(self) -> Weight:
        return self._length

    def dim_count(self) -> int:
        return len(self._entries)

    def get_dim(self, dim: Dimension) -> Optional[Weight]:
        value = _as_dimension(dim)
        if value is None:
            return None
        index = self._dim_index(value)
        if index is None:
            return None
        return self._entries[index][1]

    def set_dim(self, dim: Dimension, weight: Weight) -> None:
        """
        Set a dimension's weight.

        Existing entries are overwritten in place; new dimensions are
        inserted at their sorted position. The cached length is recomputed.

        Raises:
            InvalidDimensionError: If dim is not a valid dimension
        """
        dim = self._check_dimension(dim)
        pair = (dim, self.weight_type(weight))

        index = bisect_left(self._entries, (dim,))
        if index < len(self._entries) and self._entries[index][0] == dim:
            self._entries[index] = pair
        else:
            self._entries.insert(index, pair)

        self._length = self._calc_length()
        self._touch()

    def has_dim(self, dim: Dimension) -> bool:
        value = _as_dimension(dim)
        if value is None:
            return False
        return self._dim_index(value) is not None

    def first_dim(self) -> Optional[Dimension]:
        if not self._entries:
            return None
        return self._entries[0][0]

    def last_dim(self) -> Optional[Dimension]:
        if not self._entries:
            return None
        return self._entries[-1][0]

    def normalize(self) -> None:
        """
        Sort by dimension, drop duplicates and recompute the length.

        When a dimension occurs more than once, the later pair wins.
        """
        latest: Dict[int, Weight] = {}
        for dim, weight in self._entries:
            latest[dim] = weight

        self._entries = sorted(latest.items(), key=operator.itemgetter(0))
        self._length = self._calc_length()
        self._touch()

    def update_weights(self, func: Callable[[Dimension, Weight], Weight]) -> None:
        """
        Rewrite every weight in place.

        Args:
            func: Called as func(dimension, weight); returns the new weight
        """
        self._entries = [
            (dim, self.weight_type(func(dim, weight)))
            for dim, weight in self._entries
        ]
        self.normalize()

    def pairs(self) -> SparseVectorIterator:
        return SparseVectorIterator(self)

    def dimensions(self) -> DimensionIterator:
        return DimensionIterator(self)

    def weights(self) -> WeightIterator:
        return WeightIterator(self)

    def entries(self) -> List[Pair]:
        return list(self._entries)

    def copy(self) -> "SparseVector":
        """Return an independent copy with the same pairs and length."""
        return type(self).create_from_sorted(self._entries, self._length)

    def add_positional(self, other: VectorOps, strict: bool = False) -> "SparseVector":
        """
        Add other's weights to self index by index, in place.

        Pairs are zipped by position, not matched by dimension, so the
        result is a true vector sum only when both vectors store the same
        dimensions. Use add_keyed for a dimension-matched sum.

        Args:
            other: Vector with the same number of stored pairs
            strict: Also require identical dimension sequences

        Returns:
            self

        Raises:
            DimensionMismatchError: If the pair counts differ, or with
                strict=True if the stored dimensions differ
        """
        if other.dim_count() != self.dim_count():
            raise DimensionMismatchError(
                f"Cannot add positionally: {self.dim_count()} pairs vs {other.dim_count()}"
            )

        other_entries = other.entries()
        if strict:
            own_dims = [dim for dim, _ in self._entries]
            other_dims = [dim for dim, _ in other_entries]
            if own_dims != other_dims:
                raise DimensionMismatchError(
                    "Cannot add positionally: stored dimensions differ"
                )

        self._entries = [
            (dim, self.weight_type(weight + other_weight))
            for (dim, weight), (_, other_weight) in zip(self._entries, other_entries)
        ]
        self.normalize()
        return self

    def add_keyed(self, other: VectorOps) -> "SparseVector":
        """
        Return a new vector holding the dimension-matched sum of self and other.

        Dimensions stored in only one operand carry over unchanged.
        """
        zero = self.zero()
        summed = [
            (dim, (zero if a is None else a) + (zero if b is None else b))
            for dim, a, b in merge_union(self.pairs(), other.pairs())
        ]
        return type(self)(summed)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to {"entries": [[dim, weight], ...], "length": float}."""
        return {
            "entries": [[dim, float(weight)] for dim, weight in self._entries],
            "length": float(self._length),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], trust_sorted: bool = False) -> "SparseVector":
        """
        Rebuild a vector from to_dict() output.

        Args:
            data: Mapping with "entries" and "length"
            trust_sorted: Use stored order and length verbatim instead of
                re-normalizing

        Raises:
            SerializationError: If the payload is malformed
        """
        if not isinstance(data, dict) or "entries" not in data:
            raise SerializationError("Vector payload must be a mapping with 'entries'")

        try:
            pairs = [(dim, weight) for dim, weight in data["entries"]]
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Malformed vector entries: {e}") from e

        if trust_sorted and "length" not in data:
            raise SerializationError("Trusted vector payload needs 'length'")

        logger.debug(f"Restoring {cls.__name__} with {len(pairs)} pairs (trust_sorted={trust_sorted})")

        try:
            if trust_sorted:
                return cls.create_from_sorted(pairs, data["length"])
            return cls.create_from_unordered(pairs)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Invalid vector payload: {e}") from e

    def __len__(self) -> int:
        return self.dim_count()

    def __iter__(self) -> SparseVectorIterator:
        return self.pairs()

    def __contains__(self, dim: Any) -> bool:
        return self.has_dim(dim)

    def __iadd__(self, other: Any) -> "SparseVector":
        if not isinstance(other, VectorOps):
            return NotImplemented
        return self.add_positional(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, VectorOps):
            return NotImplemented
        return self.entries() == other.entries()

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nnz={len(self._entries)}, length={float(self._length):.4f})"


@register_vector("f64")
class SpVec64(SparseVector):
    """Double-precision sparse vector (Python float weights)."""

    weight_type = float


@register_vector("f32")
class SpVec32(SparseVector):
    """Single-precision sparse vector (numpy.float32 weights)."""

    weight_type = np.float32
