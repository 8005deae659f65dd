"""Sequential views over a sparse vector's stored pairs."""
from typing import Iterator

from sparsevec.core.exceptions import ConcurrentModificationError
from sparsevec.core.types import Dimension, Pair, Weight


class SparseVectorIterator(Iterator[Pair]):
    """
    Iterates (dimension, weight) pairs in ascending dimension order.

    The iterator remembers the vector's generation when created. Any
    mutation of the vector afterwards makes the next call to __next__
    raise ConcurrentModificationError. Create a new iterator to start over.
    """

    def __init__(self, vector):
        self._vector = vector
        self._generation = vector.generation
        self._pos = 0

    def __iter__(self) -> "SparseVectorIterator":
        return self

    def __next__(self) -> Pair:
        if self._vector.generation != self._generation:
            raise ConcurrentModificationError(
                f"{type(self._vector).__name__} changed during iteration"
            )
        entries = self._vector._entries
        if self._pos >= len(entries):
            raise StopIteration
        item = entries[self._pos]
        self._pos += 1
        return item


class DimensionIterator(Iterator[Dimension]):
    """Iterates only the dimensions of a vector."""

    def __init__(self, vector):
        self._iter = SparseVectorIterator(vector)

    def __iter__(self) -> "DimensionIterator":
        return self

    def __next__(self) -> Dimension:
        return next(self._iter)[0]


class WeightIterator(Iterator[Weight]):
    """Iterates only the weights of a vector."""

    def __init__(self, vector):
        self._iter = SparseVectorIterator(vector)

    def __iter__(self) -> "WeightIterator":
        return self

    def __next__(self) -> Weight:
        return next(self._iter)[1]
