"""Abstract base class for sparse vectors."""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from sparsevec.core.types import Dimension, Pair, Weight
from sparsevec.merge import merge_intersect


class VectorOps(ABC):
    """
    Abstract base class that all sparse vector types must implement.

    Subclasses provide storage (ordered, deduplicated (dimension, weight)
    pairs plus a cached length). Overlap tests, dot product and cosine
    similarity are built here on top of that storage and the merge join,
    so any two implementations can be compared with each other.
    """

    # Weight type of the instantiation; also used as the additive identity
    weight_type = float

    @classmethod
    def zero(cls) -> Weight:
        """Additive identity for this vector's weight type."""
        return cls.weight_type(0)

    @abstractmethod
    def get_length(self) -> Weight:
        """
        Return the cached length of the vector.

        Returns:
            Euclidean norm as of the last normalization
        """
        pass

    @abstractmethod
    def dim_count(self) -> int:
        """Return the number of stored pairs (explicit zeros included)."""
        pass

    @abstractmethod
    def get_dim(self, dim: Dimension) -> Optional[Weight]:
        """
        Return the weight stored for a dimension.

        Args:
            dim: Dimension to look up

        Returns:
            Stored weight, or None when the dimension has no entry
        """
        pass

    @abstractmethod
    def set_dim(self, dim: Dimension, weight: Weight) -> None:
        """
        Set the weight of a dimension, inserting it when absent.

        Args:
            dim: Dimension to set
            weight: New weight
        """
        pass

    @abstractmethod
    def has_dim(self, dim: Dimension) -> bool:
        """Return True if the dimension has a stored entry."""
        pass

    @abstractmethod
    def first_dim(self) -> Optional[Dimension]:
        """Return the smallest stored dimension, or None when empty."""
        pass

    @abstractmethod
    def last_dim(self) -> Optional[Dimension]:
        """Return the greatest stored dimension, or None when empty."""
        pass

    @abstractmethod
    def normalize(self) -> None:
        """Re-sort, deduplicate and recompute the cached length."""
        pass

    @abstractmethod
    def pairs(self) -> Iterator[Pair]:
        """Iterate (dimension, weight) pairs in ascending dimension order."""
        pass

    @abstractmethod
    def dimensions(self) -> Iterator[Dimension]:
        """Iterate stored dimensions in ascending order."""
        pass

    @abstractmethod
    def weights(self) -> Iterator[Weight]:
        """Iterate stored weights in ascending dimension order."""
        pass

    def entries(self) -> List[Pair]:
        """Return a snapshot list of the stored pairs."""
        return list(self.pairs())

    def is_empty(self) -> bool:
        """Return True if no pair is stored."""
        return self.dim_count() == 0

    def delete_dim(self, dim: Dimension) -> None:
        """
        Zero out a dimension.

        The entry stays in the vector with weight zero, so dim_count()
        does not shrink. Deleting an absent dimension stores an explicit zero.
        """
        self.set_dim(dim, self.zero())

    def could_overlap(self, other: "VectorOps") -> bool:
        """
        Cheap check whether two vectors may share a dimension.

        Compares only the [first, last] dimension ranges, so it can report
        True for vectors that turn out not to overlap but never reports
        False for vectors that do.
        """
        cant_overlap = (
            self.is_empty()
            or other.is_empty()
            or self.first_dim() > other.last_dim()
            or self.last_dim() < other.first_dim()
        )
        return not cant_overlap

    def overlaps_with(self, other: "VectorOps") -> bool:
        """Return True if both vectors store at least one common dimension."""
        if not self.could_overlap(other):
            return False
        for _ in self.intersect(other):
            return True
        return False

    def intersect(self, other: "VectorOps") -> Iterator[Tuple[Dimension, Weight, Weight]]:
        """Iterate (dimension, own_weight, other_weight) for shared dimensions."""
        return merge_intersect(self.pairs(), other.pairs())

    def dot(self, other: "VectorOps") -> Weight:
        """
        Scalar product of self and other.

        Only shared dimensions contribute; vectors without overlap give zero.
        """
        total = self.zero()
        for _, a, b in self.intersect(other):
            total = total + a * b
        return self.weight_type(total)

    def cosine(self, other: "VectorOps") -> Weight:
        """
        Cosine similarity between self and other.

        Returns zero when the vectors cannot overlap, and also when they
        overlap only on dimensions whose weights are all zero (both lengths
        zero), instead of dividing by zero.
        """
        if not self.could_overlap(other):
            return self.zero()

        denominator = self.get_length() * other.get_length()
        if denominator == 0:
            return self.zero()
        return self.weight_type(self.dot(other) / denominator)
