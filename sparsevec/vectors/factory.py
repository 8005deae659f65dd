"""Factory for creating sparse vectors with registry pattern."""

import logging
from typing import Callable, Dict, List, Optional, Type

from sparsevec.core.types import Pairs, Weight
from sparsevec.vectors.base import VectorOps

logger = logging.getLogger(__name__)

# Registry to hold vector classes by precision name
_VECTOR_REGISTRY: Dict[str, Type[VectorOps]] = {}


def register_vector(name: str) -> Callable:
    """
    Decorator to register a vector class under a precision name.

    Usage:
        @register_vector("f64")
        class SpVec64(SparseVector):
            ...
    """
    def decorator(cls: Type[VectorOps]) -> Type[VectorOps]:
        if name in _VECTOR_REGISTRY:
            logger.warning(f"Overwriting existing vector type: {name}")
        _VECTOR_REGISTRY[name] = cls
        logger.debug(f"Registered vector type: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_vectors() -> List[str]:
    """Return list of registered precision names."""
    return list(_VECTOR_REGISTRY.keys())


class VectorFactory:
    """
    Factory that creates sparse vectors based on config.

    Usage:
        # From config dict
        vec = VectorFactory.from_config({"precision": "f32"}, pairs=[(3, 1.0)])

        # Or directly
        vec = VectorFactory.create("f64", [(1, 2.0), (3, 1.0)])
    """

    @classmethod
    def get_class(cls, precision: str) -> Type[VectorOps]:
        """
        Look up the vector class registered for a precision.

        Raises:
            ValueError: If precision is unknown
        """
        if precision not in _VECTOR_REGISTRY:
            available = get_registered_vectors()
            raise ValueError(
                f"Unknown vector precision: '{precision}'. "
                f"Available: {available}"
            )
        return _VECTOR_REGISTRY[precision]

    @classmethod
    def create(
        cls,
        precision: str,
        pairs: Optional[Pairs] = None,
        length: Optional[Weight] = None,
        validate_sorted: bool = False,
    ) -> VectorOps:
        """
        Create a vector instance.

        Args:
            precision: Registered precision name ('f32', 'f64')
            pairs: (dimension, weight) pairs; None for an empty vector
            length: Precomputed length. When given, pairs are trusted to be
                sorted and go through create_from_sorted
            validate_sorted: Check ordering of trusted pairs

        Returns:
            Vector instance
        """
        vector_class = cls.get_class(precision)

        if pairs is None:
            return vector_class.empty()
        if length is not None:
            return vector_class.create_from_sorted(pairs, length, validate=validate_sorted)
        return vector_class.create_from_unordered(pairs)

    @classmethod
    def from_config(cls, config: dict, pairs: Optional[Pairs] = None, **kwargs) -> VectorOps:
        """
        Create vector from the `vectors` config section.

        Args:
            config: Config dict with precision and validate_sorted
            pairs: (dimension, weight) pairs
            **kwargs: Passed to create (e.g. length)

        Returns:
            Vector instance
        """
        precision = config.get("precision", "f64")
        validate_sorted = config.get("validate_sorted", False)

        logger.debug(f"Creating vector from config: precision={precision}")

        return cls.create(
            precision,
            pairs,
            validate_sorted=validate_sorted,
            **kwargs
        )
