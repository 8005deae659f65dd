"""JSON and file persistence for sparse vectors."""
import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Type, Union

from sparsevec.core.exceptions import SerializationError
from sparsevec.vectors.sparse_vector import SparseVector, SpVec64

logger = logging.getLogger(__name__)


def to_json(vector: SparseVector) -> str:
    """Serialize a vector to a JSON string."""
    return json.dumps(vector.to_dict())


def from_json(
    payload: str,
    vector_cls: Type[SparseVector] = SpVec64,
    trust_sorted: bool = False,
) -> SparseVector:
    """
    Deserialize a vector from a JSON string.
    
    Args:
        payload: JSON produced by to_json
        vector_cls: Vector class to build
        trust_sorted: Keep stored order and length instead of re-normalizing
        
    Returns:
        Restored vector
        
    Raises:
        SerializationError: If payload is not valid JSON or not a vector
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return vector_cls.from_dict(data, trust_sorted=trust_sorted)


def save_vectors(
    vectors: Dict[str, SparseVector],
    path: Union[str, Path],
) -> None:
    """
    Write a mapping of id -> vector to a JSON file.
    
    Args:
        vectors: Vectors keyed by id
        path: Destination file (parent directories are created)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {doc_id: vec.to_dict() for doc_id, vec in vectors.items()}
    with open(path, "w") as f:
        json.dump(data, f)

    logger.info(f"Saved {len(vectors)} vectors to {path}")


def load_vectors(
    path: Union[str, Path],
    vector_cls: Type[SparseVector] = SpVec64,
    trust_sorted: bool = False,
) -> Dict[str, SparseVector]:
    """Read a mapping of id -> vector written by save_vectors."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Vector file not found: {path}")

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(f"Expected a mapping of vectors in {path}")

    vectors = {
        doc_id: vector_cls.from_dict(item, trust_sorted=trust_sorted)
        for doc_id, item in data.items()
    }
    logger.info(f"Loaded {len(vectors)} vectors from {path}")
    return vectors


def to_indices_values(vector: SparseVector) -> Tuple[List[int], List[float]]:
    """Split a vector into parallel (indices, values) lists."""
    return list(vector.dimensions()), [float(w) for w in vector.weights()]


def from_indices_values(
    indices: List[int],
    values: List[float],
    vector_cls: Type[SparseVector] = SpVec64,
) -> SparseVector:
    """Build a vector from parallel (indices, values) lists in any order."""
    if len(indices) != len(values):
        raise SerializationError(
            f"indices and values differ in length: {len(indices)} vs {len(values)}"
        )
    return vector_cls.create_from_unordered(zip(indices, values))
