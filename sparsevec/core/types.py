"""Shared types used across modules."""
from typing import Iterable, Tuple, Union

import numpy as np

# Largest dimension index a vector can hold (unsigned 32-bit range)
MAX_DIMENSION = 2**32 - 1

Dimension = int
Weight = Union[float, np.float32]
Pair = Tuple[Dimension, Weight]
Pairs = Iterable[Pair]
