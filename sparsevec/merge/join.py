"""Two-pointer merge over sorted (key, value) streams."""
from typing import Any, Iterable, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
L = TypeVar("L")
R = TypeVar("R")

_EXHAUSTED = object()


def merge_intersect(
    left: Iterable[Tuple[K, L]],
    right: Iterable[Tuple[K, R]],
) -> Iterator[Tuple[K, L, R]]:
    """
    Yield (key, left_value, right_value) for every key present in both inputs.
    
    Both inputs must be ascending by key with no duplicate keys. Whichever
    side holds the smaller key is advanced; on equal keys the match is
    emitted and both sides advance. Runs in O(n + m) and stops as soon as
    either side is exhausted.
    
    Args:
        left: Ascending (key, value) pairs
        right: Ascending (key, value) pairs
        
    Yields:
        (key, left_value, right_value) in ascending key order
    """
    left_iter = iter(left)
    right_iter = iter(right)

    a = next(left_iter, _EXHAUSTED)
    b = next(right_iter, _EXHAUSTED)

    while a is not _EXHAUSTED and b is not _EXHAUSTED:
        a_key, a_val = a
        b_key, b_val = b
        if a_key < b_key:
            a = next(left_iter, _EXHAUSTED)
        elif b_key < a_key:
            b = next(right_iter, _EXHAUSTED)
        else:
            yield a_key, a_val, b_val
            a = next(left_iter, _EXHAUSTED)
            b = next(right_iter, _EXHAUSTED)


def merge_union(
    left: Iterable[Tuple[K, L]],
    right: Iterable[Tuple[K, R]],
    fill: Optional[Any] = None,
) -> Iterator[Tuple[K, Any, Any]]:
    """
    Yield (key, left_value, right_value) for every key present in either input.
    
    The side that lacks a key reports `fill` instead of a value.
    Same ordering preconditions as merge_intersect.
    """
    left_iter = iter(left)
    right_iter = iter(right)

    a = next(left_iter, _EXHAUSTED)
    b = next(right_iter, _EXHAUSTED)

    while a is not _EXHAUSTED and b is not _EXHAUSTED:
        a_key, a_val = a
        b_key, b_val = b
        if a_key < b_key:
            yield a_key, a_val, fill
            a = next(left_iter, _EXHAUSTED)
        elif b_key < a_key:
            yield b_key, fill, b_val
            b = next(right_iter, _EXHAUSTED)
        else:
            yield a_key, a_val, b_val
            a = next(left_iter, _EXHAUSTED)
            b = next(right_iter, _EXHAUSTED)

    while a is not _EXHAUSTED:
        yield a[0], a[1], fill
        a = next(left_iter, _EXHAUSTED)

    while b is not _EXHAUSTED:
        yield b[0], fill, b[1]
        b = next(right_iter, _EXHAUSTED)
