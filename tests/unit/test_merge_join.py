"""Tests for merge join over sorted key/value streams."""
import random

import pytest

from sparsevec.merge import merge_intersect, merge_union


class TestMergeIntersect:
    """Test merge_intersect."""

    def test_yields_shared_keys(self):
        """Only keys present on both sides are emitted."""
        left = [(1, "a"), (3, "b"), (5, "c")]
        right = [(2, "x"), (3, "y"), (5, "z"), (7, "w")]

        result = list(merge_intersect(left, right))

        assert result == [(3, "b", "y"), (5, "c", "z")]

    def test_no_shared_keys(self):
        """Disjoint inputs give nothing."""
        assert list(merge_intersect([(1, 1.0)], [(2, 1.0)])) == []

    @pytest.mark.parametrize("left,right", [
        ([], []),
        ([], [(1, 1.0)]),
        ([(1, 1.0)], []),
    ])
    def test_empty_inputs(self, left, right):
        """Empty side gives nothing."""
        assert list(merge_intersect(left, right)) == []

    def test_is_lazy(self):
        """Generator does not consume inputs up front."""
        consumed = []

        def stream():
            for key in range(100):
                consumed.append(key)
                yield key, key

        gen = merge_intersect(stream(), [(0, "x"), (1, "y")])
        assert next(gen) == (0, 0, "x")
        assert len(consumed) < 100

    def test_accepts_iterators(self):
        """Works on one-shot iterators, not only lists."""
        left = iter([(1, 1), (2, 2)])
        right = iter([(2, 20)])

        assert list(merge_intersect(left, right)) == [(2, 2, 20)]

    def test_matches_set_intersection(self):
        """Random sorted inputs agree with a dict-based reference."""
        rng = random.Random(7)
        for _ in range(50):
            a = {k: rng.random() for k in rng.sample(range(200), rng.randint(0, 40))}
            b = {k: rng.random() for k in rng.sample(range(200), rng.randint(0, 40))}

            result = list(merge_intersect(sorted(a.items()), sorted(b.items())))

            expected = [(k, a[k], b[k]) for k in sorted(a.keys() & b.keys())]
            assert result == expected


class TestMergeUnion:
    """Test merge_union."""

    def test_fills_missing_side(self):
        """Keys from either side appear, missing side gets fill."""
        left = [(1, 1.0), (3, 3.0)]
        right = [(3, 30.0), (4, 40.0)]

        result = list(merge_union(left, right, fill=0.0))

        assert result == [(1, 1.0, 0.0), (3, 3.0, 30.0), (4, 0.0, 40.0)]

    def test_default_fill_is_none(self):
        """Default fill value is None."""
        assert list(merge_union([(2, "a")], [])) == [(2, "a", None)]
        assert list(merge_union([], [(2, "b")])) == [(2, None, "b")]

    def test_drains_longer_side(self):
        """Remaining pairs after one side ends are emitted."""
        left = [(1, 1)]
        right = [(0, 0), (5, 5), (9, 9)]

        keys = [key for key, _, _ in merge_union(left, right)]

        assert keys == [0, 1, 5, 9]
