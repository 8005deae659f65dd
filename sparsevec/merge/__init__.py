"""Merge module - linear-time joins over sorted key/value streams."""
from sparsevec.merge.join import merge_intersect, merge_union

__all__ = ["merge_intersect", "merge_union"]
