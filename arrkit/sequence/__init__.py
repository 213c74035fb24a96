"""
Sequence alignment helpers.
"""

from .overlap import Overlap, find_overlap

__all__ = ["Overlap", "find_overlap"]
