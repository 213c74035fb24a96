"""
Positional overlap between two sequences.

Finds where a prefix of `b` lines up with a suffix run of `a`, which is what
is needed to stitch back two adjacent chunks of a split sequence.

Offsets are tried from the end of `a` towards its start and the first accepted
run wins, so among several valid offsets the rightmost one is returned.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple


class Overlap(NamedTuple):
    """Covered range of `a`: a[start:end] == b[: end - start]."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def find_overlap(a: Sequence[Any], b: Sequence[Any]) -> Overlap | None:
    """
    Finds the rightmost offset of `a` where `b` aligns.

    For each candidate offset o (highest first) with a[o] == b[0], the run is
    extended while a[o + k] == b[k]. Reaching the end of either sequence
    accepts the run; any mismatch before that rejects the offset.

    Args:
        a: Sequence scanned for the overlap.
        b: Sequence whose prefix must match.

    Returns:
        The covered range of `a`, or None when no offset aligns or `b` is empty.
    """
    n, m = len(a), len(b)
    if m == 0:
        return None

    for offset in range(n - 1, -1, -1):
        if a[offset] != b[0]:
            continue

        length = 1
        while True:
            # Ran out of either sequence: full agreement up to the shorter one
            if offset + length >= n or length >= m:
                return Overlap(offset, offset + length)
            if a[offset + length] != b[length]:
                break
            length += 1

    return None


__all__ = ["Overlap", "find_overlap"]
