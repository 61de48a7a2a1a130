"""
Chunk partitioner
=================
Splits prepared text into contiguous, ordered segments, one per worker.

Segments 0..n-2 get len(text) // n characters and the last one takes the
remainder, so a 10-character text over 4 workers yields [2, 2, 2, 4].
For ciphers with a block size above one (Playfair digraphs) every
boundary is then moved forward to the next multiple of the block size;
segments left empty by that move are dropped.
"""

import logging
from dataclasses import dataclass
from typing import List

from .exceptions import PartitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A slice of the text and the absolute offset it starts at."""

    index: int
    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def partition(text: str, workers: int, block_size: int = 1) -> List[Segment]:
    """
    Split `text` into at most `workers` segments aligned to `block_size`.

    Empty text gives no segments and is checked first, so it never
    raises. A worker count larger than the text is clamped to the text
    length. Raises PartitionError if `workers` or `block_size` is below one.
    """
    length = len(text)
    if length == 0:
        return []

    if workers < 1:
        raise PartitionError(
            f"Worker count must be at least 1, got {workers}",
            {"workers": workers},
        )
    if block_size < 1:
        raise PartitionError(
            f"Block size must be at least 1, got {block_size}",
            {"block_size": block_size},
        )

    count = min(workers, length)
    if count != workers:
        logger.debug(f"Clamped worker count {workers} -> {count} for {length} chars")
    base = length // count

    bounds = [0]
    for i in range(1, count):
        edge = i * base
        edge += -edge % block_size
        edge = min(edge, length)
        if edge > bounds[-1]:
            bounds.append(edge)
    if bounds[-1] == length:
        bounds.pop()
    bounds.append(length)

    segments = [
        Segment(index=i, start=lo, text=text[lo:hi])
        for i, (lo, hi) in enumerate(zip(bounds, bounds[1:]))
    ]
    logger.debug(f"Partitioned {length} chars into {[len(s.text) for s in segments]}")
    return segments
