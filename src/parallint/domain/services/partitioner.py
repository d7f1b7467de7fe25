"""Partitioning of the target file set into per-worker chunks."""

import math
import os
from pathlib import Path
from typing import List, Optional, Sequence

from ..models.lint import FileChunk


def available_workers(max_workers: Optional[int] = None) -> int:
    """
    Number of processing units to spread work over.

    Args:
        max_workers: Optional upper bound from configuration

    Returns:
        CPU count (at least 1), capped by max_workers when given
    """
    count = os.cpu_count() or 1
    if max_workers is not None:
        count = min(count, max_workers)
    return max(1, count)


def partition(files: Sequence[Path], n: int) -> List[FileChunk]:
    """
    Split files into at most n contiguous, near-equal chunks.

    Every window has ceil(len(files) / n) files except possibly the last.
    Empty windows (when there are fewer files than n) are dropped, so
    joining the chunks in order gives back exactly the input.

    Args:
        files: Ordered target file set
        n: Number of workers available

    Returns:
        Non-empty chunks in input order
    """
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")

    if not files:
        return []

    size = math.ceil(len(files) / n)
    chunks = []
    for i in range(n):
        window = tuple(files[i * size:(i + 1) * size])
        if window:
            chunks.append(FileChunk(index=len(chunks), files=window))

    return chunks
