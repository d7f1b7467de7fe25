"""Domain services."""

from .partitioner import partition, available_workers
from .result_aggregator import ResultAggregator

__all__ = [
    "partition",
    "available_workers",
    "ResultAggregator",
]
