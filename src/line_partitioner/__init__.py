"""Line Partitioner - Split newline-delimited files into line-aligned byte ranges."""

from line_partitioner.partition import (
    Partition,
    PartitionError,
    describe_partitions,
    find_partitions,
    open_source,
    verify_partitions,
)

__all__ = [
    "Partition",
    "PartitionError",
    "describe_partitions",
    "find_partitions",
    "open_source",
    "verify_partitions",
]
