"""Newline-aligned file partitioning."""

from line_partitioner.partition.describe import describe_partitions, read_first_line
from line_partitioner.partition.errors import (
    InvalidWorkerCountError,
    LookaheadExhaustedError,
    PartitionError,
    PartitionLayoutError,
    PartitionReadError,
    SourceUnavailableError,
)
from line_partitioner.partition.partition import find_partitions
from line_partitioner.partition.source import (
    ByteSource,
    BytesSource,
    FileSource,
    StreamSource,
    as_byte_source,
    open_source,
)
from line_partitioner.partition.types import (
    DEFAULT_LOOKAHEAD,
    Partition,
    PartitionInfo,
    PartitionLogger,
)
from line_partitioner.partition.verify import verify_partitions

__all__ = [
    "DEFAULT_LOOKAHEAD",
    "ByteSource",
    "BytesSource",
    "FileSource",
    "InvalidWorkerCountError",
    "LookaheadExhaustedError",
    "Partition",
    "PartitionError",
    "PartitionInfo",
    "PartitionLayoutError",
    "PartitionLogger",
    "PartitionReadError",
    "SourceUnavailableError",
    "StreamSource",
    "as_byte_source",
    "describe_partitions",
    "find_partitions",
    "open_source",
    "read_first_line",
    "verify_partitions",
]
