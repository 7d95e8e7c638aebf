"""Post-condition checks for a computed partition list."""

from collections.abc import Sequence

from line_partitioner.partition.errors import PartitionLayoutError, SourceUnavailableError
from line_partitioner.partition.source import as_byte_source, checked_read
from line_partitioner.partition.types import NEWLINE, Partition


def verify_partitions(source: object, partitions: Sequence[Partition]) -> None:
    """
    Check that `partitions` is a valid line-aligned layout of `source`.

    Raises PartitionLayoutError for the first violation found: the list must
    be non-empty, start at 0, be contiguous, hold no empty partition (except
    the single partition of an empty file), end at the source size, and every
    internal boundary must directly follow a newline.
    """
    byte_source = as_byte_source(source)
    try:
        total_size = byte_source.size()
    except OSError as exc:
        raise SourceUnavailableError(f"cannot determine source size: {exc}") from exc

    if not partitions:
        raise PartitionLayoutError(0, "no partitions")

    expected_offset = 0
    for idx, partition in enumerate(partitions):
        if partition.offset != expected_offset:
            raise PartitionLayoutError(
                idx, f"starts at {partition.offset}, expected {expected_offset}"
            )

        if partition.length <= 0 and not (total_size == 0 and len(partitions) == 1):
            raise PartitionLayoutError(idx, f"has length {partition.length}")

        # Internal boundaries must sit right after a newline.
        if idx > 0 and checked_read(byte_source, partition.offset - 1, 1) != NEWLINE:
            raise PartitionLayoutError(
                idx, f"offset {partition.offset} does not follow a newline"
            )

        expected_offset = partition.end

    if expected_offset != total_size:
        raise PartitionLayoutError(
            len(partitions) - 1, f"ends at {expected_offset}, expected {total_size}"
        )
