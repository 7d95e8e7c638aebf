"""Diagnostic inspection of computed partitions."""

import logging
from collections.abc import Sequence

from line_partitioner.partition.source import ByteSource, as_byte_source, checked_read
from line_partitioner.partition.types import (
    FIRST_LINE_CHUNK,
    NEWLINE,
    Partition,
    PartitionInfo,
    PartitionLogger,
)

logger = logging.getLogger(__name__)


def read_first_line(source: ByteSource, partition: Partition) -> bytes:
    """
    Read the first line of a partition without its line terminator.

    Reading never goes past the partition end, so a partition holding a
    single unterminated line returns that whole line.
    """
    offset = partition.offset
    chunks: list[bytes] = []

    while offset < partition.end:
        buf = checked_read(source, offset, min(FIRST_LINE_CHUNK, partition.end - offset))
        if not buf:
            break

        found_at = buf.find(NEWLINE)
        if found_at != -1:
            chunks.append(buf[:found_at])
            break

        chunks.append(buf)
        offset += len(buf)

    line = b"".join(chunks)
    if line.endswith(b"\r"):
        line = line[:-1]
    return line


def describe_partitions(
    source: object,
    partitions: Sequence[Partition],
    *,
    log: PartitionLogger | None = None,
) -> list[PartitionInfo]:
    """
    Log offset, length and first line of every partition.

    Useful to see where exactly a file was split. Only the first line of
    each partition is read, using positional reads, so cursors held by
    workers on the same file are left alone.
    """
    if log is None:
        log = logger

    byte_source = as_byte_source(source)
    infos: list[PartitionInfo] = []

    for idx, partition in enumerate(partitions):
        log.info(
            "Partition %d starts at offset %d and reads %d bytes",
            idx,
            partition.offset,
            partition.length,
        )

        first_line = read_first_line(byte_source, partition)
        log.info("First line of partition=%d is %r", idx, first_line)

        infos.append(PartitionInfo(idx, partition.offset, partition.length, first_line))

    return infos
