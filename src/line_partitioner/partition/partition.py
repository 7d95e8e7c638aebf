"""Newline-aligned partition search."""

import logging
import time

from line_partitioner.partition.errors import (
    InvalidWorkerCountError,
    LookaheadExhaustedError,
    SourceUnavailableError,
)
from line_partitioner.partition.source import ByteSource, as_byte_source, checked_read
from line_partitioner.partition.types import (
    DEFAULT_LOOKAHEAD,
    MAX_LOOKAHEAD_READ,
    NEWLINE,
    Partition,
    PartitionLogger,
)

logger = logging.getLogger(__name__)


def find_partitions(
    source: object,
    intended_workers: int,
    *,
    lookahead: int = DEFAULT_LOOKAHEAD,
    max_lookahead: int | None = None,
    log: PartitionLogger | None = None,
) -> list[Partition]:
    """
    Split a newline-delimited source into roughly `intended_workers` parts.

    Every partition but the last ends right after a newline byte, so workers
    reading one partition each never see a split line. Fewer partitions are
    returned when the source is too small for the requested worker count.

    Args:
        source: A ByteSource, a binary file object or a bytes-like value.
        intended_workers: Desired number of partitions (>= 1).
        lookahead: Initial number of bytes read at each nominal boundary.
            The window doubles until a newline or end of file is found.
        max_lookahead: Optional bound on bytes scanned per boundary.
        log: Logger receiving info and debug messages.

    Returns:
        Contiguous partitions covering the whole source. An empty source
        yields a single Partition(0, 0).

    Raises:
        InvalidWorkerCountError: intended_workers is not a positive integer.
        SourceUnavailableError: The source size cannot be determined.
        PartitionReadError: A lookahead read failed.
        LookaheadExhaustedError: max_lookahead bytes held no newline.
    """
    if isinstance(intended_workers, bool) or not isinstance(intended_workers, int):
        raise InvalidWorkerCountError(
            f"intended_workers must be an integer, got {intended_workers!r}"
        )
    if intended_workers < 1:
        raise InvalidWorkerCountError(
            f"intended_workers must be at least 1, got {intended_workers}"
        )
    if lookahead < 1:
        raise ValueError(f"lookahead must be at least 1, got {lookahead}")
    if max_lookahead is not None and max_lookahead < lookahead:
        raise ValueError(
            f"max_lookahead ({max_lookahead}) must not be smaller than lookahead ({lookahead})"
        )

    if log is None:
        log = logger

    byte_source = as_byte_source(source)
    start_time = time.perf_counter()

    try:
        total_size = byte_source.size()
    except OSError as exc:
        raise SourceUnavailableError(f"cannot determine source size: {exc}") from exc
    log.info("total file size: %d", total_size)

    partition_size = total_size // intended_workers
    log.info("size for each worker approximately: %d", partition_size)

    if total_size == 0:
        partitions = [Partition(0, 0)]
    else:
        partitions = _split(
            byte_source,
            total_size,
            partition_size,
            intended_workers,
            lookahead,
            max_lookahead,
            log,
        )

    log.info(
        "finding %d partitions took %.4fs",
        len(partitions),
        time.perf_counter() - start_time,
    )
    return partitions


def _split(
    source: ByteSource,
    total_size: int,
    partition_size: int,
    intended_workers: int,
    lookahead: int,
    max_lookahead: int | None,
    log: PartitionLogger,
) -> list[Partition]:
    partitions: list[Partition] = []
    current_start = 0
    current_end = partition_size

    for idx in range(intended_workers):
        # The last partition absorbs the rounding remainder and all line overflows.
        if idx == intended_workers - 1:
            partitions.append(Partition(current_start, total_size - current_start))
            break

        boundary = _find_boundary(
            source,
            idx,
            current_start,
            current_end,
            total_size,
            lookahead,
            max_lookahead,
            log,
        )

        # End of file reached: the worker count was too high for this source,
        # so this partition becomes the last one.
        if boundary is None or boundary >= total_size:
            log.debug("reached end of file at partition=%d", idx)
            partitions.append(Partition(current_start, total_size - current_start))
            break

        partitions.append(Partition(current_start, boundary - current_start))
        current_start = boundary
        current_end = boundary + partition_size

    return partitions


def _find_boundary(
    source: ByteSource,
    idx: int,
    start: int,
    nominal_end: int,
    total_size: int,
    lookahead: int,
    max_lookahead: int | None,
    log: PartitionLogger,
) -> int | None:
    """
    Return the offset right after the first newline at or past `nominal_end`.

    Returns None if end of file comes first.
    """
    offset = nominal_end
    window = lookahead
    scanned = 0

    while True:
        read_size = min(window, MAX_LOOKAHEAD_READ)
        if max_lookahead is not None:
            read_size = min(read_size, max_lookahead - scanned)

        buf = checked_read(source, offset, read_size)
        if scanned == 0:
            log.debug(
                "searching for partition=%d. start=%d end=%d. lookahead is %r",
                idx,
                start,
                nominal_end,
                buf,
            )

        found_at = buf.find(NEWLINE)
        if found_at != -1:
            # Boundary falls after the newline, which stays in this partition.
            skip = scanned + found_at + 1
            log.debug("adding skip=%d for partition=%d", skip, idx)
            return nominal_end + skip

        offset += len(buf)
        scanned += len(buf)
        if len(buf) < read_size or offset >= total_size:
            return None

        if max_lookahead is not None and scanned >= max_lookahead:
            raise LookaheadExhaustedError(idx, nominal_end, scanned)

        window *= 2
        log.debug(
            "no newline for partition=%d within %d bytes, lookahead grows to %d",
            idx,
            scanned,
            window,
        )
