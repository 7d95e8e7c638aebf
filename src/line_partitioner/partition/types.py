"""Shared constants and data structures for partitioning."""

from dataclasses import dataclass
from typing import Protocol

# Initial lookahead window read at each nominal boundary.
DEFAULT_LOOKAHEAD = 50

# Largest single read while the lookahead window keeps doubling.
MAX_LOOKAHEAD_READ = 1024 * 1024

# Read size used when scanning for the first line of a partition.
FIRST_LINE_CHUNK = 4096

NEWLINE = b"\n"


class PartitionLogger(Protocol):
    """Minimal logging capability accepted by the partitioner."""

    def info(self, msg: str, *args: object) -> None: ...

    def debug(self, msg: str, *args: object) -> None: ...


@dataclass(frozen=True, slots=True)
class Partition:
    """
    A half-open byte range [offset, offset + length) of a file.

    A worker reading exactly this range sees only whole lines.
    """

    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class PartitionInfo:
    """Human-readable description of one partition."""

    index: int
    offset: int
    length: int
    first_line: bytes
