"""Errors raised while computing or checking partitions."""


class PartitionError(Exception):
    pass


class SourceUnavailableError(PartitionError):
    """The total size of the source could not be determined."""


class PartitionReadError(PartitionError):
    """A positional read failed for a reason other than end of file."""

    def __init__(self, offset: int, message: str):
        super().__init__(message)
        self.offset = offset


class LookaheadExhaustedError(PartitionError):
    """No newline was found within the bounded lookahead search."""

    def __init__(self, index: int, offset: int, scanned: int):
        super().__init__(
            f"no newline within {scanned} bytes after offset {offset} (partition={index})"
        )
        self.index = index
        self.offset = offset
        self.scanned = scanned


class InvalidWorkerCountError(PartitionError, ValueError):
    pass


class PartitionLayoutError(PartitionError):
    """A partition list violates the line-aligned layout guarantees."""

    def __init__(self, index: int, message: str):
        super().__init__(f"partition {index}: {message}")
        self.index = index


__all__ = [
    "PartitionError",
    "SourceUnavailableError",
    "PartitionReadError",
    "LookaheadExhaustedError",
    "InvalidWorkerCountError",
    "PartitionLayoutError",
]
