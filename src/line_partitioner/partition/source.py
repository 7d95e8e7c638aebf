"""Random-access byte sources the partitioner can read from."""

import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO, Protocol, runtime_checkable

from line_partitioner.partition.errors import PartitionReadError

HAS_PREAD = hasattr(os, "pread")


@runtime_checkable
class ByteSource(Protocol):
    """
    A seekable byte source with a known size.

    `read_at` returns fewer than `length` bytes only at end of file and
    must not disturb any cursor other callers rely on.
    """

    def size(self) -> int: ...

    def read_at(self, offset: int, length: int) -> bytes: ...


class FileSource:
    """Positional reads against an open file descriptor (cursor untouched)."""

    def __init__(self, handle: BinaryIO):
        self._handle = handle
        self._fd = handle.fileno()

    def size(self) -> int:
        return os.fstat(self._fd).st_size

    def read_at(self, offset: int, length: int) -> bytes:
        chunks: list[bytes] = []
        remaining = length
        while remaining > 0:
            data = os.pread(self._fd, remaining, offset)
            if not data:
                break
            chunks.append(data)
            offset += len(data)
            remaining -= len(data)
        return b"".join(chunks)


class StreamSource:
    """
    Seek-and-read access for streams without a usable file descriptor.

    The stream position is restored after every call, but calls are not
    safe to interleave across threads.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    def size(self) -> int:
        position = self._stream.tell()
        try:
            return self._stream.seek(0, os.SEEK_END)
        finally:
            self._stream.seek(position)

    def read_at(self, offset: int, length: int) -> bytes:
        position = self._stream.tell()
        try:
            self._stream.seek(offset)
            return self._stream.read(length)
        finally:
            self._stream.seek(position)


class BytesSource:
    """In-memory source, mostly useful for tests and small inputs."""

    def __init__(self, data: bytes | bytearray | memoryview):
        self._data = memoryview(data).cast("B")

    def size(self) -> int:
        return len(self._data)

    def read_at(self, offset: int, length: int) -> bytes:
        return bytes(self._data[offset : offset + length])


def as_byte_source(obj: object) -> ByteSource:
    """Wrap a file object or bytes-like value in the matching source adapter."""
    if isinstance(obj, ByteSource):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BytesSource(obj)

    # Pipes and sockets report size 0 and cannot be read at an offset.
    if hasattr(obj, "seekable") and not obj.seekable():
        raise TypeError(f"cannot read partitions from non-seekable {type(obj).__name__}")

    if HAS_PREAD and hasattr(obj, "fileno"):
        try:
            obj.fileno()
        except OSError:
            # io.UnsupportedOperation, e.g. io.BytesIO.
            pass
        else:
            return FileSource(obj)

    if hasattr(obj, "seek") and hasattr(obj, "read") and hasattr(obj, "tell"):
        return StreamSource(obj)

    raise TypeError(f"cannot read partitions from {type(obj).__name__}")


@contextmanager
def open_source(path: str | os.PathLike[str]) -> Iterator[ByteSource]:
    """Open `path` read-only and yield a positional byte source for it."""
    with open(path, "rb") as handle:
        yield FileSource(handle) if HAS_PREAD else StreamSource(handle)


def checked_read(source: ByteSource, offset: int, length: int) -> bytes:
    """Positional read that reports I/O failures as PartitionReadError."""
    try:
        return source.read_at(offset, length)
    except OSError as exc:
        raise PartitionReadError(
            offset, f"reading {length} bytes at offset {offset} failed: {exc}"
        ) from exc
