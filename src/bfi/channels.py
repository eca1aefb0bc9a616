from __future__ import annotations

import sys
import threading
from collections import deque
from contextlib import ExitStack, contextmanager
from typing import BinaryIO, Iterator, Optional, Tuple


class Channel:
    """Base for I/O channels: owns the lock that gives a run exclusive use."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def acquired(self) -> Iterator['Channel']:
        with self._lock:
            yield self


class ByteSource(Channel):
    def __init__(self, stream: BinaryIO):
        super().__init__()
        self.stream = stream

    def read_byte(self) -> Optional[int]:
        data = self.stream.read(1)
        if not data:
            return None
        if isinstance(data, str):
            raise ValueError("input stream is text, expected bytes")
        return data[0]


class ByteSink(Channel):
    def __init__(self, stream: BinaryIO):
        super().__init__()
        self.stream = stream

    def write_byte(self, value: int) -> None:
        try:
            written = self.stream.write(bytes((value,)))
        except TypeError as exc:
            raise ValueError(f"output stream rejected bytes: {exc}") from exc
        if not written:
            raise OSError("stream accepted no bytes")
        self.stream.flush()


class MemoryChannel(Channel):
    """In-memory FIFO usable as both source and sink.

    Bytes written become readable in order, so one instance can loop a
    program's output back into its input.
    """

    def __init__(self, data: bytes = b""):
        super().__init__()
        self._pending = deque(data)
        self.written = bytearray()

    def read_byte(self) -> Optional[int]:
        if not self._pending:
            return None
        return self._pending.popleft()

    def write_byte(self, value: int) -> None:
        self.written.append(value)
        self._pending.append(value)

    @property
    def output(self) -> bytes:
        return bytes(self.written)


@contextmanager
def hold(source: Channel, sink: Channel) -> Iterator[Tuple[Channel, Channel]]:
    # Source then sink; the same object may be passed twice (re-entrant lock).
    with ExitStack() as stack:
        stack.enter_context(source.acquired())
        stack.enter_context(sink.acquired())
        yield source, sink


def stdio_channels() -> Tuple[ByteSource, ByteSink]:
    stdin = getattr(sys.stdin, "buffer", sys.stdin)
    stdout = getattr(sys.stdout, "buffer", sys.stdout)
    return ByteSource(stdin), ByteSink(stdout)
