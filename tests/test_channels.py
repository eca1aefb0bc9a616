#!/usr/bin/env python3
"""
Byte channels and their scoped acquisition.
"""

import io
import threading

import pytest

from bfi import ByteSink, ByteSource, MemoryChannel, hold


def test_byte_source_reads_until_eof():
    source = ByteSource(io.BytesIO(b"hi"))
    assert source.read_byte() == ord("h")
    assert source.read_byte() == ord("i")
    assert source.read_byte() is None


class _FlushCounter(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


def test_byte_sink_flushes_every_byte():
    stream = _FlushCounter()
    sink = ByteSink(stream)
    sink.write_byte(65)
    sink.write_byte(66)
    assert stream.getvalue() == b"AB"
    assert stream.flushes == 2


def test_memory_channel_loops_back():
    channel = MemoryChannel(b"x")
    channel.write_byte(1)
    assert channel.read_byte() == ord("x")
    assert channel.read_byte() == 1
    assert channel.read_byte() is None
    assert channel.output == b"\x01"


def test_hold_allows_same_channel_twice():
    channel = MemoryChannel()
    with hold(channel, channel) as (src, dst):
        assert src is dst is channel


def test_hold_excludes_other_threads_and_releases():
    source, sink = MemoryChannel(), MemoryChannel()
    got_lock = []

    def try_acquire():
        acquired = sink._lock.acquire(blocking=False)
        got_lock.append(acquired)
        if acquired:
            sink._lock.release()

    with hold(source, sink):
        t = threading.Thread(target=try_acquire)
        t.start()
        t.join()
    t = threading.Thread(target=try_acquire)
    t.start()
    t.join()
    assert got_lock == [False, True]


def test_hold_releases_on_error():
    source, sink = MemoryChannel(), MemoryChannel()
    try:
        with hold(source, sink):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    released = []
    t = threading.Thread(target=lambda: released.append(source._lock.acquire(blocking=False)))
    t.start()
    t.join()
    assert released == [True]


def test_byte_sink_treats_empty_write_as_rejection():
    class _NonBlocking(io.BytesIO):
        def write(self, data):
            return None

    with pytest.raises(OSError, match="accepted no bytes"):
        ByteSink(_NonBlocking()).write_byte(65)
