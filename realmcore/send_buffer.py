"""Pooled send buffers carved from large reusable chunks."""

from __future__ import annotations

import threading
import weakref


class SendBuffer:
    """A region of a chunk reserved for one outgoing packet."""

    def __init__(self, chunk: SendBufferChunk, alloc_size: int, buffer: memoryview) -> None:
        self.chunk = chunk
        self.alloc_size = alloc_size
        self.buffer = buffer
        self.write_size = 0

    def close(self, write_size: int) -> None:
        """Mark how many bytes were written and release the chunk for reuse."""
        if self.write_size + write_size > self.alloc_size:
            raise ValueError(
                f"write size {write_size} exceeds allocated size {self.alloc_size}"
            )
        self.write_size = write_size
        self.chunk.close(write_size)

    def data(self) -> bytes:
        """The bytes written so far."""
        return bytes(self.buffer[: self.write_size])


class SendBufferChunk:
    """A fixed-size block of memory that hands out one send buffer at a time."""

    CHUNK_SIZE = 40960

    def __init__(self) -> None:
        self._chunk = bytearray(self.CHUNK_SIZE)
        self.in_use = False
        self.pos = 0
        self.generation = 0

    def open(self, size: int) -> SendBuffer:
        """Reserve size bytes from the start of the chunk."""
        if size < 0 or size > self.CHUNK_SIZE:
            raise ValueError(f"size {size} does not fit in a chunk of {self.CHUNK_SIZE}")
        self.in_use = True
        self.pos = size
        self.generation += 1
        return SendBuffer(self, size, memoryview(self._chunk)[:size])

    def close(self, size: int) -> None:
        self.reset()

    def reset(self) -> None:
        self.in_use = False
        self.pos = 0


class SendBufferManager:
    """A pool of chunks; chunks return to the pool when released or when their buffer is freed."""

    INIT_CHUNK_COUNT = 100

    def __init__(self, initial_chunks: int = INIT_CHUNK_COUNT) -> None:
        self._lock = threading.Lock()
        self._chunks = [SendBufferChunk() for _ in range(initial_chunks)]
        self._pooled = {id(c) for c in self._chunks}

    @property
    def available(self) -> int:
        """Number of chunks waiting in the pool."""
        return len(self._chunks)

    def open(self, size: int) -> SendBuffer:
        """Take a chunk from the pool (or a fresh one) and open a buffer of size bytes."""
        if size < 0 or size > SendBufferChunk.CHUNK_SIZE:
            raise ValueError(
                f"size {size} does not fit in a chunk of {SendBufferChunk.CHUNK_SIZE}"
            )
        with self._lock:
            if self._chunks:
                chunk = self._chunks.pop()
                self._pooled.discard(id(chunk))
            else:
                chunk = SendBufferChunk()
        chunk.reset()
        buffer = chunk.open(size)
        weakref.finalize(buffer, self._reclaim, chunk, chunk.generation)
        return buffer

    def release(self, chunk: SendBufferChunk) -> None:
        """Return a chunk to the pool; releasing a pooled chunk again does nothing."""
        with self._lock:
            if id(chunk) in self._pooled:
                return
            self._pooled.add(id(chunk))
            self._chunks.append(chunk)

    def _reclaim(self, chunk: SendBufferChunk, generation: int) -> None:
        if chunk.generation == generation:
            self.release(chunk)