"""A receive buffer with read and write cursors over a fixed byte array."""

from __future__ import annotations


class RecvBuffer:
    """Holds received bytes; capacity is ten times the nominal buffer size."""

    BUFFER_COUNT = 10

    def __init__(self, buffer_size: int) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self.capacity = buffer_size * self.BUFFER_COUNT
        self._buffer = bytearray(self.capacity)
        self._read_pos = 0
        self._write_pos = 0

    @property
    def data_size(self) -> int:
        """Bytes written but not yet read."""
        return self._write_pos - self._read_pos

    @property
    def free_size(self) -> int:
        """Bytes that can still be written after the write cursor."""
        return self.capacity - self._write_pos

    def clean(self) -> None:
        """Reset the cursors when empty, or move pending data to the front when space runs low."""
        size = self.data_size
        if size == 0:
            self._read_pos = self._write_pos = 0
        elif self.free_size < self.buffer_size * 2:
            self._buffer[0:size] = self._buffer[self._read_pos:self._write_pos]
            self._read_pos = 0
            self._write_pos = size

    def on_read(self, num_bytes: int) -> None:
        """Advance the read cursor past consumed bytes."""
        if num_bytes > self.data_size:
            raise ValueError(f"cannot consume {num_bytes} bytes, only {self.data_size} pending")
        self._read_pos += num_bytes

    def on_write(self, num_bytes: int) -> None:
        """Advance the write cursor past newly received bytes."""
        if num_bytes > self.free_size:
            raise ValueError(f"cannot commit {num_bytes} bytes, only {self.free_size} free")
        self._write_pos += num_bytes

    def read_view(self) -> memoryview:
        """View of the pending, unread bytes."""
        return memoryview(self._buffer)[self._read_pos:self._write_pos]

    def write_view(self) -> memoryview:
        """View of the free space after the write cursor."""
        return memoryview(self._buffer)[self._write_pos:]