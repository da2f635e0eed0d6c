"""Packet framing: a 4-byte header of id and total size, followed by the payload."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from realmcore.send_buffer import SendBuffer, SendBufferManager
from realmcore.threads import current_send_buffer_manager

T = TypeVar("T")

_HEADER = struct.Struct("<HH")
_MAX_PACKET = 0xFFFF


class PacketError(ValueError):
    """Raised when a packet cannot be built or parsed."""


@dataclass
class PacketHeader:
    """Packet id and total packet size including the header."""

    id: int
    size: int

    SIZE = _HEADER.size

    def pack(self) -> bytes:
        return _HEADER.pack(self.id, self.size)

    @classmethod
    def unpack(cls, data: bytes | bytearray | memoryview) -> PacketHeader:
        if len(data) < cls.SIZE:
            raise PacketError(f"need {cls.SIZE} bytes for a header, got {len(data)}")
        packet_id, size = _HEADER.unpack_from(data)
        return cls(packet_id, size)


def check_packet_header(header: PacketHeader | None, offset: int, length: int) -> bool:
    """Whether a whole packet described by header is present from offset up to length."""
    if header is None:
        return False
    data_size = length - offset
    if data_size < PacketHeader.SIZE:
        return False
    if data_size < header.size:
        return False
    return True


def parse_packet(
    parser: Callable[[bytes], T],
    buffer: bytes | bytearray | memoryview,
    data_size: int,
    offset: int,
) -> tuple[T, int]:
    """Parse data_size bytes at offset; return the message and the offset after it."""
    data = bytes(buffer[offset:offset + data_size])
    if len(data) < data_size:
        raise PacketError(f"need {data_size} bytes at offset {offset}, got {len(data)}")
    try:
        message = parser(data)
    except (ValueError, TypeError) as exc:
        raise PacketError(f"payload could not be parsed: {exc}") from exc
    return message, offset + data_size


def make_header_packet(
    packet_id: int, payload_size: int, manager: SendBufferManager | None = None
) -> SendBuffer:
    """Open a send buffer for a packet and write its header."""
    packet_size = payload_size + PacketHeader.SIZE
    if payload_size < 0 or packet_size > _MAX_PACKET:
        raise PacketError(f"payload size {payload_size} does not fit a packet")
    if manager is None:
        manager = current_send_buffer_manager()
    send_buffer = manager.open(packet_size)
    send_buffer.buffer[: PacketHeader.SIZE] = PacketHeader(packet_id, packet_size).pack()
    send_buffer.close(packet_size)
    return send_buffer


def make_packet(
    payload: bytes | bytearray | memoryview,
    packet_id: int,
    manager: SendBufferManager | None = None,
) -> SendBuffer:
    """Build a complete packet from a serialized payload."""
    size = len(payload)
    send_buffer = make_header_packet(packet_id, size, manager)
    if size > 0:
        send_buffer.buffer[PacketHeader.SIZE:PacketHeader.SIZE + size] = payload
    return send_buffer