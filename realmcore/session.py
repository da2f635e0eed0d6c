"""A network session: one TCP connection with a receive buffer and send queue."""

from __future__ import annotations

import asyncio
import logging
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from realmcore.recv_buffer import RecvBuffer
from realmcore.send_buffer import SendBuffer

if TYPE_CHECKING:
    from realmcore.service import Service

log = logging.getLogger(__name__)

RECV_BUFFER_SIZE = 4096
READ_SIZE = 4000


@dataclass
class EndPoint:
    """Host and port a service listens on or connects to."""

    host: str = ""
    port: int = 0


class Session:
    """One connection; subclasses override on_recv to consume incoming bytes."""

    def __init__(self, endpoint: EndPoint | None = None) -> None:
        endpoint = endpoint or EndPoint()
        self.endpoint = EndPoint(endpoint.host, endpoint.port)
        self._recv_buffer = RecvBuffer(RECV_BUFFER_SIZE)
        self._reader: asyncio.StreamReader | None = None
        self._writer: Any = None
        self._connected = False
        self._service_ref: weakref.ReferenceType[Service] | None = None

    @property
    def service(self) -> Service | None:
        """The owning service, if it is still alive."""
        return None if self._service_ref is None else self._service_ref()

    @service.setter
    def service(self, service: Service | None) -> None:
        self._service_ref = None if service is None else weakref.ref(service)

    @property
    def connected(self) -> bool:
        return self._connected

    def attach(self, reader: asyncio.StreamReader, writer: Any) -> None:
        """Bind the session to an open stream pair."""
        self._reader = reader
        self._writer = writer

    async def run(self) -> None:
        """Read from the connection until it ends, then disconnect."""
        reader = self._reader
        if reader is None:
            raise RuntimeError("session is not attached to a connection")
        try:
            while self._connected:
                view = self._recv_buffer.write_view()
                want = min(READ_SIZE, len(view))
                if want == 0:
                    break
                chunk = await reader.read(want)
                if not chunk:
                    break
                view[: len(chunk)] = chunk
                self._recv_buffer.on_write(len(chunk))
                if not self._process():
                    break
                self._recv_buffer.clean()
        except (ConnectionError, OSError) as exc:
            log.debug("session read failed: %s", exc)
        finally:
            self.disconnect()

    def _process(self) -> bool:
        data = bytes(self._recv_buffer.read_view())
        size = len(data)
        processed = self.on_recv(data)
        if processed <= 0 or processed > size:
            return False
        self._recv_buffer.on_read(processed)
        return True

    def on_recv(self, data: bytes) -> int:
        """Handle pending bytes and return how many were consumed.

        Returning zero or more than was given ends the session.
        """
        return len(data)

    def send(self, send_buffer: SendBuffer | bytes | bytearray | memoryview) -> None:
        """Queue a packet for sending; ignored when the session is not connected."""
        if not self._connected or self._writer is None:
            return
        if isinstance(send_buffer, SendBuffer):
            data = send_buffer.data()
        else:
            data = bytes(send_buffer)
        try:
            self._writer.write(data)
        except (ConnectionError, OSError) as exc:
            log.debug("session write failed: %s", exc)
            self.disconnect()

    def on_connect(self) -> None:
        """Called once the connection is established."""
        self._connected = True

    def disconnect(self) -> None:
        """Leave the service and close the connection; later calls do nothing."""
        if not self._connected and self._writer is None:
            return
        service = self.service
        if service is not None:
            service.release_session(self)
        self._connected = False
        writer, self._writer, self._reader = self._writer, None, None
        if writer is not None:
            try:
                writer.close()
            except (ConnectionError, OSError) as exc:
                log.debug("session close failed: %s", exc)
        self.on_disconnect()

    def on_disconnect(self) -> None:
        """Called after the connection is closed."""
        self._recv_buffer.clean()