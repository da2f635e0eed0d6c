"""A TCP service that accepts or opens sessions and tracks them."""

from __future__ import annotations

import asyncio
import socket
from collections.abc import Callable
from typing import Any

from realmcore.rwlock import ReadWriteLock
from realmcore.send_buffer import SendBuffer
from realmcore.session import EndPoint, Session

DEFAULT_MAX_SESSIONS = 200
_CONNECT_HOST = "127.0.0.1"
_LISTEN_HOST = "0.0.0.0"


class Service:
    """Listens for connections, opens outgoing ones, and broadcasts to its sessions."""

    def __init__(
        self,
        port: int = 0,
        host: str = "",
        *,
        max_session_count: int = DEFAULT_MAX_SESSIONS,
        session_factory: Callable[[EndPoint], Session] = Session,
    ) -> None:
        self.endpoint = EndPoint(host, port)
        self.max_session_count = max_session_count
        self._session_factory = session_factory
        self._lock = ReadWriteLock()
        self._sessions: set[Session] = set()
        self._server: asyncio.AbstractServer | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def session_count(self) -> int:
        with self._lock.read_locked():
            return len(self._sessions)

    @property
    def sessions(self) -> frozenset[Session]:
        with self._lock.read_locked():
            return frozenset(self._sessions)

    async def start(self) -> EndPoint:
        """Start listening; the endpoint's port is updated to the bound port."""
        if self._server is not None:
            raise RuntimeError("service is already started")
        self._server = await asyncio.start_server(
            self._handle_client,
            host=self.endpoint.host or _LISTEN_HOST,
            port=self.endpoint.port,
            reuse_address=True,
            backlog=socket.SOMAXCONN,
        )
        self.endpoint.port = self._server.sockets[0].getsockname()[1]
        return self.endpoint

    async def _handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        session = self.create_session()
        session.attach(reader, writer)
        session.on_connect()
        self.add_session(session)
        await session.run()

    async def stop(self) -> None:
        """Stop listening and disconnect every session."""
        server, self._server = self._server, None
        if server is not None:
            server.close()
        for session in self.sessions:
            session.disconnect()
        tasks = list(self._tasks)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        if server is not None:
            await server.wait_closed()

    async def connect(self) -> Session:
        """Open a connection to the endpoint and start a session on it."""
        reader, writer = await asyncio.open_connection(
            self.endpoint.host or _CONNECT_HOST, self.endpoint.port
        )
        session = self.create_session()
        self.add_session(session)
        session.attach(reader, writer)
        session.on_connect()
        task = asyncio.create_task(session.run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return session

    def create_session(self) -> Session:
        """Make a new session bound to this service."""
        session = self._session_factory(self.endpoint)
        session.service = self
        return session

    def add_session(self, session: Session) -> None:
        with self._lock.write_locked():
            self._sessions.add(session)

    def release_session(self, session: Session) -> None:
        """Forget a session and notify on_release_session; unknown sessions are ignored."""
        with self._lock.write_locked():
            if session not in self._sessions:
                return
            self._sessions.discard(session)
        self.on_release_session(session)

    def on_release_session(self, session: Session) -> None:
        """Called after a session leaves the service."""

    def broadcast(self, send_buffer: SendBuffer | bytes) -> None:
        """Send the packet to every connected session."""
        for session in self.sessions:
            if session.connected:
                session.send(send_buffer)