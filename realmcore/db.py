"""Database connections, parameter binding and a connection pool."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from realmcore.rwlock import ReadWriteLock

DEFAULT_POOL_SIZE = 10


class DBError(RuntimeError):
    """Raised when a database operation fails."""


class DBConnection:
    """A database connection with one statement cursor and an optional prepared query."""

    def __init__(self, raw: Any) -> None:
        self._raw = raw
        self._cursor: Any = None
        self.query: str | None = None
        self.manual_commit = False

    def _statement(self) -> Any:
        if self._raw is None:
            raise DBError("connection is closed")
        if self._cursor is None:
            try:
                self._cursor = self._raw.cursor()
            except Exception as exc:
                raise DBError(f"could not open a cursor: {exc}") from exc
        return self._cursor

    def prepare(self, query: str) -> None:
        """Remember a query to be run by execute()."""
        if not query:
            raise DBError("empty query")
        self._statement()
        self.query = query

    def execute(self, params: Sequence[Any] = ()) -> None:
        """Run the prepared query with the given parameters."""
        if self.query is None:
            raise DBError("no prepared query")
        self.exec_direct(self.query, params)

    def exec_direct(self, query: str, params: Sequence[Any] = ()) -> None:
        """Run a query immediately."""
        cursor = self._statement()
        try:
            cursor.execute(query, tuple(params))
        except Exception as exc:
            raise DBError(f"query failed: {exc}") from exc

    def fetch(self) -> tuple[Any, ...] | None:
        """The next result row, or None when there are no more."""
        cursor = self._statement()
        try:
            row = cursor.fetchone()
        except Exception as exc:
            raise DBError(f"fetch failed: {exc}") from exc
        return None if row is None else tuple(row)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        while (row := self.fetch()) is not None:
            yield row

    def close_cursor(self) -> None:
        """Discard pending results; the next statement opens a fresh cursor."""
        if self._cursor is not None:
            try:
                self._cursor.close()
            except Exception as exc:
                raise DBError(f"could not close cursor: {exc}") from exc
            finally:
                self._cursor = None

    def set_manual_commit(self) -> None:
        """Turn off autocommit so that changes wait for commit()."""
        raw = self._raw
        if raw is None:
            raise DBError("connection is closed")
        try:
            if hasattr(raw, "autocommit"):
                raw.autocommit = False
            elif getattr(raw, "isolation_level", "") is None:
                raw.isolation_level = "DEFERRED"
        except Exception as exc:
            raise DBError(f"could not disable autocommit: {exc}") from exc
        self.manual_commit = True

    def commit(self) -> None:
        """Commit the current transaction."""
        if self._raw is None:
            raise DBError("connection is closed")
        try:
            self._raw.commit()
        except Exception as exc:
            raise DBError(f"commit failed: {exc}") from exc

    def close(self) -> None:
        """Release the cursor and the underlying connection."""
        if self._raw is None:
            return
        try:
            self.close_cursor()
        finally:
            raw, self._raw = self._raw, None
            try:
                raw.close()
            except Exception as exc:
                raise DBError(f"could not close connection: {exc}") from exc

    @property
    def closed(self) -> bool:
        return self._raw is None

    def __enter__(self) -> DBConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ParamBinder:
    """Collects query parameters and result column names in bind order."""

    def __init__(self, max_columns: int | None = None) -> None:
        self.max_columns = max_columns
        self._params: list[Any] = []
        self._columns: list[str] = []

    def bind_param(self, value: Any) -> ParamBinder:
        self._params.append(value)
        return self

    def bind_column(self, name: str) -> ParamBinder:
        if self.max_columns is not None and len(self._columns) >= self.max_columns:
            raise DBError(f"at most {self.max_columns} columns can be bound")
        self._columns.append(name)
        return self

    def params(self) -> tuple[Any, ...]:
        """The bound parameters, in order."""
        return tuple(self._params)

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._columns)

    def to_record(self, row: Sequence[Any]) -> dict[str, Any]:
        """Map a fetched row onto the bound column names."""
        if len(row) < len(self._columns):
            raise DBError(f"row has {len(row)} values for {len(self._columns)} columns")
        return dict(zip(self._columns, row))

    def reset(self) -> None:
        """Forget all bound parameters and columns."""
        self._params.clear()
        self._columns.clear()


class DBPool:
    """A queue of open connections; an empty pool opens a new connection on demand."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._queue: deque[DBConnection] = deque()
        self._factory: Callable[[], Any] | None = None

    def __len__(self) -> int:
        return len(self._queue)

    def _open(self) -> DBConnection:
        if self._factory is None:
            raise DBError("pool is not initialised")
        try:
            return DBConnection(self._factory())
        except DBError:
            raise
        except Exception as exc:
            raise DBError(f"could not connect: {exc}") from exc

    def init(self, factory: Callable[[], Any], size: int = DEFAULT_POOL_SIZE) -> None:
        """Open size connections using factory, which returns a DB-API connection."""
        if size < 0:
            raise ValueError("pool size must not be negative")
        self._factory = factory
        with self._lock.write_locked():
            for _ in range(size):
                self._queue.append(self._open())

    def pop(self) -> DBConnection:
        """Take the oldest pooled connection, or open a new one."""
        with self._lock.write_locked():
            if self._queue:
                return self._queue.popleft()
            return self._open()

    def push(self, conn: DBConnection) -> None:
        """Return a connection to the pool."""
        if conn.closed:
            raise DBError("cannot pool a closed connection")
        with self._lock.write_locked():
            self._queue.append(conn)

    @contextmanager
    def connection(self) -> Iterator[DBConnection]:
        """Borrow a connection for the duration of the block."""
        conn = self.pop()
        try:
            yield conn
        finally:
            if not conn.closed:
                self.push(conn)

    def close(self) -> None:
        """Close every pooled connection."""
        with self._lock.write_locked():
            while self._queue:
                self._queue.popleft().close()