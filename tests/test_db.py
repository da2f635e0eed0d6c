import sqlite3

import pytest

from realmcore.db import DBConnection, DBError, DBPool, ParamBinder

SELECT_FRIEND = "SELECT friendCode FROM Friend WHERE playerCode = ?"
INSERT_FRIEND = "INSERT INTO Friend (playerCode, friendCode) VALUES (?,?)"
DELETE_FRIEND = "DELETE FROM Friend WHERE playerCode = ? AND friendCode = ?"


@pytest.fixture
def conn():
    connection = DBConnection(sqlite3.connect(":memory:"))
    connection.exec_direct("CREATE TABLE Friend (playerCode INTEGER, friendCode INTEGER)")
    yield connection
    connection.close()


def test_insert_and_select_round_trip(conn):
    conn.exec_direct(INSERT_FRIEND, (1, 2))
    conn.exec_direct(INSERT_FRIEND, (1, 3))
    conn.exec_direct(INSERT_FRIEND, (9, 4))
    conn.prepare(SELECT_FRIEND)
    conn.execute((1,))
    assert sorted(row[0] for row in conn) == [2, 3]


def test_fetch_returns_none_when_exhausted(conn):
    conn.exec_direct(SELECT_FRIEND, (1,))
    assert conn.fetch() is None


def test_delete_removes_row(conn):
    conn.exec_direct(INSERT_FRIEND, (1, 2))
    conn.exec_direct(DELETE_FRIEND, (1, 2))
    conn.exec_direct(SELECT_FRIEND, (1,))
    assert list(conn) == []


def test_execute_without_prepare_raises(conn):
    with pytest.raises(DBError):
        conn.execute(())


def test_bad_sql_raises_db_error(conn):
    with pytest.raises(DBError):
        conn.exec_direct("SELECT nothing FROM Missing")


def test_close_cursor_allows_new_statement(conn):
    conn.exec_direct(INSERT_FRIEND, (5, 6))
    conn.exec_direct(SELECT_FRIEND, (5,))
    conn.close_cursor()
    conn.exec_direct(SELECT_FRIEND, (5,))
    assert conn.fetch() == (6,)


def test_closed_connection_rejects_use():
    connection = DBConnection(sqlite3.connect(":memory:"))
    connection.close()
    assert connection.closed
    with pytest.raises(DBError):
        connection.exec_direct("SELECT 1")


def test_manual_commit_defers_visibility(tmp_path):
    path = tmp_path / "game.db"
    writer = DBConnection(sqlite3.connect(path))
    writer.exec_direct("CREATE TABLE Friend (playerCode INTEGER, friendCode INTEGER)")
    writer.commit()
    writer.set_manual_commit()
    assert writer.manual_commit
    writer.exec_direct(INSERT_FRIEND, (1, 2))

    reader = DBConnection(sqlite3.connect(path))
    reader.exec_direct(SELECT_FRIEND, (1,))
    assert list(reader) == []
    reader.close_cursor()

    writer.commit()
    reader.exec_direct(SELECT_FRIEND, (1,))
    assert list(reader) == [(2,)]
    reader.close()
    writer.close()


def test_param_binder_collects_in_order():
    binder = ParamBinder()
    binder.bind_param(1).bind_param(2)
    assert binder.params() == (1, 2)
    binder.reset()
    assert binder.params() == ()


def test_param_binder_maps_rows_to_columns(conn):
    conn.exec_direct(INSERT_FRIEND, (7, 8))
    binder = ParamBinder(max_columns=2)
    binder.bind_param(7)
    binder.bind_column("friendCode")
    conn.exec_direct(SELECT_FRIEND, binder.params())
    assert binder.to_record(conn.fetch()) == {"friendCode": 8}


def test_param_binder_column_limit():
    binder = ParamBinder(max_columns=1)
    binder.bind_column("a")
    with pytest.raises(DBError):
        binder.bind_column("b")


def test_pool_init_creates_connections():
    pool = DBPool()
    pool.init(lambda: sqlite3.connect(":memory:"))
    assert len(pool) == 10
    pool.close()
    assert len(pool) == 0


def test_pool_pop_push_is_fifo():
    pool = DBPool()
    pool.init(lambda: sqlite3.connect(":memory:"), size=2)
    first = pool.pop()
    second = pool.pop()
    pool.push(first)
    pool.push(second)
    assert pool.pop() is first
    pool.close()


def test_pool_opens_new_when_empty():
    pool = DBPool()
    pool.init(lambda: sqlite3.connect(":memory:"), size=0)
    conn = pool.pop()
    conn.exec_direct("SELECT 1")
    assert conn.fetch() == (1,)
    assert len(pool) == 0
    conn.close()


def test_pool_connection_context_returns_connection():
    pool = DBPool()
    pool.init(lambda: sqlite3.connect(":memory:"), size=1)
    with pool.connection() as conn:
        assert len(pool) == 0
    assert len(pool) == 1
    assert pool.pop() is conn
    conn.close()


def test_pool_uninitialised_raises():
    with pytest.raises(DBError):
        DBPool().pop()


def test_pool_rejects_closed_connection():
    pool = DBPool()
    conn = DBConnection(sqlite3.connect(":memory:"))
    conn.close()
    with pytest.raises(DBError):
        pool.push(conn)


def test_pool_close_closes_connections():
    pool = DBPool()
    pool.init(lambda: sqlite3.connect(":memory:"), size=1)
    conn = pool.pop()
    pool.push(conn)
    pool.close()
    assert conn.closed