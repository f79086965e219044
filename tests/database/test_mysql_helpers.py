from datetime import time, timedelta

import pytest

from worktime.database.bootstrap import SCHEMA_PATH, _strip_create_db_and_use, iter_sql_statements
from worktime.database.mysql_base import db_cursor, mysql_time_to_hhmm


def test_iter_sql_statements_splits_outside_quotes():
    sql = "-- comment; ignored\nCREATE TABLE a (x INT);\nINSERT INTO a VALUES ('1;2');\n"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('1;2')"]


def test_schema_creates_every_table():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    for table in ("access_logs", "shift_defaults", "monthly_records", "daily_records", "employees"):
        assert any(f"CREATE TABLE IF NOT EXISTS {table}" in s for s in statements)


@pytest.mark.parametrize(
    "value,expected",
    [
        (time(8, 30, 15), "08:30"),
        (timedelta(hours=17, minutes=45, seconds=59), "17:45"),
        (timedelta(hours=24, minutes=5), "00:05"),
        ("6:05:00", "06:05"),
        (None, None),
    ],
)
def test_mysql_time_to_hhmm(value, expected):
    assert mysql_time_to_hhmm(value) == expected


def test_mysql_time_to_hhmm_rejects_other_types():
    with pytest.raises(TypeError):
        mysql_time_to_hhmm(830)


class FakeCursor:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self):
        self.cur = FakeCursor()
        self.events = []

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.events.append("commit")

    def rollback(self):
        self.events.append("rollback")

    def close(self):
        self.events.append("close")


class FakeFactory:
    def __init__(self):
        self.conn = FakeConnection()

    def connect(self):
        return self.conn


def test_db_cursor_commits_and_closes():
    factory = FakeFactory()

    with db_cursor(factory) as (conn, cur):
        assert conn is factory.conn

    assert factory.conn.events == ["commit", "close"]
    assert factory.conn.cur.closed


def test_db_cursor_rolls_back_on_error():
    factory = FakeFactory()

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    assert factory.conn.events == ["rollback", "close"]
    assert factory.conn.cur.closed
