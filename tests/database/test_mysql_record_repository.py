from __future__ import annotations

from datetime import datetime

from shift_wage.intervals.model import Interval
from shift_wage.records.model import WorkRecord
from shift_wage.records.mysql_record_repository import MySQLWorkRecordRepository


class FakeCursor:
    def __init__(self, results):
        self._results = list(results)
        self.executed: list[tuple] = []
        self.lastrowid = 7
        self.rowcount = 1

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def executemany(self, sql, rows):
        self.executed.append((" ".join(sql.split()), list(rows)))

    def fetchall(self):
        return self._results.pop(0)

    def fetchone(self):
        rows = self._results.pop(0)
        return rows[0] if rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, *results):
        self.cursor = FakeCursor(results)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def at(day: int, hour: int) -> datetime:
    return datetime(2025, 10, day, hour, 0)


def test_insert_writes_record_and_breaks():
    factory = FakeConnFactory()
    repo = MySQLWorkRecordRepository(factory)
    record = WorkRecord(
        record_id=None,
        work=Interval(at(10, 22), at(11, 6)),
        breaks=(Interval(at(11, 0), at(11, 1)),),
        hourly_rate=1000,
        net_minutes=420,
        night_minutes=360,
        wage=8500,
        created_at=at(10, 21),
    )

    assert repo.insert(record) == 7
    assert factory.conn.committed
    (insert_sql, params), (breaks_sql, rows) = factory.cursor.executed
    assert insert_sql.startswith("INSERT INTO work_records")
    assert "COALESCE(%s, CURRENT_TIMESTAMP)" in insert_sql
    assert params == (at(10, 22), at(11, 6), 1000, 420, 360, 8500, at(10, 21))
    assert rows == [(7, 0, at(11, 0), at(11, 1))]


def test_list_all_groups_breaks_by_record():
    factory = FakeConnFactory(
        [
            {"record_id": 1, "work_start": at(10, 9), "work_end": at(10, 18), "hourly_rate": 1200,
             "net_minutes": 480, "night_minutes": 0, "wage": 9600, "created_at": None},
            {"record_id": 2, "work_start": at(11, 22), "work_end": at(12, 5), "hourly_rate": 1000,
             "net_minutes": 420, "night_minutes": 420, "wage": 8750, "created_at": None},
        ],
        [{"record_id": 1, "break_start": at(10, 12), "break_end": at(10, 13)}],
    )

    records = MySQLWorkRecordRepository(factory).list_all()

    assert [r.record_id for r in records] == [1, 2]
    assert records[0].breaks == (Interval(at(10, 12), at(10, 13)),)
    assert records[1].breaks == ()
    assert records[1].result.wage == 8750


def test_get_by_id_missing():
    assert MySQLWorkRecordRepository(FakeConnFactory([])).get_by_id(5) is None
