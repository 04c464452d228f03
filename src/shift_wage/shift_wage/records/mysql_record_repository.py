from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..intervals.model import Interval
from .model import WorkRecord
from .repository import WorkRecordRepository


def _to_record(r: dict, breaks: Sequence[dict]) -> WorkRecord:
    return WorkRecord(
        record_id=int(r["record_id"]),
        work=Interval(r["work_start"], r["work_end"], name="work"),
        breaks=tuple(
            Interval(b["break_start"], b["break_end"], name=f"breaks[{i}]") for i, b in enumerate(breaks)
        ),
        hourly_rate=int(r["hourly_rate"]),
        net_minutes=int(r["net_minutes"]),
        night_minutes=int(r["night_minutes"]),
        wage=int(r["wage"]),
        created_at=r.get("created_at"),
    )


class MySQLWorkRecordRepository(WorkRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, record: WorkRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_records(work_start, work_end, hourly_rate, net_minutes, night_minutes, wage, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,COALESCE(%s, CURRENT_TIMESTAMP))
                """,
                (
                    record.work.start,
                    record.work.end,
                    record.hourly_rate,
                    record.net_minutes,
                    record.night_minutes,
                    record.wage,
                    record.created_at,
                ),
            )
            record_id = int(cur.lastrowid)
            if record.breaks:
                cur.executemany(
                    """
                    INSERT INTO work_record_breaks(record_id, position, break_start, break_end)
                    VALUES(%s,%s,%s,%s)
                    """,
                    [(record_id, i, b.start, b.end) for i, b in enumerate(record.breaks)],
                )
            return record_id

    def list_all(self) -> Sequence[WorkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, work_start, work_end, hourly_rate, net_minutes, night_minutes, wage, created_at
                FROM work_records
                ORDER BY record_id
                """
            )
            rows = fetchall(cur)
            cur.execute(
                """
                SELECT record_id, break_start, break_end
                FROM work_record_breaks
                ORDER BY record_id, position
                """
            )
            breaks_by_record: dict[int, list[dict]] = defaultdict(list)
            for b in fetchall(cur):
                breaks_by_record[int(b["record_id"])].append(b)
            return [_to_record(r, breaks_by_record.get(int(r["record_id"]), [])) for r in rows]

    def get_by_id(self, record_id: int) -> Optional[WorkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, work_start, work_end, hourly_rate, net_minutes, night_minutes, wage, created_at
                FROM work_records
                WHERE record_id=%s
                """,
                (record_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            cur.execute(
                """
                SELECT break_start, break_end
                FROM work_record_breaks
                WHERE record_id=%s
                ORDER BY position
                """,
                (record_id,),
            )
            return _to_record(r, fetchall(cur))

    def delete(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_record_breaks WHERE record_id=%s", (record_id,))
            cur.execute("DELETE FROM work_records WHERE record_id=%s", (record_id,))
            return cur.rowcount > 0
