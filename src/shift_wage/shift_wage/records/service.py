from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from ..intervals.model import Interval
from ..payroll.calculator.base import WageCalculator
from ..payroll.engine import compute_shift, compute_totals
from ..payroll.model import Totals
from .model import WorkRecord
from .repository import WorkRecordRepository

logger = logging.getLogger(__name__)


class WorkRecordService:
    def __init__(
        self,
        records: WorkRecordRepository,
        *,
        calculator: Optional[WageCalculator] = None,
    ):
        self._records = records
        self._calculator = calculator

    def submit(
        self,
        *,
        work_start: datetime,
        work_end: datetime,
        breaks: Sequence[tuple[datetime, datetime]] = (),
        hourly_rate: int,
    ) -> WorkRecord:
        work = Interval(work_start, work_end, name="work")
        break_spans = tuple(Interval(s, e, name=f"breaks[{i}]") for i, (s, e) in enumerate(breaks))
        result = compute_shift(work, break_spans, hourly_rate, calculator=self._calculator)

        record = WorkRecord(
            record_id=None,
            work=work,
            breaks=break_spans,
            hourly_rate=hourly_rate,
            net_minutes=result.net_minutes,
            night_minutes=result.night_minutes,
            wage=result.wage,
            created_at=now_local(),
        )
        record_id = self._records.insert(record)
        logger.info(
            "Saved work record id=%s net=%s night=%s wage=%s",
            record_id,
            result.net_minutes,
            result.night_minutes,
            result.wage,
        )
        return replace(record, record_id=record_id)

    def list_records(self) -> Sequence[WorkRecord]:
        return self._records.list_all()

    def delete(self, record_id: int) -> None:
        if not self._records.delete(record_id):
            raise NotFoundError(f"Không tìm thấy bản ghi {record_id}")
        logger.info("Deleted work record id=%s", record_id)

    def totals(self, records: Optional[Sequence[WorkRecord]] = None) -> Totals:
        """Totals recomputed from the full current collection."""
        if records is None:
            records = self._records.list_all()
        return compute_totals(r.result for r in records)
