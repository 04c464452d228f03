from __future__ import annotations

import csv
import io
from typing import Sequence

from ..payroll.model import Totals
from ..records.model import WorkRecord

HEADER = ["勤務日", "時間", "休憩時間", "実働(時間)", "深夜分(分)", "給料(円)"]
TOTAL_LABEL = "合計"


def render_records_csv(records: Sequence[WorkRecord], totals: Totals) -> str:
    """Records as CSV text with a trailing total row. No BOM; see ``encode_csv``."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(HEADER)
    for r in records:
        writer.writerow([r.work_date, r.time_label, r.break_label, r.hours, r.night_minutes, r.wage])
    writer.writerow([TOTAL_LABEL, "", "", totals.sum_hours_display, totals.sum_night_minutes, totals.sum_wage])
    return out.getvalue()


def encode_csv(text: str) -> bytes:
    # BOM so spreadsheet apps detect UTF-8.
    return text.encode("utf-8-sig")
