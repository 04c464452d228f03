from datetime import datetime

from shift_wage.export.csv_exporter import HEADER, TOTAL_LABEL, encode_csv, render_records_csv
from shift_wage.intervals.model import Interval
from shift_wage.payroll.totals import compute_totals
from shift_wage.records.model import WorkRecord


def _record(record_id, work, breaks, net, night, wage):
    return WorkRecord(
        record_id=record_id,
        work=Interval(*work),
        breaks=tuple(Interval(*b) for b in breaks),
        hourly_rate=1000,
        net_minutes=net,
        night_minutes=night,
        wage=wage,
    )


def test_render_rows_and_total():
    records = [
        _record(
            1,
            (datetime(2025, 10, 10, 22, 0), datetime(2025, 10, 11, 6, 0)),
            [(datetime(2025, 10, 11, 0, 0), datetime(2025, 10, 11, 1, 0))],
            420,
            360,
            8500,
        ),
        _record(
            2,
            (datetime(2025, 10, 12, 9, 0), datetime(2025, 10, 12, 18, 0)),
            [
                (datetime(2025, 10, 12, 12, 0), datetime(2025, 10, 12, 13, 0)),
                (datetime(2025, 10, 12, 15, 0), datetime(2025, 10, 12, 15, 15)),
            ],
            465,
            0,
            7750,
        ),
    ]

    text = render_records_csv(records, compute_totals(r.result for r in records))
    lines = text.splitlines()

    assert lines[0] == ",".join(HEADER)
    assert lines[1] == "10/10/2025,10:00 PM - 6:00 AM,12:00 AM - 1:00 AM,7,360,8500"
    assert lines[2] == "10/12/2025,9:00 AM - 6:00 PM,12:00 PM - 1:00 PM / 3:00 PM - 3:15 PM,7.75,0,7750"
    assert lines[3] == f"{TOTAL_LABEL},,,14.75,360,16250"


def test_empty_export_has_header_and_zero_total():
    lines = render_records_csv([], compute_totals([])).splitlines()

    assert lines == [",".join(HEADER), f"{TOTAL_LABEL},,,0.00,0,0"]


def test_encoding_adds_bom():
    assert encode_csv("a,b\n") == b"\xef\xbb\xbfa,b\n"
