"""Ví dụ: dùng wage engine trực tiếp (không qua Flask, không cần DB).

Ca đêm 22:00 -> 06:00 hôm sau, nghỉ 00:00 -> 01:00, lương 1000/giờ.
"""

from datetime import datetime

from shift_wage.intervals.model import Interval
from shift_wage.payroll.engine import compute_shift, compute_totals


def main():
    work = Interval(datetime(2025, 10, 10, 22, 0), datetime(2025, 10, 11, 6, 0), name="work")
    breaks = [Interval(datetime(2025, 10, 11, 0, 0), datetime(2025, 10, 11, 1, 0), name="breaks[0]")]

    result = compute_shift(work, breaks, 1000)
    print(result)
    print(compute_totals([result, result]).as_dict())


if __name__ == "__main__":
    main()
