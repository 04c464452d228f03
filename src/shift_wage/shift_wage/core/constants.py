"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time
from decimal import Decimal

MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60

# Night window: 22:00 -> 05:00 of the following calendar day.
NIGHT_START = time(22, 0)
NIGHT_END = time(5, 0)

NIGHT_PREMIUM = Decimal("1.25")

CSV_FILENAME = "勤務記録.csv"
