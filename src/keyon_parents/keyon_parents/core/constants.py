"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

LATE_CUTOFF = time(7, 15)
DEFAULT_CAMPUS_WINDOW_DAYS = 7
DEFAULT_UNREAD_LIMIT = 20
DEFAULT_FANOUT_WORKERS = 8

EXCELLENT_RATE = 90
GOOD_RATE = 80

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000

SYSTEM_SENDER = "Sistema"
