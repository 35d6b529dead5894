# shiftclock/core/constants.py
# Constants for wage validation, persisted keys & export layout

SECONDS_PER_HOUR = 3600

# wage inputs at or below this value are rejected; values between it & 0 are accepted but cannot start a shift
WAGE_NEGATIVE_TOLERANCE = -0.1

# * Key-value store entries
KEY_WAGE = "hourly_wage"
KEY_HISTORY = "history"
KEY_TIMER = "timer"

# * Export layout
DEFAULT_EXPORT_FILENAME = "shifts.csv"
EXPORT_HEADER = ("datetime", "seconds", "formatted_time", "amount_usd", "wage_usd_hr")

# * Display refresh cadence (seconds)
DEFAULT_REFRESH_INTERVAL = 0.25
MIN_REFRESH_INTERVAL = 0.05
