"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 4
MAX_USERNAME_LENGTH = 64
MAX_LABEL_LENGTH = 255

DAYS_PER_WEEK = 7
DEFAULT_HOURLY_RATE = 45.0
DEFAULT_OVERTIME_MULTIPLIER = 1.5

# Overtime thresholds, in hours
DAILY_OVERTIME_THRESHOLD = 9
WEEKLY_OVERTIME_THRESHOLD = 40
