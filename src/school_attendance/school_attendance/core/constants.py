"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SATURDAY = 6
FRIDAY = 5

MIDDAY_HOUR = 12

WEEKLY_REST_REASON = "weekly rest day"

DEFAULT_TOP_PERFORMERS = 5
DEFAULT_ISSUE_THRESHOLD = 80

DEFAULT_HOLIDAY_LOCATION = "Jerusalem"

MIN_YEAR = 1900
MAX_YEAR = 2200
