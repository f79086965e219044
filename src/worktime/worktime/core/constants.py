"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SHIFT_START = "08:00"
DEFAULT_SHIFT_END = "17:00"

# Raw access log columns (tab separated).
LOG_DELIMITER = "\t"
LOG_MIN_FIELDS = 4
LOG_EMPLOYEE_FIELD = 0
LOG_TIMESTAMP_FIELD = 1
LOG_DIRECTION_FIELD = 3

EXPORT_HEADER = ["Employee ID", "Date", "Arrival", "Departure", "Worked Hours", "Warnings"]
EXPORT_TOTAL_LABEL = "TOTAL"
EXPORT_WARNING_SEPARATOR = "; "

MAX_DISPLAYED_WARNINGS = 10

REPORT_NOTE_SEPARATOR = ", "
REPORT_EMPTY_TIME = "-"
