"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PERIODS_PER_DAY = 5

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_DATE_FORMAT = "%b %d, %Y"

STORAGE_KEY_PREFIX = "ams-"

EXCEL_SHEET_NAME_LIMIT = 31
EXCEL_SHEET_NAME_FORBIDDEN = r"[\\/?*\[\]:]"
EXCEL_MAX_COLUMNS = 16384
EXCEL_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
