"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_RECENT_LIMIT = 20
DEFAULT_SHARED_PASSWORD = "password123"

SESSION_KEY = "worktrack_user"
SUBMISSIONS_KEY = "worktrack_submissions"
USERS_KEY = "worktrack_users"

EXPORT_FILENAME = "work-tracking-data.csv"
EXPORT_HEADER = ("Date", "User", "Attendance", "Seconds Done", "Remarks")
UNKNOWN_USER_NAME = "Unknown User"
