"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

STORE_NAMESPACE = "nexus_"

# Logical store keys (the namespace prefix is added by the store).
USERS_KEY = "users"
ATTENDANCE_KEY = "attendance"
LEAVES_KEY = "leaves"
ANNOUNCEMENTS_KEY = "announcements"
DOCUMENTS_KEY = "documents"
TASKS_KEY = "tasks"
PAYROLL_KEY = "payroll"
NOTIFICATIONS_KEY = "notifications"

LATE_CUTOFF = time(9, 0)
HALF_DAY_CUTOFF = time(16, 0)

DEFAULT_CREDENTIAL = "password"
DEFAULT_ACTIVITY_LIMIT = 5

# The employee the demo logs in as; seeding leaves their day untouched.
SEED_EXCLUDED_USER_IDS = ("u2",)

# Simulated network latency, in milliseconds.
LATENCY_LOGIN_MS = 600
LATENCY_CHECK_IN_MS = 500
LATENCY_CHECK_OUT_MS = 500
LATENCY_LEAVE_CREATE_MS = 400
LATENCY_LEAVE_DECIDE_MS = 300
LATENCY_ANNOUNCEMENT_MS = 400
LATENCY_TASK_CREATE_MS = 200
LATENCY_MARK_READ_MS = 100
LATENCY_MARK_ALL_READ_MS = 200
