"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Deployment-tunable values are overridden from the settings module.
"""

from datetime import time

DEFAULT_WORKING_DAYS_PER_MONTH = 26
DEFAULT_LATE_PENALTY_FRACTION = 0.10

DEFAULT_OFFICE_START = time(9, 0)
DEFAULT_LATE_GRACE_MINUTES = 15

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_LIST_LIMIT = 500

DEPARTMENTS = ("Operations", "Logistics", "Finance", "HR", "Technical", "Sales", "Management")
