"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

EMPLOYEE_ID_PREFIX = "EMP-"
EMPLOYEE_ID_BODY_LENGTH = 6
EMPLOYEE_ID_PAD_CHAR = "0"

DEFAULT_TITLE_NAME = "Employee"
DEFAULT_DERIVED_NAME = "Collaborator"

EMPTY_TIME = "--:--"
EMPTY_DURATION = "--"

DEFAULT_HISTORY_LIMIT = 6

REGISTRATION_MESSAGE = "Registration successful for {name}. Sign in to get started."
