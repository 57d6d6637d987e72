"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TARGET_PERCENTAGE = 75
MIN_TARGET_PERCENTAGE = 0
MAX_TARGET_PERCENTAGE = 100

# Settings screen slider bounds
TARGET_SLIDER_MIN = 50
TARGET_SLIDER_MAX = 100
TARGET_SLIDER_STEP = 5

# Percentage points above target still flagged as fragile
WARNING_BUFFER_POINTS = 5

SUBJECT_COLORS = (
    "#4f46e5",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#06b6d4",
    "#8b5cf6",
    "#ec4899",
    "#f97316",
)
DEFAULT_SUBJECT_COLOR = SUBJECT_COLORS[0]

MIN_PASSWORD_LENGTH = 6
VERIFICATION_CODE_LENGTH = 6
VERIFICATION_CODE_TTL_SECONDS = 10 * 60

SUBJECTS_FILE_NAME = "bunksmart_subjects.json"
SETTINGS_FILE_NAME = "bunksmart_settings.json"
ACCOUNTS_FILE_NAME = "bunksmart_accounts.json"

ADVICE_FALLBACK = "Looks like the AI is taking a bunk too! Try again later."
DEFAULT_ADVISOR_MODEL = "gemini/gemini-2.0-flash"
DEFAULT_ADVISOR_TIMEOUT_SECONDS = 20
