"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_HOURS = 8
DEFAULT_RECENT_LIMIT = 20
DEFAULT_SEARCH_LIMIT = 200

FILE_NUMBER_PREFIX = "F"
REFERENCE_PREFIX = "REF"
RECORD_NUMBER_PREFIX = "R"
TRACKING_PREFIX = "TRK"
SEQUENCE_WIDTH = 3

MAX_ATTACHMENT_BYTES = 1024 * 1024
ALLOWED_ATTACHMENT_TYPES = frozenset(
    {
        "application/pdf",
        "image/jpeg",
        "image/png",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)

MIN_RATING = 1
MAX_RATING = 5
MIN_PASSWORD_LENGTH = 6

PERFORMANCE_REVIEW_SUBJECT = "Performance Review"
