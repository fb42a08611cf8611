"""Internal constants shared across the package."""

BASE_URL = "https://tgrcode.com"
USER_AGENT = "smm2wr (+https://tgrcode.com/mm2)"

LEVEL_INFO_MULTIPLE_ENDPOINT = "/mm2/level_info_multiple"

# ------------------------------------------------------------------
# Course IDs
# ------------------------------------------------------------------

#: Characters Nintendo uses in course and maker codes (no I, O or Z).
COURSE_ID_ALPHABET: frozenset[str] = frozenset("ABCDEFGHJKLMNPQRSTUVWXY0123456789")
COURSE_ID_LENGTH = 9
COURSE_ID_SEPARATORS: frozenset[str] = frozenset("- \t")

# ------------------------------------------------------------------
# Polling defaults
# ------------------------------------------------------------------

DEFAULT_POLL_PERIOD_S = 120.0
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_RETRY_INTERVAL_S = 20.0
DEFAULT_REQUEST_TIMEOUT_S = 30.0

DEFAULT_COURSE_IDS_PATH = "course-ids.json"
DEFAULT_HISTORY_PATH = "world-records.json"

#: Longest response snippet included in log lines and error messages.
LOG_BODY_LIMIT = 200
