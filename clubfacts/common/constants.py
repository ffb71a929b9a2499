"""Application constants."""

USER_AGENT = "club-facts/0.3 (+research crawler; contact: configured-email)"
HUB_URL = "https://en.wikipedia.org/wiki/List_of_top-division_football_clubs_in_UEFA_countries"
DEFAULT_DELAY_SECONDS = 1.0
LOCATION_LABELS = ("ground", "home ground", "stadium", "location")

DOMINANT_SHARE = 0.25
MAX_PALETTE_SIZE = 3

STATUS_RESOLVED = "resolved"
STATUS_COLOUR_MISSING = "colour_missing"
STATUS_LOCATION_MISSING = "location_missing"
STATUS_FAILED = "failed"

EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "team",
    "url",
    "event",
    "status",
    "duration_ms",
    "error_code",
    "message",
)
