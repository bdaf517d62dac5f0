"""Application constants."""

DEFAULT_LOCALE = "en"
DEFAULT_SENSITIVITY = "base"
SENSITIVITIES = ("base", "accent", "case", "variant")
INPUT_FORMATS = ("lines", "json", "jsonl")
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "event",
    "status",
    "locale",
    "sensitivity",
    "items_in",
    "items_out",
    "cache_hits",
    "cache_misses",
    "engines",
    "duration_ms",
    "error_code",
    "message",
)
