"""Library-wide constants and defaults."""

# Kandilli Observatory (KOERI) plain-text bulletin of recent events
OBSERVATORY_URL = "http://www.koeri.boun.edu.tr/scripts/lst4.asp"

# The bulletin is served in the Turkish code page and often without a charset.
PAGE_ENCODING = "iso-8859-9"

# Time / timezone
SOURCE_TZ = "Europe/Istanbul"
DATETIME_FORMAT = "%Y.%m.%d %H:%M:%S"
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_TIMEOUT = 15.0  # seconds

# Importance thresholds
DEFAULT_MAX_DEPTH = 70.0      # km
DEFAULT_MIN_MAGNITUDE = 4.5

NO_RESULTS_MESSAGE = "No important earthquakes recently"

# Column names used when records are exported to a DataFrame
CANONICAL_FIELDS = [
    "occurred_at",       # tz-aware, display timezone
    "location",
    "latitude",
    "longitude",
    "depth_km",
    "magnitude",
]
