"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api"
DEFAULT_PORT = 8000
DEFAULT_TOKEN_EXPIRES_HOURS = 3
UNSPECIFIED_GROUP = "Unspecified"
