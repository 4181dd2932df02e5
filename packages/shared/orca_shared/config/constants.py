"""Process-wide API constants shared by every service and client."""

from __future__ import annotations

# Path segment used for versioned routes, e.g. /api/v1.
API_VERSION = "v1"

# Increment on breaking API changes that require clients to update.
COMPATIBILITY_CHECK = 1

# Header carrying the client's compatibility version.
COMPATIBILITY_CHECK_HEADER = "X-Compatibility-Check"

# Cookie holding the session token.
AUTH_COOKIE_NAME = "token"
