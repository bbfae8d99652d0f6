"""Shared constants for the Picshare application."""

# Fixed feed resource
DEFAULT_BASE_URL = "https://programming-elm.com/"
DEFAULT_FEED_URL = DEFAULT_BASE_URL + "feed"

# HTTP defaults
DEFAULT_USER_AGENT = "picshare/0.1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RESPONSE_SIZE_BYTES = 5 * 1024 * 1024  # 5 MB

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300

# Supported URL schemes
VALID_URL_SCHEMES = ("http://", "https://")

# Log component names
COMPONENT_CLI = "cli"
COMPONENT_FETCH = "fetch"
COMPONENT_PROGRAM = "program"
COMPONENT_RENDERER = "renderer"
COMPONENT_STORE = "store"
