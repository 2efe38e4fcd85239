"""Constants for the DNS-over-HTTPS client."""

from . import __version__

# --- Resolver endpoint ---
HOSTNAME = "1.1.1.1"
BASE_URL = f"https://{HOSTNAME}/dns-query"

# --- Request headers ---
USER_AGENT = f"dnsoverhttps/{__version__} (+python-httpx)"
CONTENT_TYPE = "application/dns-json"

# --- Transport ---
DEFAULT_TIMEOUT = 10.0
PREFER_HTTP2 = True

# Maximum number of characters of a response body shown in decode errors
PREVIEW_MAX_LENGTH = 500
