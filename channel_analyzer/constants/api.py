"""
API and Network Configuration Constants.

Timeouts, endpoints, and response metadata.
"""

# ============================================================================
# TIMEOUTS (in seconds)
# ============================================================================

DEFAULT_TIMEOUT_HTTPX = 60
"""Default timeout for HTTP requests using httpx client."""

APIFY_RUN_TIMEOUT = 300
"""Timeout for a synchronous Apify actor run (scraping is slow)."""


# ============================================================================
# APIFY
# ============================================================================

APIFY_BASE_URL = "https://api.apify.com/v2"
"""Apify REST API root."""

APIFY_DEFAULT_ACTOR = "streamers~youtube-scraper"
"""Apify actor used to scrape channel videos."""

DATA_SOURCE_NAME = "Apify YouTube Scraper"
"""Data source label reported in responses."""


# ============================================================================
# RESPONSE METADATA
# ============================================================================

API_VERSION = "2.0"
"""Version reported in the meta block of every response."""
