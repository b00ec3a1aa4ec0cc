"""
Shared Constants

Centralized constants used across the application to ensure consistency.
"""

# Port that is left out of generated URLs
DEFAULT_HTTP_PORT: int = 8080

# Query string key rewritten by next/prev page links
PAGE_QUERY_KEY: str = "page"
