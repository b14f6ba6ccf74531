"""Cache-Control directives for API responses."""

SESSIONS_CACHE = "public, s-maxage=30, stale-while-revalidate=300"
SESSIONS_CDN_CACHE = "public, s-maxage=60"
DIRECTORY_CACHE = "public, s-maxage=300, stale-while-revalidate=600"
NO_CACHE = "no-cache"
