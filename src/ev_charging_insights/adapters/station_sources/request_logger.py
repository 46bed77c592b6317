"""Request logging for the HTTP station source.

Disabled unless EVI_LOG_REQUESTS=true. Open Charge Map passes its API key as a
query parameter, so key-like parameters are masked before the URL is logged.
"""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "EVI_LOG_REQUESTS"
MASKED = "***"
_KEY_PARAMS = frozenset({"key", "api_key", "apikey"})


def request_logging_enabled() -> bool:
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def masked_request_url(url: str, params: dict[str, Any] | None) -> str:
    """Return the request URL with its query parameters, API keys masked."""
    if not params:
        return url
    query = urlencode(
        sorted(
            (name, MASKED if name.lower() in _KEY_PARAMS else value)
            for name, value in params.items()
        ),
        safe="*",
    )
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def log_station_request(url: str, params: dict[str, Any] | None = None) -> None:
    """Log the station data GET if request logging is enabled."""
    if request_logging_enabled():
        logger.info(f"Station data request: GET {masked_request_url(url, params)}")
