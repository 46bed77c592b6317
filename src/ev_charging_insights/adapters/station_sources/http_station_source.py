"""Station source fetching the record array over HTTP.

Fetches once and does not retry; any failure is reported as a load error.
"""

import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from ev_charging_insights.adapters.station_sources.record_parser import parse_station_payload
from ev_charging_insights.adapters.station_sources.request_logger import log_station_request
from ev_charging_insights.domain.exceptions import StationDataLoadError
from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.station_record import StationRecord
from ev_charging_insights.domain.ports.station_source import StationSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class HttpStationSource(StationSource):
    """Adapter loading station records from an HTTP endpoint."""

    def __init__(
        self,
        url: str,
        session: "ClientSession | None" = None,
        timeout_seconds: int = 30,
        params: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the endpoint URL and optional aiohttp session.

        Args:
            url: Endpoint returning a JSON array of station records.
            session: Optional shared aiohttp session; a temporary one is used otherwise.
            timeout_seconds: Total request timeout.
            params: Optional query parameters (e.g., an Open Charge Map API key).
        """
        self._url = url
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._params = params

    async def load_records(self) -> list[StationRecord]:
        """Fetch and parse the station record array."""
        if self._session is not None:
            payload = await self._fetch(self._session)
        else:
            async with aiohttp.ClientSession() as session:
                payload = await self._fetch(session)
        return parse_station_payload(payload, self._url)

    async def _fetch(self, session: "ClientSession") -> Any:
        log_station_request(self._url, self._params)
        try:
            async with session.get(
                self._url, params=self._params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response)
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error fetching station data from {self._url}: {e!r}")
            raise StationDataLoadError(
                ErrorDetails(reason=f"Could not reach data source: {e!r}", source=self._url)
            ) from e

    async def _handle_response(self, response: "ClientResponse") -> Any:
        """Check the response status and decode the JSON body."""
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"Data source returned status {response.status}: {response_text[:200]}"
            )
            raise StationDataLoadError(
                ErrorDetails(
                    status_code=response.status,
                    reason=f"Data source returned status {response.status}",
                    source=self._url,
                )
            )

        try:
            return await response.json(content_type=None)
        except json.JSONDecodeError as e:
            raise StationDataLoadError(
                ErrorDetails(reason=f"Station data is not valid JSON: {e.msg}", source=self._url)
            ) from e
        except UnicodeDecodeError as e:
            raise StationDataLoadError(
                ErrorDetails(
                    reason=f"Station data is not valid {e.encoding}: {e.reason}", source=self._url
                )
            ) from e
