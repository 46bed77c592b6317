"""Parsing of raw station payloads into station records."""

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ev_charging_insights.domain.exceptions import StationDataLoadError
from ev_charging_insights.domain.models.error_details import ErrorDetails
from ev_charging_insights.domain.models.station_record import StationRecord

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[StationRecord])


def parse_station_json(text: str, source: str) -> list[StationRecord]:
    """Decode a JSON document and parse it as a station record array."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise StationDataLoadError(
            ErrorDetails(reason=f"Station data is not valid JSON: {e.msg}", source=source)
        ) from e
    return parse_station_payload(payload, source)


def parse_station_payload(payload: Any, source: str) -> list[StationRecord]:
    """Validate a decoded payload as a list of station records.

    Raises:
        StationDataLoadError: If the payload is not an array or a record is malformed.
    """
    if not isinstance(payload, list):
        raise StationDataLoadError(
            ErrorDetails(
                reason=f"Station data must be a JSON array, got {type(payload).__name__}",
                source=source,
            )
        )

    try:
        records = _RECORDS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise StationDataLoadError(
            ErrorDetails(
                reason=f"Malformed station record at {location}: {first['msg']}",
                source=source,
            )
        ) from e

    logger.debug(f"Parsed {len(records)} station record(s) from {source}")
    return records
