"""Shared fixtures for station record tests."""

from collections.abc import Callable
from typing import Any

import pytest

from ev_charging_insights.domain.models import StationRecord

StationFactory = Callable[..., StationRecord]

_MISSING: Any = object()


def build_station(
    region: str | None = _MISSING,
    town: str | None = _MISSING,
    is_operational: bool | None = _MISSING,
    status_title: str | None = _MISSING,
    operator: str | None = _MISSING,
) -> StationRecord:
    """Build a record from Open Charge Map style data, omitting groups without values."""
    data: dict[str, Any] = {}

    address = {}
    if region is not _MISSING:
        address["StateOrProvince"] = region
    if town is not _MISSING:
        address["Town"] = town
    if address:
        data["AddressInfo"] = address

    status = {}
    if is_operational is not _MISSING:
        status["IsOperational"] = is_operational
    if status_title is not _MISSING:
        status["Title"] = status_title
    if status:
        data["StatusType"] = status

    if operator is not _MISSING:
        data["OperatorInfo"] = {"Title": operator}

    return StationRecord.model_validate(data)


@pytest.fixture
def make_station() -> StationFactory:
    """Factory fixture for station records."""
    return build_station
