"""Charging station record domain model.

Field aliases follow the Open Charge Map POI export, so records can be
validated straight from the raw JSON array. Fields the pipeline does not use
are kept as extras and survive a dump with ``by_alias=True``.
"""

from pydantic import BaseModel, ConfigDict, Field

from ev_charging_insights.domain.models.region_code import RegionCode

UNKNOWN_LABEL = "Unknown"


class AddressInfo(BaseModel):
    """Address group of a station record.

    ``state_or_province`` holds the raw region text until the record is
    normalized, and the canonical region code afterwards.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    state_or_province: str | None = Field(default=None, alias="StateOrProvince")
    town: str | None = Field(default=None, alias="Town")


class StatusType(BaseModel):
    """Status group of a station record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    is_operational: bool | None = Field(default=None, alias="IsOperational")
    title: str | None = Field(default=None, alias="Title")


class OperatorInfo(BaseModel):
    """Operator group of a station record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    title: str | None = Field(default=None, alias="Title")


class StationRecord(BaseModel):
    """A single charging station as received from the data source."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    address_info: AddressInfo | None = Field(default=None, alias="AddressInfo")
    status_type: StatusType | None = Field(default=None, alias="StatusType")
    operator_info: OperatorInfo | None = Field(default=None, alias="OperatorInfo")

    @property
    def region(self) -> str:
        """Region value used for filtering and grouping (Unknown when absent)."""
        if self.address_info is None or not self.address_info.state_or_province:
            return RegionCode.UNKNOWN.value
        return self.address_info.state_or_province

    @property
    def locality(self) -> str:
        """Town/city value used for filtering (Unknown when absent)."""
        if self.address_info is None or not self.address_info.town:
            return UNKNOWN_LABEL
        return self.address_info.town

    @property
    def operator_title(self) -> str:
        """Operator name used for grouping (Unknown when absent)."""
        if self.operator_info is None or not self.operator_info.title:
            return UNKNOWN_LABEL
        return self.operator_info.title
