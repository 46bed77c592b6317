"""Status classification shared by filtering and aggregation."""

from ev_charging_insights.domain.models.station_record import StationRecord
from ev_charging_insights.domain.models.status_category import StatusCategory

PLANNED_MARKER = "plan"


def classify_status(record: StationRecord) -> StatusCategory:
    """Derive the status category of a record.

    The operational flag wins over the title, so a station flagged operational
    with a title like "Planned upgrade" is still operational.
    """
    status = record.status_type
    if status is None:
        return StatusCategory.UNKNOWN
    if status.is_operational:
        return StatusCategory.OPERATIONAL
    if status.title and PLANNED_MARKER in status.title.lower():
        return StatusCategory.PLANNED
    return StatusCategory.UNKNOWN
