"""Domain exceptions."""

from ev_charging_insights.domain.models.error_details import ErrorDetails


class StationDataLoadError(Exception):
    """Raised when the station record collection cannot be loaded.

    This is the only failure that crosses the pipeline boundary; it aborts
    initialization and is reported to the user.
    """

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(details.reason)
        self.details = details
