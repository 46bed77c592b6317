"""Load failure details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why the station dataset could not be loaded.

    ``status_code`` is only set when an HTTP data source answered with a
    non-200 status.
    """

    model_config = ConfigDict(frozen=True)

    reason: str
    source: str | None = None  # File path or URL the load was attempted from
    status_code: int | None = None

    @property
    def is_http_failure(self) -> bool:
        """Whether the data source answered with an HTTP error status."""
        return self.status_code is not None
