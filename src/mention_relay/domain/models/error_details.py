"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str


class UpstreamFetchError(Exception):
    """Raised when the upstream media API cannot produce a usable answer."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(
            f"Upstream fetch failed ({details.status_code}): {details.reason}"
            if details.status_code is not None
            else f"Upstream fetch failed: {details.reason}"
        )
        self.details = details
