"""Latest event domain model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from mention_relay.domain.models.media_record import MediaRecord


class LatestEvent(BaseModel):
    """Event pushed to display clients whenever the latest record changes."""

    model_config = ConfigDict(frozen=True)

    type: Literal["latest"] = "latest"
    latest: MediaRecord

    def to_json(self) -> str:
        """Serialize with camelCase record keys and explicit nulls."""
        return self.model_dump_json(by_alias=True)
