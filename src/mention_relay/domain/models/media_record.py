"""Media record domain model."""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class MediaRecord(BaseModel):
    """The latest known mentioned media item.

    Either every field is empty (nothing received yet) or ``media_url`` is set.
    Instances are immutable and replaced wholesale.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    media_url: str | None = None
    permalink: str | None = None
    caption: str | None = None
    timestamp: str | None = None

    @model_validator(mode="after")
    def check_media_url_present(self) -> "MediaRecord":
        """Reject records that carry details but no media URL."""
        if self.media_url is None and not self.is_empty:
            raise ValueError("media_url is required when any other field is set")
        return self

    @property
    def is_empty(self) -> bool:
        """Whether this is the initial record with no fields set."""
        return (
            self.media_url is None
            and self.permalink is None
            and self.caption is None
            and self.timestamp is None
        )

    @classmethod
    def empty(cls) -> "MediaRecord":
        """Create the initial record with no fields set."""
        return cls()
