"""Typed views of Graph API response bodies."""

from pydantic import BaseModel, ConfigDict, Field

from mention_relay.domain.models import MediaRecord


class GraphMediaItem(BaseModel):
    """A single media object as returned by the Graph API."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    media_type: str | None = None
    media_url: str | None = None
    permalink: str | None = None
    caption: str | None = None
    timestamp: str | None = None

    def to_record(self) -> MediaRecord | None:
        """Convert to a media record, or None if there is no media URL."""
        if not self.media_url:
            return None
        return MediaRecord(
            media_url=self.media_url,
            permalink=self.permalink,
            caption=self.caption,
            timestamp=self.timestamp,
        )


class GraphMediaPage(BaseModel):
    """A paginated edge of media objects."""

    model_config = ConfigDict(extra="ignore")

    data: list[GraphMediaItem] = Field(default_factory=list)


class MentionedMediaResponse(BaseModel):
    """Response of a user node lookup with the mentioned_media edge."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    mentioned_media: GraphMediaPage | None = None

    def first_item(self) -> GraphMediaItem | None:
        """The most recent mentioned media item, if any."""
        if self.mentioned_media is None or not self.mentioned_media.data:
            return None
        return self.mentioned_media.data[0]
