"""Mentioned media repository port."""

from typing import Protocol

from mention_relay.domain.models.media_record import MediaRecord


class MentionedMediaRepository(Protocol):
    """Port for retrieving the most recent media item the account was mentioned in."""

    async def fetch_latest_mentioned_media(self) -> MediaRecord | None:
        """Fetch the latest mentioned media item.

        Returns:
            The record, or None if the upstream has no item with a media URL.

        Raises:
            UpstreamFetchError: If the upstream answered with an error or an
                unusable body.
        """
        ...
