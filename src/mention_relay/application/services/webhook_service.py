"""Webhook use cases: handshake, authentication and fetch-and-broadcast."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mention_relay.domain.models import LatestEvent, MediaRecord, UpstreamFetchError

if TYPE_CHECKING:
    from mention_relay.domain.contracts import (
        BroadcastHubProtocol,
        LatestValueStoreProtocol,
        SignatureVerifierProtocol,
    )
    from mention_relay.domain.ports import MentionedMediaRepository

logger = logging.getLogger(__name__)

SUBSCRIBE_MODE = "subscribe"


class WebhookService:
    """Coordinates the inbound webhook with the store and the hub."""

    def __init__(
        self,
        verify_token: str,
        signature_verifier: SignatureVerifierProtocol,
        store: LatestValueStoreProtocol,
        hub: BroadcastHubProtocol,
        media_repository: MentionedMediaRepository | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            verify_token: Token the sender must echo during the handshake.
            signature_verifier: Verifier for notification signatures.
            store: Holder of the latest record.
            hub: Broadcast hub for connected display clients.
            media_repository: Upstream source of records. None when credentials
                are not configured, which turns notifications into a plain
                acknowledgment.
        """
        self._verify_token = verify_token
        self._signature_verifier = signature_verifier
        self._store = store
        self._hub = hub
        self._media_repository = media_repository

    @property
    def fetch_enabled(self) -> bool:
        """Whether notifications trigger an upstream fetch."""
        return self._media_repository is not None

    def verify_handshake(
        self, mode: str | None, verify_token: str | None, challenge: str | None
    ) -> str | None:
        """Answer a subscription handshake.

        Returns:
            The challenge to echo back, or None if the request must be rejected.
        """
        if not self._verify_token:
            logger.warning("Rejecting webhook handshake: no verify token configured")
            return None
        if mode == SUBSCRIBE_MODE and verify_token == self._verify_token:
            logger.info("Webhook verification succeeded")
            return challenge or ""
        logger.warning(f"Webhook verification failed (mode={mode!r})")
        return None

    def authenticate(self, raw_body: bytes, signature_header: str | None) -> bool:
        """Check that a notification comes from the trusted sender."""
        if not self._signature_verifier.enabled:
            return True
        if self._signature_verifier.verify(raw_body, signature_header):
            return True
        logger.warning("Rejecting webhook notification: signature verification failed")
        return False

    async def process_notification(self) -> MediaRecord | None:
        """Fetch the latest mentioned media and broadcast it.

        Runs after the notification was acknowledged, so every failure is
        logged here and never propagates.

        Returns:
            The new record if the store was updated, None otherwise.
        """
        if self._media_repository is None:
            logger.debug("Upstream credentials not configured, skipping fetch")
            return None

        try:
            record = await self._media_repository.fetch_latest_mentioned_media()
        except UpstreamFetchError as e:
            logger.error(f"Webhook fetch error: {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected webhook fetch error: {e}", exc_info=True)
            return None

        if record is None or record.media_url is None:
            logger.info("Upstream returned no mentioned media with a media URL")
            return None

        return self.publish(record)

    def publish(self, record: MediaRecord) -> MediaRecord:
        """Store a record and push it to every subscriber.

        Replace and push happen without a suspension point in between, so a
        subscriber either got the new record as its snapshot or receives it as
        a live event, never both and never neither.
        """
        self._store.replace(record)
        delivered = self._hub.push_to_all(LatestEvent(latest=record))
        logger.info(f"Broadcasted latest media {record.media_url} to {delivered} subscriber(s)")
        return record
