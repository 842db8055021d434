"""In-memory latest value store implementation."""

from __future__ import annotations

import logging

from mention_relay.domain.contracts.latest_value_store import LatestValueStoreProtocol
from mention_relay.domain.models.media_record import MediaRecord

logger = logging.getLogger(__name__)


class InMemoryLatestValueStore(LatestValueStoreProtocol):
    """Single-slot, process-local holder of the latest media record.

    Records are frozen, so replacing one is a single reference assignment and a
    reader always sees a complete record.
    """

    def __init__(self, initial: MediaRecord | None = None) -> None:
        """Initialize the store with the empty record unless one is given."""
        self._record = initial if initial is not None else MediaRecord.empty()

    def get(self) -> MediaRecord:
        """Get the current record."""
        return self._record

    def replace(self, record: MediaRecord) -> None:
        """Replace the current record wholesale."""
        self._record = record
        logger.debug(f"Latest record replaced: {record.media_url}")
