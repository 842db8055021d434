"""Queue-backed subscriber for event stream connections."""

from __future__ import annotations

import asyncio
import contextlib
import uuid

from mention_relay.domain.contracts.subscriber import SubscriberProtocol


class QueueSubscriber(SubscriberProtocol):
    """Bounded FIFO of encoded frames drained by one streaming response.

    The hub only ever calls the non-blocking ``offer``; the socket write happens
    in the connection's own task, so a stalled client can only fill its own
    queue.
    """

    def __init__(self, max_queued_frames: int = 16) -> None:
        """Initialize the subscriber.

        Args:
            max_queued_frames: Frames buffered before ``offer`` starts failing.
        """
        self._subscriber_id = uuid.uuid4().hex[:12]
        # One extra slot so close() can always wake a reader
        self._queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=max_queued_frames + 1)
        self._max_queued_frames = max_queued_frames
        self._closed = False

    @property
    def subscriber_id(self) -> str:
        """Stable identifier used in logs."""
        return self._subscriber_id

    @property
    def closed(self) -> bool:
        """Whether the subscriber stopped accepting frames."""
        return self._closed

    @property
    def pending(self) -> int:
        """Number of frames waiting to be written."""
        return self._queue.qsize()

    def offer(self, frame: str) -> bool:
        """Queue an encoded frame without blocking."""
        if self._closed or self._queue.qsize() >= self._max_queued_frames:
            return False
        self._queue.put_nowait(frame)
        return True

    def close(self) -> None:
        """Stop accepting frames and wake the stream writer."""
        if self._closed:
            return
        self._closed = True
        with contextlib.suppress(asyncio.QueueFull):
            self._queue.put_nowait(None)

    async def next_frame(self, timeout: float | None = None) -> str | None:
        """Wait for the next frame.

        Args:
            timeout: Seconds to wait before giving up, None waits forever.

        Returns:
            The frame, or None once the subscriber is closed.

        Raises:
            TimeoutError: If no frame arrived within ``timeout``.
        """
        if self._closed:
            return None
        if timeout is None:
            frame = await self._queue.get()
        else:
            frame = await asyncio.wait_for(self._queue.get(), timeout=timeout)
        if frame is None or self._closed:
            return None
        return frame
