"""Graph API repository for the latest mentioned media item.

API Documentation: https://developers.facebook.com/docs/instagram-platform/instagram-graph-api/reference/ig-user/mentioned_media
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from mention_relay.adapters.api_request_logger import log_api_request
from mention_relay.adapters.graph_api.constants import (
    ERROR_BODY_LOG_LIMIT,
    MENTIONED_MEDIA_FIELDS,
)
from mention_relay.adapters.graph_api.payloads import MentionedMediaResponse
from mention_relay.domain.models import ErrorDetails, MediaRecord, UpstreamFetchError
from mention_relay.domain.ports.media_repository import MentionedMediaRepository

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from mention_relay.adapters.config import AppConfig

logger = logging.getLogger(__name__)


class GraphMediaRepository(MentionedMediaRepository):
    """Fetches mentioned media through the Instagram Graph API."""

    def __init__(
        self,
        session: ClientSession,
        access_token: str,
        user_id: str,
        base_url: str = "https://graph.facebook.com",
        api_version: str = "v19.0",
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize with a shared aiohttp session and credentials."""
        self._session = session
        self._access_token = access_token
        self._user_id = user_id
        self._url = f"{base_url.rstrip('/')}/{api_version}/{user_id}"
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @classmethod
    def from_config(cls, session: ClientSession, config: AppConfig) -> GraphMediaRepository:
        """Create a repository from application configuration."""
        return cls(
            session=session,
            access_token=config.ig_access_token,
            user_id=config.ig_user_id,
            base_url=config.graph_api_base_url,
            api_version=config.graph_api_version,
            timeout_seconds=config.graph_api_timeout,
        )

    @property
    def url(self) -> str:
        """User node URL the repository queries."""
        return self._url

    async def fetch_latest_mentioned_media(self) -> MediaRecord | None:
        """Fetch the latest media item the account was mentioned in.

        Returns:
            The record, or None if no mentioned item carries a media URL.

        Raises:
            UpstreamFetchError: On transport errors, non-200 answers or bodies
                that do not look like a user node.
        """
        params: dict[str, str] = {
            "fields": MENTIONED_MEDIA_FIELDS,
            "access_token": self._access_token,
        }
        log_api_request("GET", self._url, params=params)

        try:
            async with self._session.get(self._url, params=params, timeout=self._timeout) as response:
                payload = await self._read_payload(response)
        except aiohttp.ClientError as e:
            raise UpstreamFetchError(ErrorDetails(reason=f"Request failed: {e}")) from e
        except TimeoutError as e:
            raise UpstreamFetchError(ErrorDetails(reason="Request timed out")) from e

        try:
            parsed = MentionedMediaResponse.model_validate(payload)
        except ValidationError as e:
            raise UpstreamFetchError(
                ErrorDetails(status_code=200, reason=f"Unexpected response shape: {e}")
            ) from e

        item = parsed.first_item()
        if item is None:
            logger.info("Graph API returned no mentioned media")
            return None
        return item.to_record()

    async def _read_payload(self, response: ClientResponse) -> Any:
        """Read a JSON body, raising on error statuses and undecodable bodies."""
        body = await response.text()
        if response.status != 200:
            error_body = body[:ERROR_BODY_LOG_LIMIT] if body else "(empty response body)"
            raise UpstreamFetchError(ErrorDetails(status_code=response.status, reason=error_body))
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise UpstreamFetchError(
                ErrorDetails(status_code=response.status, reason=f"Invalid JSON body: {e}")
            ) from e
