"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SECRET_PREFIX = "dev_"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3000, description="Port to bind the server to")
    shutdown_grace_seconds: int = Field(
        default=5,
        description="Seconds to wait for open connections to finish on shutdown",
    )

    # Webhook configuration
    ig_verify_token: str = Field(
        default="",
        description="Token the webhook sender must present during the verification handshake",
    )
    meta_app_secret: str = Field(
        default="",
        description="Shared secret for X-Hub-Signature-256 checks; a 'dev_' prefix disables them",
    )

    # Graph API configuration
    ig_access_token: str = Field(default="", description="Graph API access token")
    ig_user_id: str = Field(default="", description="Instagram business account id")
    graph_api_base_url: str = Field(
        default="https://graph.facebook.com", description="Base URL of the Graph API"
    )
    graph_api_version: str = Field(default="v19.0", description="Graph API version path segment")
    graph_api_timeout: int = Field(
        default=10, description="Timeout for Graph API requests in seconds"
    )

    # Event stream configuration
    subscriber_queue_size: int = Field(
        default=16,
        description="Frames buffered per display client before it is dropped as stalled",
    )
    subscriber_keepalive_seconds: int = Field(
        default=15,
        description="Seconds between keepalive comments on idle event streams (0 disables)",
    )

    # Display configuration
    screen_title: str = Field(default="Latest Mention", description="Display page title")
    screen_hint: str = Field(
        default="Mention @yourhandle in your caption to appear here",
        description="Hint line shown in the corner of the display page",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=300,
        description="Maximum number of requests allowed per IP address per minute (0 disables)",
    )

    @field_validator("subscriber_queue_size")
    @classmethod
    def validate_subscriber_queue_size(cls, v: int) -> int:
        """Validate the per-subscriber queue holds at least one frame."""
        if v < 1:
            raise ValueError("subscriber_queue_size must be at least 1")
        return v

    @field_validator("subscriber_keepalive_seconds", "rate_limit_per_minute")
    @classmethod
    def validate_not_negative(cls, v: int) -> int:
        """Validate counters and intervals are not negative."""
        if v < 0:
            raise ValueError("value must not be negative")
        return v

    @field_validator("graph_api_base_url")
    @classmethod
    def validate_graph_api_base_url(cls, v: str) -> str:
        """Strip trailing slashes so paths can be appended."""
        return v.rstrip("/")

    @property
    def signature_verification_enabled(self) -> bool:
        """Whether webhook signatures are checked (disabled by a 'dev_' secret)."""
        return not self.meta_app_secret.startswith(DEV_SECRET_PREFIX)

    @property
    def upstream_configured(self) -> bool:
        """Whether the credentials for fetching mentioned media are present."""
        return bool(self.ig_access_token and self.ig_user_id)
