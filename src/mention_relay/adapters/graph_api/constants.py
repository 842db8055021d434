"""Graph API constants for mentioned media lookups."""

MENTIONED_MEDIA_FIELDS = (
    "mentioned_media.limit(1){id,media_type,media_url,permalink,caption,timestamp}"
)

# Upper bound for upstream error bodies copied into logs
ERROR_BODY_LOG_LIMIT = 500
