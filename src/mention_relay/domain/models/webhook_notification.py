"""Webhook notification domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WebhookNotification(BaseModel):
    """Inbound webhook notification body.

    Only the envelope is modelled; entries are kept as raw mappings because the
    relay does not act on their content, it re-fetches the latest item instead.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    object: str | None = None
    entry: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def changed_fields(self) -> list[str]:
        """Names of the fields reported as changed across all entries."""
        fields: list[str] = []
        for entry in self.entry:
            for change in entry.get("changes") or []:
                if isinstance(change, dict) and isinstance(change.get("field"), str):
                    fields.append(change["field"])
        return fields
