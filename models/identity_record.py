from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IdentityRecord(BaseModel):
    """One row of the identity source keyed by column header. Read-only."""

    fields: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return (self.get("Name") or self.get("name")).strip()

    def get(self, header: str, default: str = "") -> str:
        return self.fields.get(header, default)
