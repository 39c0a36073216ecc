from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CandidateLink(BaseModel):
    """A rendered search-result anchor considered as a possible profile match."""

    text: str = ""
    href: str = ""

    model_config = ConfigDict(frozen=True)
