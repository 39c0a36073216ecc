from __future__ import annotations

from typing import Protocol

from models import ProfileData


class ResultSinkPort(Protocol):
    def emit(self, profile: ProfileData, matched: bool) -> None:
        ...
