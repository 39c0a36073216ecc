from __future__ import annotations

import json
import logging
from typing import List

from models import ProfileData


logger = logging.getLogger(__name__)


class LogResultSink:
    """Emits the final record to the log; keeps what it emitted for the caller."""

    def __init__(self) -> None:
        self.emitted: List[ProfileData] = []

    def emit(self, profile: ProfileData, matched: bool) -> None:
        self.emitted.append(profile)
        logger.info(
            f"Final scraped profileData: {json.dumps(profile.to_record(), ensure_ascii=False)}",
            extra={"step": "aggregate", "status": "matched" if matched else "no_match"},
        )
