from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Protocol

from errors import FatalError
from models import IdentityRecord, ProfileData
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "Idle"
    AUTHENTICATING = "Authenticating"
    AWAITING_CHALLENGE = "AwaitingChallenge"
    SEARCHING = "Searching"
    RESOLVING = "Resolving"
    NAVIGATED = "Navigated"
    NO_MATCH = "NoMatch"
    EXTRACTING = "Extracting"
    BIO_PARSING = "BioParsing"
    SECONDARY_NAV = "SecondaryNav"
    SKIP = "Skip"
    AGGREGATED = "Aggregated"
    DONE = "Done"
    ABORTED = "Aborted"


@dataclass
class RunContext:
    identity: Optional[IdentityRecord] = None
    page: Any = None
    profile: ProfileData = field(default_factory=ProfileData)
    state: PipelineState = PipelineState.IDLE
    history: List[PipelineState] = field(default_factory=lambda: [PipelineState.IDLE])
    matched: bool = False
    run_id: str = "-"
    meta: dict = field(default_factory=dict)

    def transition(self, state: PipelineState) -> None:
        logger.info(
            f"{self.state.value} -> {state.value}",
            extra={"state": state.value, "run_id": self.run_id},
        )
        self.state = state
        self.history.append(state)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        try:
            for step in self.steps:
                ctx = step.run(ctx)
        except FatalError as e:
            ctx.meta["error"] = str(e)
            ctx.transition(PipelineState.ABORTED)
            raise
        if ctx.state is not PipelineState.DONE:
            ctx.transition(PipelineState.DONE)
        return ctx
