from __future__ import annotations

import logging

from pipelines.runner import PipelineState, RunContext
from ports.sink import ResultSinkPort


logger = logging.getLogger(__name__)


class AggregateProfile:
    """Hand the completed profile to the sink once. No retries, no persistence."""

    def __init__(self, sink: ResultSinkPort) -> None:
        self.sink = sink

    def run(self, ctx: RunContext) -> RunContext:
        ctx.transition(PipelineState.AGGREGATED)
        filled = sum(1 for v in ctx.profile.to_record().values() if v)
        ctx.meta["fields_filled"] = filled
        logger.info(f"STEP 6: Aggregated profile with {filled} non-empty fields.", extra={"step": "aggregate", "run_id": ctx.run_id})
        self.sink.emit(ctx.profile, ctx.matched)
        return ctx
