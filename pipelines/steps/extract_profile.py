from __future__ import annotations

import logging

from config.settings import Settings
from pipelines.runner import PipelineState, RunContext
from services.extraction import ProfileExtractor


logger = logging.getLogger(__name__)


class ExtractProfile:
    def __init__(self, settings: Settings) -> None:
        self.extractor = ProfileExtractor(settings)

    def run(self, ctx: RunContext) -> RunContext:
        ctx.transition(PipelineState.EXTRACTING)
        if not ctx.matched:
            logger.info("STEP 4: No profile opened; leaving profile fields empty.", extra={"step": "extract", "run_id": ctx.run_id})
            return ctx
        logger.info("STEP 4: Extracting profile fields...", extra={"step": "extract", "run_id": ctx.run_id})
        ctx.profile = self.extractor.extract(ctx.page, ctx.profile)
        return ctx
