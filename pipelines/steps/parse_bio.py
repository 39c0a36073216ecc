from __future__ import annotations

import logging

from config.settings import Settings
from pipelines.runner import PipelineState, RunContext
from services.bio_parser import parse_bio
from services.extraction import extract_marital_status_from_page, report


logger = logging.getLogger(__name__)


class ParseBio:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(self, ctx: RunContext) -> RunContext:
        ctx.transition(PipelineState.BIO_PARSING)
        profile = ctx.profile
        fields = parse_bio(profile.bio)
        profile.position = fields.position
        profile.company = fields.company
        profile.location = fields.location
        profile.marital_status = fields.marital_status
        logger.info(
            f"Extracted from bio: position={fields.position!r} company={fields.company!r} "
            f"location={fields.location!r} maritalStatus={fields.marital_status!r}",
            extra={"step": "parse_bio", "run_id": ctx.run_id},
        )

        if ctx.matched and not profile.marital_status:
            profile.marital_status = report(
                "Marital Status",
                "maritalStatus",
                extract_marital_status_from_page(ctx.page, self.settings.quick_probe_timeout_ms),
            )
        return ctx
