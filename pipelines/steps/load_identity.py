from __future__ import annotations

import logging

from config.settings import Settings
from pipelines.runner import RunContext
from ports.source import IdentitySourcePort
from sources.base import rows_to_records, select_record


logger = logging.getLogger(__name__)


class LoadIdentity:
    def __init__(self, source: IdentitySourcePort, settings: Settings) -> None:
        self.source = source
        self.settings = settings

    def run(self, ctx: RunContext) -> RunContext:
        logger.info(f"STEP 1: Reading identity source ({self.source.source_name})...", extra={"step": "load_identity", "run_id": ctx.run_id})
        records = rows_to_records(self.source.read_grid())
        ctx.identity = select_record(records, self.settings.record_index)
        ctx.meta["records_total"] = len(records)
        logger.info(
            f"Mapped {len(records)} rows; processing record {self.settings.record_index}: {ctx.identity.name}",
            extra={"step": "load_identity", "run_id": ctx.run_id},
        )
        return ctx
