from __future__ import annotations

import logging

from pipelines.runner import PipelineState, RunContext
from ports.session import SessionProviderPort


logger = logging.getLogger(__name__)


class AuthenticateSession:
    def __init__(self, session: SessionProviderPort) -> None:
        self.session = session

    def run(self, ctx: RunContext) -> RunContext:
        ctx.transition(PipelineState.AUTHENTICATING)
        logger.info("STEP 2: Opening browser session...", extra={"step": "authenticate", "run_id": ctx.run_id})
        if ctx.page is None:
            ctx.page = self.session.open()
        # The operator challenge pause is its own state, entered only when a login form is shown
        self.session.on_challenge = lambda: ctx.transition(PipelineState.AWAITING_CHALLENGE)
        self.session.ensure_logged_in(ctx.page)
        return ctx
