from __future__ import annotations

import logging

from config.settings import Settings
from errors import ResolutionMiss
from pipelines.runner import PipelineState, RunContext
from ports.session import SessionProviderPort
from services.candidate_resolver import activate_candidate, collect_anchors, resolve_candidate


logger = logging.getLogger(__name__)


class SearchAndResolve:
    """Search for the identity's name and open the best-matching profile link."""

    def __init__(self, session: SessionProviderPort, settings: Settings) -> None:
        self.session = session
        self.settings = settings

    def run(self, ctx: RunContext) -> RunContext:
        name = ctx.identity.name
        extra = {"step": "resolve", "run_id": ctx.run_id}

        ctx.transition(PipelineState.SEARCHING)
        logger.info(f"STEP 3: Searching for: {name}", extra=extra)
        self.session.search(ctx.page, name)

        ctx.transition(PipelineState.RESOLVING)
        try:
            handles, anchors = collect_anchors(ctx.page, self.settings.quick_probe_timeout_ms)
            for i, anchor in enumerate(anchors):
                logger.debug(f"Anchor {i}: text='{anchor.text}', href='{anchor.href}'", extra=extra)
            ctx.meta["anchors_seen"] = len(anchors)
            resolution = resolve_candidate(name, anchors, self.settings.platform_url)
            if not resolution.matched:
                raise ResolutionMiss(f"No profile links found for {name}")
            kind = "first anchor with profile-like href" if resolution.fallback else "first exact name match"
            logger.info(f"Opening {kind}: {resolution.link.text} {resolution.link.href}", extra=extra)
            activate_candidate(
                ctx.page,
                handles[resolution.index],
                self.settings.profile_settle_ms,
                self.settings.navigation_timeout_ms,
            )
        except ResolutionMiss as e:
            logger.warning(str(e), extra={**extra, "status": "no_match"})
            ctx.transition(PipelineState.NO_MATCH)
            return ctx
        except Exception as e:
            logger.warning(f"Could not resolve or open candidate profile: {e}", extra={**extra, "status": "no_match"})
            ctx.transition(PipelineState.NO_MATCH)
            return ctx

        ctx.matched = True
        ctx.meta["resolution_fallback"] = resolution.fallback
        ctx.meta["profile_href"] = resolution.link.href
        ctx.transition(PipelineState.NAVIGATED)
        return ctx
