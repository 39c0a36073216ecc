from __future__ import annotations

import logging

from config.settings import Settings
from pipelines.runner import PipelineState, RunContext
from services.domain_utils import has_url_scheme
from services.secondary_navigation import SecondaryNavigator


logger = logging.getLogger(__name__)


class FollowSecondaryLinks:
    def __init__(self, settings: Settings) -> None:
        self.navigator = SecondaryNavigator(settings)

    def run(self, ctx: RunContext) -> RunContext:
        profile = ctx.profile
        company_url = profile.company if has_url_scheme(profile.company) else ""
        if not ctx.matched or not (company_url or profile.company_fb_page):
            ctx.transition(PipelineState.SKIP)
            return ctx

        ctx.transition(PipelineState.SECONDARY_NAV)
        logger.info("STEP 5: Following company links...", extra={"step": "secondary_nav", "run_id": ctx.run_id})
        if company_url:
            details = self.navigator.follow_company_url(ctx.page, company_url)
            profile.company_followers = details.followers
            profile.company_phone = details.phone
            profile.company_email = details.email
            profile.company_website = details.website

        page_followers = self.navigator.visit_company_page(ctx.page, profile.company_fb_page)
        if page_followers:
            profile.company_followers = page_followers
        return ctx
