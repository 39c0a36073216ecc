"""
Best-effort follow-up visits after the profile has been read: the company
URL found in the intro block and the company page linked from the profile.
A failure in either visit is logged and leaves only that visit's fields empty.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from config.settings import Settings
from errors import NavigationError
from services.domain_utils import extract_suffix, has_url_scheme, unwrap_redirect
from services.extraction import (
    attempt,
    extract_email,
    extract_followers,
    extract_phone,
    report,
)


logger = logging.getLogger(__name__)


@dataclass
class CompanyDetails:
    followers: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""


def navigate(page: Any, url: str, timeout_ms: int) -> None:
    """goto + domcontentloaded, re-raised as NavigationError."""
    try:
        page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        page.wait_for_load_state("domcontentloaded", timeout=timeout_ms)
    except Exception as e:
        raise NavigationError(url, str(e)) from e


def _website_link(page: Any, tld: str, timeout_ms: int) -> Optional[str]:
    selector = f'a[href*=".{tld}"]'
    page.locator(selector).first.wait_for(state="attached", timeout=timeout_ms)
    for link in page.locator(selector).all():
        href = link.get_attribute("href", timeout=timeout_ms)
        if href and extract_suffix(unwrap_redirect(href)) == tld:
            return href
    return None


def extract_company_website(page: Any, tld: str, timeout_ms: int):
    return attempt(lambda: _website_link(page, tld, timeout_ms), "companyWebsite")


class SecondaryNavigator:
    def __init__(self, settings: Settings):
        self.settings = settings

    def follow_company_url(self, page: Any, company: str) -> CompanyDetails:
        """Visit the company URL from the intro block and read its contact fields.

        Skipped when the company value is not a URL. Never raises.
        """
        details = CompanyDetails()
        if not has_url_scheme(company):
            return details
        s = self.settings
        t = s.company_field_timeout_ms
        try:
            logger.info(f"Following company hyperlink: {company}", extra={"step": "secondary_nav"})
            navigate(page, company, s.navigation_timeout_ms)
            details.followers = report("Company Followers", "companyFollowers", extract_followers(page, t, "companyFollowers"))
            details.phone = report("Company Phone", "companyPhone", extract_phone(page, s.phone_country_code, t, "companyPhone"))
            details.email = report("Company Email", "companyEmail", extract_email(page, t, "companyEmail"))
            details.website = report("Company Website", "companyWebsite", extract_company_website(page, s.website_tld, t))
        except Exception as e:
            logger.warning(f"Error following company hyperlink: {e}", extra={"step": "secondary_nav", "status": "error"})
        return details

    def visit_company_page(self, page: Any, url: str) -> str:
        """Visit the company page on the platform and read its followers metric. Never raises."""
        if not url:
            return ""
        s = self.settings
        try:
            logger.info(f"Visiting company page: {url}", extra={"step": "secondary_nav"})
            navigate(page, url, s.navigation_timeout_ms)
            page.wait_for_timeout(s.company_page_settle_ms)
            return report(
                "Company Followers",
                "companyFollowers",
                extract_followers(page, s.field_timeout_ms, "companyFollowers"),
            )
        except Exception as e:
            logger.warning(f"Error visiting company page {url}: {e}", extra={"step": "secondary_nav", "status": "error"})
            return ""
