"""
Profile field extraction.

Every field is read through a chain of probes: a primary selector with a
short bounded wait, then a broader fallback with its own wait. A probe that
times out, finds nothing or fails in any other way yields a miss, and a field
whose probes all miss is stored as an empty string. Most fields are absent on
most profiles, so the waits are kept short.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

from config.settings import Settings
from errors import ExtractionMiss
from models import ExtractionOutcome, ProfileData
from services.domain_utils import extract_apex_domain, strip_scheme
from utils.number_parsing import looks_like_count


logger = logging.getLogger(__name__)

Probe = Callable[[], Optional[str]]

FRIENDS_ANCHOR = 'a[href$="/friends/"]'
FRIENDS_ANY_ANCHOR = 'a[href*="/friends/"]'
FRIENDS_SPAN = 'span:has-text("friends")'
FRIENDS_LINK = 'a:has-text("Friends")'
MAILTO_ANCHOR = 'a[href^="mailto:"]'
TEL_ANCHOR = 'a[href^="tel:"]'
INTRO_CARD = 'div[data-testid="profile_intro_card"]'
INTRO_ANY = 'div:has-text("Intro")'
FOLLOWERS_SPAN = 'span:has-text("followers")'

MARITAL_KEYWORDS = ("married", "single", "relationship", "engaged", "divorced")
EXCLUDED_PAGE_SEGMENTS = ("profile.php", "people/", "groups/", "events/")


def attempt(probe: Probe, field: str = "-", label: str = "primary") -> ExtractionOutcome[str]:
    """Run one probe; any failure or empty result becomes a miss."""
    try:
        value = probe()
        if not value:
            raise ExtractionMiss(field, "empty")
    except Exception as e:
        logger.debug(f"{field} {label} probe missed: {e}", extra={"field": field, "status": "miss"})
        return ExtractionOutcome.miss("")
    return ExtractionOutcome.hit(value)


def first_hit(field: str, *probes: Tuple[str, Probe]) -> ExtractionOutcome[str]:
    """attempt(p1) orElse attempt(p2) orElse ... orElse miss."""
    outcome: ExtractionOutcome[str] = ExtractionOutcome.miss("")
    for label, probe in probes:
        outcome = outcome.or_else(lambda: attempt(probe, field, label))
    return outcome


def report(label: str, field: str, outcome: ExtractionOutcome[str]) -> str:
    if outcome.found:
        logger.info(f"{label}: {outcome.value}", extra={"field": field, "status": "found"})
    else:
        logger.info(f"[{label}]: Not found!", extra={"field": field, "status": "miss"})
    return outcome.value_or("")


# Low-level bounded reads -------------------------------------------------

def read_text(page: Any, selector: str, timeout_ms: int) -> Optional[str]:
    loc = page.locator(selector).first
    loc.wait_for(state="attached", timeout=timeout_ms)
    return loc.inner_text(timeout=timeout_ms)


def read_attribute(page: Any, selector: str, name: str, timeout_ms: int) -> Optional[str]:
    loc = page.locator(selector).first
    loc.wait_for(state="attached", timeout=timeout_ms)
    return loc.get_attribute(name, timeout=timeout_ms)


def is_visible(page: Any, selector: str, timeout_ms: int) -> bool:
    page.locator(selector).first.wait_for(state="visible", timeout=timeout_ms)
    return True


# Field extractors --------------------------------------------------------

def _friends_strong(page: Any, timeout_ms: int) -> Optional[str]:
    anchor = page.locator(FRIENDS_ANCHOR).first
    anchor.wait_for(state="attached", timeout=timeout_ms)
    return anchor.locator("strong").first.inner_text(timeout=timeout_ms)


def _scan_friend_counts(page: Any, timeout_ms: int) -> Optional[str]:
    page.locator(FRIENDS_ANY_ANCHOR).first.wait_for(state="attached", timeout=timeout_ms)
    for anchor in page.locator(FRIENDS_ANY_ANCHOR).all():
        for strong in anchor.locator("strong").all():
            txt = strong.inner_text(timeout=timeout_ms)
            if looks_like_count(txt):
                return txt
    return None


def extract_friends_count(page: Any, timeout_ms: int) -> ExtractionOutcome[str]:
    return first_hit(
        "friends",
        ("primary", lambda: _friends_strong(page, timeout_ms)),
        ("fallback", lambda: _scan_friend_counts(page, timeout_ms)),
        ("span", lambda: read_text(page, FRIENDS_SPAN, timeout_ms)),
    )


def extract_friends_list_visible(page: Any, timeout_ms: int) -> str:
    outcome = attempt(lambda: "Yes" if is_visible(page, FRIENDS_LINK, timeout_ms) else None, "friendsListVisible")
    return outcome.value_or("No")


def extract_professional_link(page: Any, pattern: str, timeout_ms: int) -> ExtractionOutcome[str]:
    return attempt(lambda: read_attribute(page, f'a[href*="{pattern}"]', "href", timeout_ms), "linkedin")


def extract_email(page: Any, timeout_ms: int, field: str = "email") -> ExtractionOutcome[str]:
    return attempt(lambda: strip_scheme(read_attribute(page, MAILTO_ANCHOR, "href", timeout_ms), "mailto"), field)


def _phone(page: Any, country_code: str, timeout_ms: int) -> Optional[str]:
    href = read_attribute(page, TEL_ANCHOR, "href", timeout_ms)
    if href and href.startswith(f"tel:{country_code}"):
        return strip_scheme(href, "tel")
    raise ExtractionMiss("phone", f"{href!r} is not a {country_code} number")


def extract_phone(page: Any, country_code: str, timeout_ms: int, field: str = "phone") -> ExtractionOutcome[str]:
    return attempt(lambda: _phone(page, country_code, timeout_ms), field)


def extract_bio(page: Any, timeout_ms: int) -> ExtractionOutcome[str]:
    return first_hit(
        "bio",
        ("primary", lambda: read_text(page, INTRO_CARD, timeout_ms)),
        ("fallback", lambda: read_text(page, INTRO_ANY, timeout_ms)),
    )


def extract_followers(page: Any, timeout_ms: int, field: str = "followers") -> ExtractionOutcome[str]:
    return attempt(lambda: read_text(page, FOLLOWERS_SPAN, timeout_ms), field)


def extract_marital_status_from_page(page: Any, timeout_ms: int) -> ExtractionOutcome[str]:
    probes = [
        (keyword, (lambda kw=keyword: _visible_text(page, f"text={kw}", timeout_ms)))
        for keyword in MARITAL_KEYWORDS
    ]
    return first_hit("maritalStatus", *probes)


def _visible_text(page: Any, selector: str, timeout_ms: int) -> Optional[str]:
    is_visible(page, selector, timeout_ms)
    return page.locator(selector).first.inner_text(timeout=timeout_ms)


def _company_page_link(page: Any, platform_url: str, timeout_ms: int) -> Optional[str]:
    apex = extract_apex_domain(platform_url)
    for link in page.locator(f'a[href*="{apex}/"]').all():
        href = link.get_attribute("href", timeout=timeout_ms)
        if href and not any(seg in href for seg in EXCLUDED_PAGE_SEGMENTS):
            return href
    return None


def find_company_page(page: Any, platform_url: str, timeout_ms: int) -> ExtractionOutcome[str]:
    """First link mentioning the platform domain that is not a personal profile, group or event.

    Any href containing the domain qualifies, including share links on other sites.
    """
    return attempt(lambda: _company_page_link(page, platform_url, timeout_ms), "companyFbPage")


class ProfileExtractor:
    """Reads every profile-page field into a ProfileData, one isolated probe chain per field."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def extract(self, page: Any, profile: Optional[ProfileData] = None) -> ProfileData:
        s = self.settings
        profile = profile or ProfileData()

        profile.friends = report("Friends Qty", "friends", extract_friends_count(page, s.field_timeout_ms))
        profile.friends_list_visible = extract_friends_list_visible(page, s.quick_probe_timeout_ms)
        logger.info(f"Friends List Visible: {profile.friends_list_visible}", extra={"field": "friendsListVisible"})
        profile.linkedin = report(
            "LinkedIn Profile",
            "linkedin",
            extract_professional_link(page, s.professional_link_pattern, s.quick_probe_timeout_ms),
        )
        profile.email = report("Email", "email", extract_email(page, s.quick_probe_timeout_ms))
        profile.phone = report(
            "Phone", "phone", extract_phone(page, s.phone_country_code, s.quick_probe_timeout_ms)
        )
        profile.followers = report("Followers", "followers", extract_followers(page, s.field_timeout_ms))
        profile.bio = report("Bio/Intro text", "bio", extract_bio(page, s.bio_timeout_ms))
        profile.company_fb_page = report(
            "Company Facebook Page",
            "companyFbPage",
            find_company_page(page, s.platform_url, s.quick_probe_timeout_ms),
        )
        return profile
