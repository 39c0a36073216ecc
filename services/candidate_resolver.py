"""
Candidate resolution: pick the profile link for a target name among the
anchors rendered on a search results page.

Policy: the first anchor (document order) whose text equals the target name
token-for-token AND whose href has a profile shape wins. When no anchor
passes both checks, the first anchor with a profile-shaped href is used
regardless of its text. Two different people with the same full name are
not told apart.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from models import CandidateLink


logger = logging.getLogger(__name__)


def normalize_tokens(text: Optional[str]) -> List[str]:
    return (text or "").lower().split()


def matches_name(target: str, text: Optional[str]) -> bool:
    expected = normalize_tokens(target)
    return bool(expected) and normalize_tokens(text) == expected


def _username_pattern(platform_url: str) -> re.Pattern:
    return re.compile("^" + re.escape(platform_url.rstrip("/")) + r"/[a-zA-Z0-9.]+$")


def is_profile_href(href: Optional[str], platform_url: str = "https://www.facebook.com") -> bool:
    """True for profile-by-id, /people/ and bare-username hrefs."""
    if not href:
        return False
    if "/profile.php" in href or "/people/" in href:
        return True
    return _username_pattern(platform_url).match(href) is not None


@dataclass(frozen=True)
class Resolution:
    index: Optional[int] = None
    link: Optional[CandidateLink] = None
    fallback: bool = False

    @property
    def matched(self) -> bool:
        return self.link is not None


def resolve_candidate(
    target: str,
    anchors: Sequence[CandidateLink],
    platform_url: str = "https://www.facebook.com",
) -> Resolution:
    shape_ok = [is_profile_href(a.href, platform_url) for a in anchors]

    for i, anchor in enumerate(anchors):
        if shape_ok[i] and matches_name(target, anchor.text):
            return Resolution(index=i, link=anchor)

    for i, anchor in enumerate(anchors):
        if shape_ok[i]:
            return Resolution(index=i, link=anchor, fallback=True)

    return Resolution()


def collect_anchors(page: Any, timeout_ms: Optional[int] = None) -> tuple[list, List[CandidateLink]]:
    """Read every rendered anchor in document order.

    Returns the Playwright locators alongside their CandidateLink snapshot so
    the chosen index can be activated afterwards. Each read waits at most
    ``timeout_ms`` so a node detached after listing is skipped quickly.
    """
    handles = page.locator("a").all()
    anchors: List[CandidateLink] = []
    for handle in handles:
        try:
            text = handle.text_content(timeout=timeout_ms) or ""
            href = handle.get_attribute("href", timeout=timeout_ms) or ""
        except Exception as e:  # detached while reading
            logger.debug(f"Skipping unreadable anchor: {e}")
            text, href = "", ""
        anchors.append(CandidateLink(text=text.strip(), href=href))
    return handles, anchors


def activate_candidate(page: Any, handle: Any, settle_ms: int, timeout_ms: int) -> None:
    """Click the chosen anchor the way a person would and wait for the profile to load."""
    handle.scroll_into_view_if_needed(timeout=timeout_ms)
    handle.hover(timeout=timeout_ms)
    handle.click(force=True, timeout=timeout_ms)
    page.wait_for_load_state("domcontentloaded", timeout=timeout_ms)
    page.wait_for_timeout(settle_ms)
