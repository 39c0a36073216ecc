from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qs, urlparse

import tldextract


# Offline extractor: uses the bundled public suffix snapshot, no HTTP fetch
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())


def _with_scheme(url_or_domain: str) -> str:
    text = str(url_or_domain).strip().lower()
    if not text.startswith('http://') and not text.startswith('https://'):
        text = f"http://{text}"
    return text


def extract_apex_domain(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    ext = _EXTRACT(_with_scheme(url_or_domain))
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return None


def extract_suffix(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    return _EXTRACT(_with_scheme(url_or_domain)).suffix or None


def unwrap_redirect(href: Optional[str]) -> str:
    """Return the target of an outbound redirect link (``l.php?u=...``), else the href itself."""
    if not href:
        return ""
    try:
        u = urlparse(href)
    except ValueError:
        return href
    if u.path.endswith("/l.php"):
        target = parse_qs(u.query).get("u")
        if target and target[0]:
            return target[0]
    return href


def has_url_scheme(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower().startswith(("http://", "https://"))


def strip_scheme(href: Optional[str], scheme: str) -> str:
    """Drop a leading ``mailto:``/``tel:`` style scheme from an href."""
    if not href:
        return ""
    prefix = f"{scheme}:"
    return href[len(prefix):] if href.startswith(prefix) else href
