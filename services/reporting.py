from __future__ import annotations

from typing import Dict, Optional

from models import ProfileData
from utils.number_parsing import parse_count


LABELS: Dict[str, str] = {
    "friends": "Friends",
    "friendsListVisible": "Friends List Visible",
    "linkedin": "LinkedIn Profile",
    "email": "Email",
    "phone": "Phone",
    "position": "Position",
    "company": "Company",
    "location": "Location",
    "maritalStatus": "Marital Status",
    "followers": "Followers",
    "companyFollowers": "Company Followers",
    "companyPhone": "Company Phone",
    "companyEmail": "Company Email",
    "companyWebsite": "Company Website",
    "companyFbPage": "Company Facebook Page",
}


def _with_count(value: str) -> str:
    count = parse_count(value) if value else None
    if count is None or str(count) == value.strip():
        return value
    return f"{value} (~{count})"


def print_summary(name: str, profile: ProfileData, meta: Optional[dict] = None) -> None:
    """Print the aggregated profile for one identity record."""
    meta = meta or {}
    record = profile.to_record()

    print("\n" + "="*60)
    print("PROFILE ENRICHMENT - SUMMARY")
    print("="*60)
    print(f"Identity: {name or 'N/A'}")
    print(f"Final State: {meta.get('state', 'N/A')}")
    print(f"Anchors Seen: {meta.get('anchors_seen', 0)}")
    print(f"Profile Link: {meta.get('profile_href') or 'N/A'}")
    if meta.get("resolution_fallback"):
        print("  (no exact name match; opened first profile-like link)")
    print()
    for key, label in LABELS.items():
        value = record.get(key, "")
        if key in ("friends", "followers", "companyFollowers"):
            value = _with_count(value)
        print(f"  {label}: {value or '-'}")
    bio = record.get("bio", "")
    print()
    print("Bio/Intro:")
    print(bio if bio else "  -")
    print("="*60)
