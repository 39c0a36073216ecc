"""
Intro/bio block parsing: free text into position, company, location and
relationship status.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


POSITION_PHRASES = (
    "Works at",
    "Broker at",
    "Manager at",
    "Director at",
    "Consultant at",
    "Agent at",
    "Finance at",
    "Mortgage at",
    "Advisor at",
    "Analyst at",
)

MARITAL_STATUSES = (
    "Married",
    "Single",
    "In a relationship",
    "Engaged",
    "Divorced",
)

_POSITION_RE = re.compile(
    r"(" + "|".join(re.escape(p) for p in POSITION_PHRASES) + r") ([^\n]+)",
    re.IGNORECASE,
)
_LOCATION_RE = re.compile(r"Lives in ([^\n]+)", re.IGNORECASE)
_MARITAL_RE = re.compile(
    r"(" + "|".join(re.escape(s) for s in MARITAL_STATUSES) + r")",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class BioFields:
    position: str = ""
    company: str = ""
    location: str = ""
    marital_status: str = ""


def parse_bio(text: Optional[str]) -> BioFields:
    """Parse an intro block. Total over all inputs; missing parts stay empty."""
    if not text:
        return BioFields()

    position = company = location = marital = ""

    job = _POSITION_RE.search(text)
    if job:
        position, company = job.group(1), job.group(2)

    lives = _LOCATION_RE.search(text)
    if lives:
        location = lives.group(1)

    status = _MARITAL_RE.search(text)
    if status:
        marital = status.group(1)

    return BioFields(
        position=position,
        company=company,
        location=location,
        marital_status=marital,
    )
