from __future__ import annotations

import re
from typing import Optional


# Rendered social counts: "512", "1.2K", "3K"
COUNT_PATTERN = re.compile(r"\d+(?:\.\d+)?K?")


def looks_like_count(text: Optional[str]) -> bool:
    return bool(text) and COUNT_PATTERN.search(text) is not None


def parse_count(value) -> Optional[int]:
    """Parse strings like '1.2K', '3M', '4,500', '500+' or '812 friends' into an integer.

    Returns None for unparsable inputs.
    """
    if value is None:
        return None
    try:
        s = str(value).strip().upper().replace(",", "")
        if not s:
            return None
        m = re.search(r"([0-9]+(?:\.[0-9]+)?)([KMB]?)\b", s)
        if not m:
            return None
        num = float(m.group(1))
        suf = m.group(2)
        factor = 1
        if suf == 'K':
            factor = 1000
        elif suf == 'M':
            factor = 1000000
        elif suf == 'B':
            factor = 1000000000
        return int(round(num * factor))
    except ValueError:
        return None
