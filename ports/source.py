from __future__ import annotations

from typing import List, Protocol, Sequence


class IdentitySourcePort(Protocol):
    source_name: str
    required_settings: Sequence[str]

    def read_grid(self) -> List[List[str]]:
        """Return the raw two-dimensional grid; row 0 holds the headers."""
        ...
