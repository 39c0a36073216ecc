from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


class SessionProviderPort(Protocol):
    """Supplies an authenticated, navigable browsing surface (a Playwright Page)."""

    # Invoked when the operator challenge pause begins
    on_challenge: Optional[Callable[[], None]]

    def open(self) -> Any:
        ...

    def ensure_logged_in(self, page: Any) -> None:
        ...

    def search(self, page: Any, name: str) -> None:
        ...

    def close(self) -> None:
        ...
