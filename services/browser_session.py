"""
Playwright session for the social platform: a persistent Chromium profile so
an earlier login is reused, an optional credential login with a fixed pause
for an operator to clear a challenge, and the people search.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from config.settings import Settings
from errors import SessionError


logger = logging.getLogger(__name__)

LOGIN_EMAIL_INPUT = 'input[name="email"]'
LOGIN_PASSWORD_INPUT = 'input[name="pass"]'
LOGIN_BUTTON = 'button[name="login"]'
SEARCH_INPUT = 'input[aria-label="Search Facebook"]'
PEOPLE_TAB = 'a[role="tab"]:has-text("People")'


class PlaywrightSessionProvider:
    """Owns the Playwright driver and the persistent browser context for one run."""

    def __init__(self, settings: Settings, on_challenge: Optional[Callable[[], None]] = None):
        self.settings = settings
        # Called right before the challenge pause starts (pipeline state hook)
        self.on_challenge = on_challenge
        self._play = None
        self._context = None

    def open(self) -> Any:
        s = self.settings
        try:
            self._play = sync_playwright().start()
            self._context = self._play.chromium.launch_persistent_context(
                s.session_dir,
                headless=s.headless,
                viewport={"width": s.viewport_width, "height": s.viewport_height},
            )
            logger.info("Browser launched with persistent context.", extra={"step": "session"})
            return self._context.new_page()
        except PlaywrightError as e:
            self.close()
            raise SessionError(f"Error launching browser: {e}") from e

    def ensure_logged_in(self, page: Any) -> None:
        s = self.settings
        try:
            page.goto(s.platform_url + "/", wait_until="domcontentloaded", timeout=s.navigation_timeout_ms)
            page.wait_for_timeout(1000)
            if not page.locator(LOGIN_EMAIL_INPUT).is_visible():
                logger.info("Already logged in.", extra={"step": "session"})
                return

            logger.info("Login required. Logging in...", extra={"step": "session"})
            s.require("fb_email", "fb_password")
            page.fill(LOGIN_EMAIL_INPUT, s.fb_email)
            page.fill(LOGIN_PASSWORD_INPUT, s.fb_password)
            page.click(LOGIN_BUTTON)

            if self.on_challenge:
                self.on_challenge()
            logger.info(
                f"If a CAPTCHA appears, please solve it. Waiting {s.challenge_wait_seconds} seconds...",
                extra={"step": "session", "status": "challenge"},
            )
            page.wait_for_timeout(s.challenge_wait_seconds * 1000)

            if page.locator(LOGIN_EMAIL_INPUT).is_visible():
                raise SessionError("Login failed. Check credentials or CAPTCHA.")
            logger.info("Login successful.", extra={"step": "session"})
        except PlaywrightError as e:
            raise SessionError(f"Could not reach {s.platform_url}: {e}") from e

    def search(self, page: Any, name: str) -> None:
        s = self.settings
        try:
            page.fill(SEARCH_INPUT, name, timeout=s.navigation_timeout_ms)
            page.keyboard.press("Enter")
            page.wait_for_timeout(s.search_settle_ms)
        except PlaywrightError as e:
            raise SessionError(f"Search box unavailable: {e}") from e

        try:
            page.click(PEOPLE_TAB, timeout=s.people_tab_timeout_ms)
        except PlaywrightError:
            logger.info("No 'People' tab found, staying on All tab.", extra={"step": "search"})
        page.wait_for_timeout(s.search_settle_ms)

    def wait_until_closed(self) -> None:
        """Block until the operator closes the browser window."""
        if self._context is None:
            return
        logger.info("Browser will remain open for inspection. Close it manually when done.")
        try:
            self._context.wait_for_event("close", timeout=0)
        except PlaywrightError:
            pass
        finally:
            self.close()

    def close(self) -> None:
        if self._context is not None:
            try:
                self._context.close()
            except PlaywrightError:
                pass
            self._context = None
        if self._play is not None:
            try:
                self._play.stop()
            except PlaywrightError:
                pass
            self._play = None
