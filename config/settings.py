from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from errors import ConfigurationError


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Identity source
    source: str
    sheet_id: str | None
    api_key: str | None
    sheet_range: str
    sheets_api_url: str
    record_index: int

    # Platform session
    fb_email: str | None
    fb_password: str | None
    platform_url: str
    session_dir: str
    headless: bool
    viewport_width: int
    viewport_height: int

    # Retry / request settings for the identity source
    max_retries: int
    request_timeout_seconds: int

    # Bounded waits (milliseconds unless noted)
    navigation_timeout_ms: int
    challenge_wait_seconds: int
    search_settle_ms: int
    people_tab_timeout_ms: int
    profile_settle_ms: int
    company_page_settle_ms: int
    quick_probe_timeout_ms: int
    field_timeout_ms: int
    bio_timeout_ms: int
    company_field_timeout_ms: int

    # Field acceptance rules
    phone_country_code: str
    website_tld: str
    professional_link_pattern: str

    log_level: str
    run_env: str

    keep_browser_open: bool = True

    # Environment variable name for each attribute that can be required
    ENV_NAMES = {
        "sheet_id": "SHEET_ID",
        "api_key": "API_KEY",
        "fb_email": "FB_EMAIL",
        "fb_password": "FB_PASSWORD",
    }

    def require(self, *names: str) -> None:
        """Raise ConfigurationError listing every named attribute that is unset."""
        missing = [self.ENV_NAMES.get(n, n.upper()) for n in names if not getattr(self, n, None)]
        if missing:
            raise ConfigurationError(f"Missing {' or '.join(missing)} in .env")


def load_settings() -> Settings:
    _load_env()
    return Settings(
        source=os.getenv("SOURCE", "google_sheets"),
        sheet_id=os.getenv("SHEET_ID"),
        api_key=os.getenv("API_KEY"),
        sheet_range=os.getenv("SHEET_RANGE", "Sheet1"),
        sheets_api_url=os.getenv("SHEETS_API_URL", "https://sheets.googleapis.com/v4/spreadsheets"),
        record_index=int(os.getenv("RECORD_INDEX", "2")),
        fb_email=os.getenv("FB_EMAIL"),
        fb_password=os.getenv("FB_PASSWORD"),
        platform_url=os.getenv("PLATFORM_URL", "https://www.facebook.com").rstrip("/"),
        session_dir=os.getenv("SESSION_DIR", "./fb-session"),
        headless=_flag("HEADLESS"),
        viewport_width=int(os.getenv("VIEWPORT_WIDTH", "1280")),
        viewport_height=int(os.getenv("VIEWPORT_HEIGHT", "800")),
        max_retries=int(os.getenv("MAX_RETRIES", "3")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "30")),
        navigation_timeout_ms=int(os.getenv("NAVIGATION_TIMEOUT_MS", "15000")),
        challenge_wait_seconds=int(os.getenv("CHALLENGE_WAIT_SECONDS", "90")),
        search_settle_ms=int(os.getenv("SEARCH_SETTLE_MS", "3000")),
        people_tab_timeout_ms=int(os.getenv("PEOPLE_TAB_TIMEOUT_MS", "5000")),
        profile_settle_ms=int(os.getenv("PROFILE_SETTLE_MS", "2000")),
        company_page_settle_ms=int(os.getenv("COMPANY_PAGE_SETTLE_MS", "4000")),
        quick_probe_timeout_ms=int(os.getenv("QUICK_PROBE_TIMEOUT_MS", "200")),
        field_timeout_ms=int(os.getenv("FIELD_TIMEOUT_MS", "500")),
        bio_timeout_ms=int(os.getenv("BIO_TIMEOUT_MS", "1000")),
        # Company pages are probed with a very short wait; 100ms is the floor
        company_field_timeout_ms=max(100, int(os.getenv("COMPANY_FIELD_TIMEOUT_MS", "100"))),
        phone_country_code=os.getenv("PHONE_COUNTRY_CODE", "+61"),
        website_tld=os.getenv("WEBSITE_TLD", "com.au").lstrip("."),
        professional_link_pattern=os.getenv("PROFESSIONAL_LINK_PATTERN", "linkedin.com/in/"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        keep_browser_open=not _flag("CLOSE_BROWSER"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
