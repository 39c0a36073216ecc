from __future__ import annotations

import pytest

from errors import ConfigurationError, SessionError
from services.browser_session import (
    LOGIN_BUTTON,
    LOGIN_EMAIL_INPUT,
    LOGIN_PASSWORD_INPUT,
    SEARCH_INPUT,
    PlaywrightSessionProvider,
)


def _login_form(node_cls):
    return {LOGIN_EMAIL_INPUT: [node_cls()], LOGIN_PASSWORD_INPUT: [node_cls()], LOGIN_BUTTON: [node_cls()]}


@pytest.fixture
def with_credentials(monkeypatch):
    monkeypatch.setenv("FB_EMAIL", "agent@example.com")
    monkeypatch.setenv("FB_PASSWORD", "hunter2")
    from config.settings import load_settings
    return load_settings()


def test_existing_session_skips_login(fake_page_cls, settings):
    page = fake_page_cls({SEARCH_INPUT: []})
    challenged = []
    provider = PlaywrightSessionProvider(settings, on_challenge=lambda: challenged.append(1))
    provider.ensure_logged_in(page)
    assert page.actions[0] == ("goto", "https://www.facebook.com/")
    assert not any(a[0] == "fill" for a in page.actions)
    assert challenged == []


def test_login_form_without_credentials_is_a_configuration_error(fake_page_cls, node_cls, settings):
    page = fake_page_cls(_login_form(node_cls))
    with pytest.raises(ConfigurationError, match="FB_EMAIL or FB_PASSWORD"):
        PlaywrightSessionProvider(settings).ensure_logged_in(page)


def test_login_still_shown_after_challenge_wait(fake_page_cls, node_cls, monkeypatch, with_credentials):
    monkeypatch.setenv("CHALLENGE_WAIT_SECONDS", "2")
    from config.settings import load_settings
    s = load_settings()
    page = fake_page_cls(_login_form(node_cls))
    challenged = []
    with pytest.raises(SessionError, match="Login failed"):
        PlaywrightSessionProvider(s, on_challenge=lambda: challenged.append(1)).ensure_logged_in(page)
    assert ("fill", LOGIN_EMAIL_INPUT, "agent@example.com") in page.actions
    assert ("click", LOGIN_BUTTON) in page.actions
    assert challenged == [1]
    assert page.slept_ms == 1000 + 2000


def test_successful_login(fake_page_cls, node_cls, with_credentials):
    class LoginPage(fake_page_cls):
        def click(self, selector, timeout=None):
            super().click(selector, timeout)
            if selector == LOGIN_BUTTON:
                self.elements = {SEARCH_INPUT: [node_cls()]}

    page = LoginPage(_login_form(node_cls))
    PlaywrightSessionProvider(with_credentials).ensure_logged_in(page)
    assert ("fill", LOGIN_PASSWORD_INPUT, "hunter2") in page.actions


def test_search_without_people_tab_continues(fake_page_cls, node_cls, settings):
    page = fake_page_cls({SEARCH_INPUT: [node_cls()]})
    PlaywrightSessionProvider(settings).search(page, "Jane Smith")
    assert ("fill", SEARCH_INPUT, "Jane Smith") in page.actions
    assert ("press", "Enter") in page.actions
    assert page.slept_ms == 2 * settings.search_settle_ms


def test_search_box_missing_is_fatal(fake_page_cls, settings):
    with pytest.raises(SessionError, match="Search box unavailable"):
        PlaywrightSessionProvider(settings).search(fake_page_cls(), "Jane Smith")


def test_close_without_open_is_harmless(settings):
    provider = PlaywrightSessionProvider(settings)
    provider.close()
    provider.wait_until_closed()
