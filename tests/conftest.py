from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.extraction'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # .env on a developer machine must not leak into tests
    monkeypatch.setattr("config.settings.load_dotenv", lambda *a, **k: None)
    for name in ("SHEET_ID", "API_KEY", "FB_EMAIL", "FB_PASSWORD", "SOURCE", "RECORD_INDEX", "CLOSE_BROWSER"):
        monkeypatch.delenv(name, raising=False)
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("SHEET_ID", "sheet-123")
    monkeypatch.setenv("API_KEY", "key-abc")
    monkeypatch.setenv("CHALLENGE_WAIT_SECONDS", "0")
    from config.settings import load_settings
    return load_settings()


class FakeNode:
    """A rendered element: text, attributes, visibility and nested matches per selector."""

    def __init__(self, text: str = "", attrs: Optional[Dict[str, str]] = None, visible: bool = True,
                 children: Optional[Dict[str, List["FakeNode"]]] = None, fail: bool = False):
        self.text = text
        self.attrs = attrs or {}
        self.visible = visible
        self.children = children or {}
        self.fail = fail


def anchor(text: str = "", href: Optional[str] = None, **kw) -> FakeNode:
    attrs = {} if href is None else {"href": href}
    return FakeNode(text=text, attrs=attrs, **kw)


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, nodes: List[FakeNode]):
        self.page = page
        self.selector = selector
        self.nodes = nodes

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, self.nodes[:1])

    def all(self) -> List["FakeLocator"]:
        return [FakeLocator(self.page, self.selector, [n]) for n in self.nodes]

    def locator(self, selector: str) -> "FakeLocator":
        nodes = self.nodes[0].children.get(selector, []) if self.nodes else []
        return FakeLocator(self.page, selector, nodes)

    def _node(self, timeout=None) -> FakeNode:
        self.page.waits.append((self.selector, timeout))
        if not self.nodes:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")
        node = self.nodes[0]
        if node.fail:
            raise RuntimeError(f"Element is not attached to the DOM: {self.selector}")
        return node

    def wait_for(self, state: str = "visible", timeout=None) -> None:
        node = self._node(timeout)
        if state == "visible" and not node.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector} visible")

    def inner_text(self, timeout=None) -> str:
        return self._node(timeout).text

    def text_content(self, timeout=None) -> str:
        return self._node(timeout).text

    def get_attribute(self, name: str, timeout=None) -> Optional[str]:
        return self._node(timeout).attrs.get(name)

    def is_visible(self) -> bool:
        return bool(self.nodes) and self.nodes[0].visible

    def scroll_into_view_if_needed(self, timeout=None) -> None:
        self.page.actions.append(("scroll", self._node(timeout).attrs.get("href")))

    def hover(self, timeout=None) -> None:
        self.page.actions.append(("hover", self._node(timeout).attrs.get("href")))

    def click(self, force: bool = False, timeout=None) -> None:
        node = self._node(timeout)
        self.page.actions.append(("click", node.attrs.get("href")))
        target = node.attrs.get("href")
        if target in self.page.pages:
            self.page.url = target
            self.page.elements = self.page.pages[target]


class FakeKeyboard:
    def __init__(self, page: "FakePage"):
        self.page = page

    def press(self, key: str) -> None:
        self.page.actions.append(("press", key))


class FakePage:
    """In-memory stand-in for a Playwright Page. ``elements`` maps selector -> matches."""

    def __init__(self, elements: Optional[Dict[str, List[FakeNode]]] = None,
                 pages: Optional[Dict[str, Dict[str, List[FakeNode]]]] = None,
                 nav_failures: Optional[set] = None):
        self.elements = elements or {}
        self.pages = pages or {}
        self.nav_failures = nav_failures or set()
        self.url = "about:blank"
        self.waits: List[tuple] = []
        self.actions: List[tuple] = []
        self.slept_ms = 0
        self.keyboard = FakeKeyboard(self)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector, self.elements.get(selector, []))

    def goto(self, url: str, wait_until: str = "load", timeout=None) -> None:
        self.actions.append(("goto", url))
        if url in self.nav_failures:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded navigating to {url}")
        self.url = url
        if url in self.pages:
            self.elements = self.pages[url]

    def wait_for_load_state(self, state: str = "load", timeout=None) -> None:
        self.actions.append(("load_state", state))

    def wait_for_timeout(self, ms: int) -> None:
        self.slept_ms += ms

    def fill(self, selector: str, value: str, timeout=None) -> None:
        if selector not in self.elements:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        self.actions.append(("fill", selector, value))

    def click(self, selector: str, timeout=None) -> None:
        if selector not in self.elements:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")
        self.actions.append(("click", selector))


@pytest.fixture
def fake_page_cls():
    return FakePage


@pytest.fixture
def node_cls():
    return FakeNode


@pytest.fixture
def make_anchor():
    return anchor
