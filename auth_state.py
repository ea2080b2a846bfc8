# auth_state.py
"""
Log in through the SauceDemo UI once, snapshot the resulting session
(cookies + localStorage + sessionStorage) and replay it into fresh browser
contexts so tests start already authenticated.
"""
import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

from playwright.sync_api import Browser, BrowserContext

from pages.login_page import LoginPage
from sauce_config import (
    INVENTORY_PATH,
    LOGIN_TIMEOUT_MS,
    NAVIGATION_TIMEOUT_MS,
    PWD,
    SITE_URL,
    USER,
)

logger = logging.getLogger(__name__)

_READ_STORAGE = """(area) => {
    const store = window[area];
    const out = {};
    for (let i = 0; i < store.length; i++) {
        const key = store.key(i);
        if (key !== null) out[key] = store.getItem(key) || '';
    }
    return out;
}"""

_WRITE_STORAGE = """([area, entries]) => {
    for (const [k, v] of Object.entries(entries)) window[area].setItem(k, v);
}"""


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


STANDARD_USER = Credentials(USER, PWD)


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str
    domain: str
    path: str
    expires: float = -1
    http_only: bool = False
    secure: bool = False
    same_site: str = "Lax"

    @classmethod
    def from_playwright(cls, c: dict) -> "Cookie":
        return cls(
            name=c["name"],
            value=c.get("value", ""),
            domain=c["domain"],
            path=c.get("path", "/"),
            expires=c.get("expires", -1),
            http_only=c.get("httpOnly", False),
            secure=c.get("secure", False),
            same_site=c.get("sameSite", "Lax"),
        )

    def to_playwright(self) -> dict:
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "expires": self.expires,
            "httpOnly": self.http_only,
            "secure": self.secure,
            "sameSite": self.same_site,
        }


def _frozen(mapping: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class AuthState:
    cookies: Tuple[Cookie, ...] = ()
    local_storage: Mapping[str, str] = field(default_factory=dict)
    session_storage: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "cookies", tuple(self.cookies))
        object.__setattr__(self, "local_storage", _frozen(self.local_storage))
        object.__setattr__(self, "session_storage", _frozen(self.session_storage))

    def __hash__(self):
        return hash((
            self.cookies,
            tuple(sorted(self.local_storage.items())),
            tuple(sorted(self.session_storage.items())),
        ))

    def to_storage_state(self, origin: str = SITE_URL) -> dict:
        """Playwright storage_state shape (sessionStorage has no slot there and is dropped)."""
        state = {"cookies": [c.to_playwright() for c in self.cookies], "origins": []}
        if self.local_storage:
            state["origins"].append({
                "origin": _origin(origin),
                "localStorage": [{"name": k, "value": v} for k, v in self.local_storage.items()],
            })
        return state

    def summary(self) -> Dict[str, int]:
        return {
            "cookies": len(self.cookies),
            "localStorage_items": len(self.local_storage),
            "sessionStorage_items": len(self.session_storage),
        }


def _origin(url: str) -> str:
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def _session_storage_init_script(origin: str, entries: Mapping[str, str]) -> str:
    # sessionStorage lives per tab, so every new page on the origin gets seeded
    return (
        "(() => {"
        f" if (window.location.origin !== {json.dumps(origin)}) return;"
        f" const entries = {json.dumps(dict(entries))};"
        " for (const [k, v] of Object.entries(entries)) {"
        "  if (window.sessionStorage.getItem(k) === null) window.sessionStorage.setItem(k, v);"
        " }"
        "})();"
    )


def capture_auth_state(
    context: BrowserContext,
    credentials: Credentials = STANDARD_USER,
    timeout: float = LOGIN_TIMEOUT_MS,
    url: str = SITE_URL,
) -> AuthState:
    page = context.new_page()
    try:
        LoginPage(page).login(credentials, _origin(url))

        # Reaching the inventory page is the only proof of a successful login
        page.wait_for_url(f"**{INVENTORY_PATH}", timeout=timeout)

        cookies = context.cookies()
        local_storage = page.evaluate(_READ_STORAGE, "localStorage")
        session_storage = page.evaluate(_READ_STORAGE, "sessionStorage")
    finally:
        page.close()

    state = AuthState(
        cookies=tuple(Cookie.from_playwright(c) for c in cookies),
        local_storage=local_storage,
        session_storage=session_storage,
    )
    logger.info("captured auth state for %s: %s", credentials.username, state.summary())
    return state


def inject_auth_state(context: BrowserContext, state: AuthState, url: str = SITE_URL) -> None:
    if state.cookies:
        context.add_cookies([c.to_playwright() for c in state.cookies])

    origin = _origin(url)
    if state.session_storage:
        context.add_init_script(script=_session_storage_init_script(origin, state.session_storage))

    # Storage is origin scoped: it can only be written from a loaded page on the site
    page = context.new_page()
    try:
        page.goto(origin + "/", wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT_MS)
        if state.local_storage:
            page.evaluate(_WRITE_STORAGE, ["localStorage", dict(state.local_storage)])
        if state.session_storage:
            page.evaluate(_WRITE_STORAGE, ["sessionStorage", dict(state.session_storage)])
    finally:
        page.close()
    logger.debug("injected auth state into context: %s", state.summary())


def capture_with_temporary_context(
    browser: Browser,
    credentials: Credentials = STANDARD_USER,
    url: str = SITE_URL,
    **context_args,
) -> AuthState:
    context = browser.new_context(**context_args)
    try:
        return capture_auth_state(context, credentials, url=url)
    finally:
        context.close()


def create_authenticated_context(
    browser: Browser,
    credentials: Credentials = STANDARD_USER,
    url: str = SITE_URL,
    **context_args,
) -> BrowserContext:
    state = capture_with_temporary_context(browser, credentials, url, **context_args)
    context = browser.new_context(**context_args)
    try:
        inject_auth_state(context, state, url)
    except Exception:
        context.close()
        raise
    return context


class AuthStateCache:
    """
    Captured snapshots keyed by credentials and site origin, kept for the life of the process.
    When disabled every call performs a fresh UI login.
    """

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self._states: Dict[Tuple[Credentials, str], AuthState] = {}

    def get(
        self,
        browser: Browser,
        credentials: Credentials = STANDARD_USER,
        url: str = SITE_URL,
        **context_args,
    ) -> AuthState:
        key = (credentials, _origin(url))
        if self.enabled and key in self._states:
            logger.debug("reusing auth state for %s", credentials.username)
            return self._states[key]
        state = capture_with_temporary_context(browser, credentials, url, **context_args)
        if self.enabled:
            self._states[key] = state
        return state

    def clear(self) -> None:
        self._states.clear()
