import logging

import pytest

import sauce_config
from auth_state import STANDARD_USER, AuthStateCache, inject_auth_state
from site_probe import probe_site

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def base_url(request):
    # --base-url (pytest-base-url) wins over SAUCE_SITE_URL
    return (request.config.getoption("base_url", default=None) or sauce_config.SITE_URL).rstrip("/")


@pytest.fixture(scope="session")
def site_reachable(base_url):
    result = probe_site(base_url)
    if not result.ok:
        pytest.skip(f"{base_url} unreachable: {result.error}")
    logger.info("site %s up (%s, %.0fms)", base_url, result.status, result.latency_ms)
    return result


@pytest.fixture(scope="session")
def auth_states():
    return AuthStateCache(enabled=sauce_config.REUSE_AUTH_STATE)


@pytest.fixture
def authenticated_context(browser, browser_context_args, base_url, auth_states, site_reachable):
    state = auth_states.get(browser, STANDARD_USER, base_url, **browser_context_args)

    context = browser.new_context(**browser_context_args)
    try:
        inject_auth_state(context, state, base_url)
        yield context
    finally:
        context.close()


@pytest.fixture
def authenticated_page(authenticated_context):
    page = authenticated_context.new_page()
    try:
        yield page
    finally:
        page.close()
