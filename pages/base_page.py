# pages/base_page.py
import logging

from playwright.sync_api import Locator, Page, TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


class BasePage:
    """Common navigation and element helpers shared by every page object."""

    def __init__(self, page: Page):
        self.page = page

    def wait_for_load(self) -> None:
        self.page.wait_for_load_state("networkidle")

    def goto(self, path: str) -> None:
        self.page.goto(path)
        self.wait_for_load()

    def get_title(self) -> str:
        return self.page.title()

    def screenshot(self, path: str) -> None:
        self.page.screenshot(path=path)

    def fill_field(self, selector: str, value: str) -> None:
        self.page.fill(selector, value)

    def click(self, selector: str) -> None:
        self.page.click(selector)

    def is_visible_within(self, locator: Locator, timeout: float) -> bool:
        """
        Wait up to `timeout` ms for the locator to become visible.
        A timeout means "not there" and is reported as False, never raised.
        """
        try:
            locator.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.debug("not visible after %sms: %s", timeout, locator)
            return False

    def read_text(self, locator: Locator) -> str:
        return (locator.text_content() or "").strip()

    def computed_style(self, locator: Locator, prop: str) -> str:
        return locator.evaluate(
            "(el, prop) => window.getComputedStyle(el).getPropertyValue(prop)", prop
        )

    def count(self, selector: str) -> int:
        return self.page.locator(selector).count()
