# pages/checkout_page.py
from dataclasses import dataclass

from pages.base_page import BasePage
from sauce_config import (
    CHECKOUT_STEP_ONE_PATH,
    CHECKOUT_STEP_TWO_PATH,
    NAVIGATION_TIMEOUT_MS,
)


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


class CheckoutPage(BasePage):
    step_one_url = CHECKOUT_STEP_ONE_PATH
    step_two_url = CHECKOUT_STEP_TWO_PATH

    # step one
    first_name_input = '[data-test="firstName"]'
    last_name_input = '[data-test="lastName"]'
    postal_code_input = '[data-test="postalCode"]'
    continue_button = '[data-test="continue"]'
    cancel_button = '[data-test="cancel"]'
    error_message = '[data-test="error"]'

    # step two
    finish_button = '[data-test="finish"]'
    summary_info = '[data-test="checkout-summary-container"]'
    total_label = '[data-test="total-label"]'

    def goto_step_one(self) -> None:
        super().goto(self.step_one_url)

    def fill_checkout_info(self, info: CheckoutInfo) -> None:
        self.fill_field(self.first_name_input, info.first_name)
        self.fill_field(self.last_name_input, info.last_name)
        self.fill_field(self.postal_code_input, info.postal_code)

    def submit_info(self) -> None:
        self.click(self.continue_button)

    def click_continue(self) -> None:
        self.submit_info()
        self.page.wait_for_url(f"**{self.step_two_url}", timeout=NAVIGATION_TIMEOUT_MS)

    def click_finish(self) -> None:
        self.click(self.finish_button)

    def click_cancel(self) -> None:
        self.click(self.cancel_button)

    def complete_checkout(self, info: CheckoutInfo) -> None:
        self.fill_checkout_info(info)
        self.click_continue()
        self.click_finish()

    def is_summary_displayed(self) -> bool:
        return self.page.locator(self.summary_info).is_visible()

    def get_error_message(self) -> str:
        return self.read_text(self.page.locator(self.error_message))

    def get_summary_total(self) -> str:
        return self.read_text(self.page.locator(self.total_label))
