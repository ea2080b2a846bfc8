# pages/checkout_complete_page.py
from pages.base_page import BasePage
from sauce_config import CHECKOUT_COMPLETE_PATH, STATE_CHANGE_TIMEOUT_MS


class CheckoutCompletePage(BasePage):
    url = CHECKOUT_COMPLETE_PATH

    complete_header = '[data-test="complete-header"]'
    complete_text = '[data-test="complete-text"]'
    back_home_button = '[data-test="back-to-products"]'
    pony_express_image = ".pony_express"

    def goto(self) -> None:
        super().goto(self.url)

    def get_success_message(self) -> str:
        return self.page.locator(self.complete_header).inner_text()

    def get_completion_text(self) -> str:
        return self.read_text(self.page.locator(self.complete_text))

    def verify_order_complete(self) -> bool:
        return self.is_visible_within(
            self.page.locator(self.complete_header), STATE_CHANGE_TIMEOUT_MS
        )

    def click_back_home(self) -> None:
        self.click(self.back_home_button)

    def is_completion_image_visible(self) -> bool:
        return self.page.locator(self.pony_express_image).is_visible()
