# pages/cart_page.py
from playwright.sync_api import Locator

from pages.base_page import BasePage
from pages.inventory_page import REMOVE
from sauce_config import CART_PATH, STATE_CHANGE_TIMEOUT_MS


class CartPage(BasePage):
    url = CART_PATH

    cart_item = '[data-test="cart-item"]'
    item_name = '[data-test="inventory-item-name"]'
    checkout_button = '[data-test="checkout"]'
    continue_shopping_button = '[data-test="continue-shopping"]'

    def goto(self) -> None:
        super().goto(self.url)

    def get_cart_item(self, product_name: str) -> Locator:
        return self.page.locator(self.item_name, has_text=product_name)

    def is_product_in_cart(self, product_name: str) -> bool:
        return self.is_visible_within(self.get_cart_item(product_name), STATE_CHANGE_TIMEOUT_MS)

    def click_checkout(self) -> None:
        self.click(self.checkout_button)

    def continue_shopping(self) -> None:
        self.click(self.continue_shopping_button)

    def remove_product(self, product_name: str) -> None:
        row = self.page.locator(self.cart_item).filter(has_text=product_name)
        row.locator("button").filter(has_text=REMOVE).click()
        row.wait_for(state="detached", timeout=STATE_CHANGE_TIMEOUT_MS)

    def get_item_count(self) -> int:
        return self.count(self.cart_item)
