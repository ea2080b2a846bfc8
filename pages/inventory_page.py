# pages/inventory_page.py
import re
from dataclasses import dataclass
from typing import List

from playwright.sync_api import Locator

from pages.base_page import BasePage
from sauce_config import INVENTORY_PATH, STATE_CHANGE_TIMEOUT_MS

ADD_TO_CART = re.compile(r"add to cart", re.IGNORECASE)
REMOVE = re.compile(r"remove", re.IGNORECASE)


@dataclass(frozen=True)
class Product:
    name: str
    description: str
    price: str
    add_to_cart_button: Locator
    remove_button: Locator


class InventoryPage(BasePage):
    url = INVENTORY_PATH

    product_container = '[data-test="inventory-container"]'
    inventory_item = '[data-test="inventory-item"]'
    item_name = '[data-test="inventory-item-name"]'
    item_desc = '[data-test="inventory-item-desc"]'
    item_price = '[data-test="inventory-item-price"]'
    cart_badge = '[data-test="shopping-cart-badge"]'
    cart_link = '[data-test="shopping-cart-link"]'
    sort_dropdown = '[data-test="product-sort-container"]'

    def goto(self) -> None:
        super().goto(self.url)

    def _item(self, product_name: str) -> Locator:
        return self.page.locator(self.inventory_item).filter(has_text=product_name)

    def get_product(self, product_name: str) -> Product:
        # Resolved fresh on every call; the button flips between add and remove
        item = self._item(product_name)
        return Product(
            name=self.read_text(item.locator(self.item_name)),
            description=self.read_text(item.locator(self.item_desc)),
            price=self.read_text(item.locator(self.item_price)),
            add_to_cart_button=item.locator("button").filter(has_text=ADD_TO_CART),
            remove_button=item.locator("button").filter(has_text=REMOVE),
        )

    def add_product_to_cart(self, product_name: str) -> None:
        product = self.get_product(product_name)
        product.add_to_cart_button.click()
        product.remove_button.wait_for(state="visible", timeout=STATE_CHANGE_TIMEOUT_MS)

    def remove_product_from_cart(self, product_name: str) -> None:
        product = self.get_product(product_name)
        product.remove_button.click()
        product.add_to_cart_button.wait_for(state="visible", timeout=STATE_CHANGE_TIMEOUT_MS)

    def get_cart_badge_count(self) -> int:
        badge = self.page.locator(self.cart_badge)
        if badge.is_visible():
            return int(self.read_text(badge) or "0")
        return 0

    def go_to_cart(self) -> None:
        self.click(self.cart_link)

    def get_add_to_cart_button(self, product_name: str) -> Locator:
        return self.get_product(product_name).add_to_cart_button

    def get_remove_button(self, product_name: str) -> Locator:
        return self.get_product(product_name).remove_button

    def get_button_color(self, button: Locator) -> str:
        return self.computed_style(button, "color")

    def get_button_background_color(self, button: Locator) -> str:
        return self.computed_style(button, "background-color")

    def get_button_text(self, button: Locator) -> str:
        return button.text_content() or ""

    def sort_products(self, option: str) -> None:
        """`option` is the dropdown value: az, za, lohi or hilo."""
        self.page.select_option(self.sort_dropdown, option)

    def get_product_names(self) -> List[str]:
        return [n.strip() for n in self.page.locator(self.item_name).all_text_contents()]

    def get_product_prices(self) -> List[float]:
        prices = self.page.locator(self.item_price).all_text_contents()
        return [float(p.strip().lstrip("$")) for p in prices]
