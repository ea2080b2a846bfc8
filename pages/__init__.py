from pages.base_page import BasePage
from pages.login_page import LoginPage
from pages.inventory_page import InventoryPage, Product
from pages.cart_page import CartPage
from pages.checkout_page import CheckoutInfo, CheckoutPage
from pages.checkout_complete_page import CheckoutCompletePage

__all__ = [
    "BasePage",
    "LoginPage",
    "InventoryPage",
    "Product",
    "CartPage",
    "CheckoutInfo",
    "CheckoutPage",
    "CheckoutCompletePage",
]
