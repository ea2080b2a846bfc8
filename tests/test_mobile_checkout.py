import re

import pytest
from playwright.sync_api import Page, expect

from pages import CartPage, CheckoutCompletePage, CheckoutInfo, CheckoutPage, InventoryPage

pytestmark = pytest.mark.browser

# iPhone 12/13
MOBILE_VIEWPORT = {"width": 390, "height": 844}
MIN_TOUCH_TARGET_PX = 32


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args):
    return {**browser_context_args, "viewport": MOBILE_VIEWPORT}


def test_complete_checkout_on_mobile_viewport(authenticated_page: Page):
    page = authenticated_page
    page.set_viewport_size(MOBILE_VIEWPORT)

    inventory = InventoryPage(page)
    cart = CartPage(page)
    checkout = CheckoutPage(page)
    complete = CheckoutCompletePage(page)

    inventory.goto()
    expect(page).to_have_url(re.compile(r".*inventory\.html"))
    assert page.viewport_size == MOBILE_VIEWPORT

    product_name = "Sauce Labs Backpack"
    inventory.add_product_to_cart(product_name)
    assert inventory.get_cart_badge_count() == 1

    inventory.go_to_cart()
    expect(page).to_have_url(re.compile(r".*cart\.html"))
    assert cart.is_product_in_cart(product_name)

    cart.click_checkout()
    expect(page).to_have_url(re.compile(r".*checkout-step-one\.html"))

    # form inputs must be reachable without zooming
    for selector in (checkout.first_name_input, checkout.last_name_input, checkout.postal_code_input):
        expect(page.locator(selector)).to_be_visible()

    checkout.fill_checkout_info(CheckoutInfo("John", "Doe", "12345"))
    checkout.click_continue()
    expect(page).to_have_url(re.compile(r".*checkout-step-two\.html"))
    assert checkout.is_summary_displayed()

    checkout.click_finish()
    expect(page).to_have_url(re.compile(r".*checkout-complete\.html"))
    assert complete.verify_order_complete()

    # No horizontal scrolling (10px slack for scrollbars)
    body_width = page.evaluate("() => document.body.scrollWidth")
    assert body_width <= MOBILE_VIEWPORT["width"] + 10


def test_mobile_buttons_are_touch_sized(authenticated_page: Page):
    authenticated_page.set_viewport_size(MOBILE_VIEWPORT)
    inventory = InventoryPage(authenticated_page)
    inventory.goto()

    box = inventory.get_add_to_cart_button("Sauce Labs Backpack").bounding_box()

    assert box is not None
    assert box["height"] >= MIN_TOUCH_TARGET_PX
    assert box["width"] >= MIN_TOUCH_TARGET_PX
