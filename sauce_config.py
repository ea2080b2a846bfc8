# sauce_config.py
import os

SITE_URL = os.environ.get("SAUCE_SITE_URL", "https://www.saucedemo.com").rstrip("/")

USER = os.environ.get("SAUCE_USER", "standard_user")
PWD  = os.environ.get("SAUCE_PWD",  "secret_sauce")

HEADLESS = os.environ.get("SAUCE_HEADLESS", "1").lower() not in ("0", "false", "no")
# Share one captured login per credential set across tests
REUSE_AUTH_STATE = os.environ.get("SAUCE_REUSE_AUTH_STATE", "0").lower() in ("1", "true", "yes")

LOGIN_PATH = "/"
INVENTORY_PATH = "/inventory.html"
CART_PATH = "/cart.html"
CHECKOUT_STEP_ONE_PATH = "/checkout-step-one.html"
CHECKOUT_STEP_TWO_PATH = "/checkout-step-two.html"
CHECKOUT_COMPLETE_PATH = "/checkout-complete.html"

# Timeouts (ms unless noted)
LOGIN_TIMEOUT_MS = 10_000
NAVIGATION_TIMEOUT_MS = 10_000
STATE_CHANGE_TIMEOUT_MS = 5_000
INTERACTIVE_BUDGET_MS = 2_000
PROBE_TIMEOUT_S = float(os.environ.get("SAUCE_PROBE_TIMEOUT", "10"))
