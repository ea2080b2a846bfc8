# pages/login_page.py
from pages.base_page import BasePage
from sauce_config import LOGIN_PATH, NAVIGATION_TIMEOUT_MS


class LoginPage(BasePage):
    url = LOGIN_PATH

    username_input = 'input[data-test="username"]'
    password_input = 'input[data-test="password"]'
    login_button = 'input[data-test="login-button"]'
    error_message = '[data-test="error"]'

    def goto(self, origin: str = "") -> None:
        # domcontentloaded is enough for the form; the inventory wait confirms the login
        self.page.goto(origin + self.url, wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT_MS)

    def login(self, credentials, origin: str = "") -> None:
        self.goto(origin)
        self.fill_field(self.username_input, credentials.username)
        self.fill_field(self.password_input, credentials.password)
        self.click(self.login_button)

    def get_error_message(self) -> str:
        return self.read_text(self.page.locator(self.error_message))
