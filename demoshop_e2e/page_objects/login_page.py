# demoshop_e2e/page_objects/login_page.py

from demoshop_e2e.exceptions import PageAssertionError
from .base_page import BasePage
from .locators import LoginPageLocators


class LoginPage(BasePage):
    """Page Object for /login."""

    locators = LoginPageLocators

    def navigate_to_login(self):
        self.navigate("/login")
        self.wait_until_visible(self.locators.LOGIN_BUTTON)

    def fill_login_credentials(self, email: str, password: str):
        self.fill(self.locators.EMAIL_INPUT, email)
        self.fill(self.locators.PASSWORD_INPUT, password)

    def click_login(self):
        self.click(self.locators.LOGIN_BUTTON)
        self.wait_for_page_load()

    def check_remember_me(self):
        self.check(self.locators.REMEMBER_ME_CHECKBOX)

    def login(self, email: str, password: str, remember_me: bool = False):
        self.fill_login_credentials(email, password)
        if remember_me:
            self.check_remember_me()
        self.click_login()

    def get_error_message(self) -> str:
        if self.is_visible(self.locators.ERROR_SUMMARY):
            return self.find_element(self.locators.ERROR_SUMMARY).text.strip()
        return ""

    def verify_login_error(self):
        if not self.is_visible(self.locators.ERROR_SUMMARY):
            raise PageAssertionError("Expected a login error summary to be visible")
