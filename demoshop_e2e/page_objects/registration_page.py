# demoshop_e2e/page_objects/registration_page.py

import logging

from demoshop_e2e.config.config import EXPECT_TIMEOUT
from demoshop_e2e.exceptions import PageAssertionError
from demoshop_e2e.models import Credentials, RegistrationData
from .base_page import BasePage
from .locators import RegistrationPageLocators, field_error_locator

logger = logging.getLogger(__name__)

REGISTRATION_SUCCESS_TEXT = "Your registration completed"


class RegistrationPage(BasePage):
    """Page Object for /register."""

    locators = RegistrationPageLocators

    def navigate_to_registration(self):
        self.navigate("/register")
        self.wait_until_visible(self.locators.REGISTER_BUTTON)

    def select_gender(self, gender: str):
        """'M' for male, anything else for female."""
        if gender.upper() == "M":
            self.click(self.locators.GENDER_MALE)
        else:
            self.click(self.locators.GENDER_FEMALE)

    def fill_registration_form(self, data: RegistrationData):
        self.select_gender(data.gender)
        self.fill(self.locators.FIRST_NAME_INPUT, data.first_name)
        self.fill(self.locators.LAST_NAME_INPUT, data.last_name)
        self.fill(self.locators.EMAIL_INPUT, data.email)
        self.fill(self.locators.PASSWORD_INPUT, data.password)
        self.fill(self.locators.CONFIRM_PASSWORD_INPUT, data.confirm_password)

    def click_register(self):
        self.click(self.locators.REGISTER_BUTTON)
        self.wait_for_page_load()

    def register_user(self, data: RegistrationData) -> Credentials:
        """Fills and submits the form, then waits for the result message."""
        self.fill_registration_form(data)
        self.click_register()
        self.wait_until_visible(self.locators.RESULT_MESSAGE, timeout=EXPECT_TIMEOUT)
        return data.credentials()

    def get_result_message(self) -> str:
        return self.get_text(self.locators.RESULT_MESSAGE)

    def verify_registration_success(self):
        message = self.get_result_message()
        if REGISTRATION_SUCCESS_TEXT not in message:
            raise PageAssertionError(f"Expected registration result to contain '{REGISTRATION_SUCCESS_TEXT}', got '{message}'",
                                     expected=REGISTRATION_SUCCESS_TEXT, actual=message)

    def click_continue(self):
        self.click(self.locators.CONTINUE_BUTTON)
        self.wait_for_page_load()

    def get_error_message(self) -> str:
        if self.is_visible(self.locators.ERROR_SUMMARY):
            return self.find_element(self.locators.ERROR_SUMMARY).text.strip()
        return ""

    def get_field_error(self, field_name: str) -> str:
        """Inline validation message for a field such as 'Email' ('' when none)."""
        locator = field_error_locator(field_name)
        if self.is_visible(locator):
            return self.find_element(locator).text.strip()
        return ""

    def complete_registration(self, data: RegistrationData) -> Credentials:
        credentials = self.register_user(data)
        self.verify_registration_success()
        self.click_continue()
        logger.info(f"Registered {credentials.email}")
        return credentials
