# demoshop_e2e/page_objects/checkout_page.py

import logging
import re
from typing import Optional

from selenium.webdriver.support.ui import Select

from demoshop_e2e.config.config import WAIT_FOR_CHECKOUT_STEP, WAIT_FOR_ORDER_COMPLETED
from demoshop_e2e.exceptions import PageAssertionError
from demoshop_e2e.models import Address, OrderConfirmation
from .base_page import BasePage
from .locators import CheckoutPageLocators

logger = logging.getLogger(__name__)

ORDER_COMPLETED_TEXT = "Your order has been successfully processed!"
NEW_ADDRESS_OPTION = "New Address"


class CheckoutPage(BasePage):
    """Page Object for the one-page checkout (/onepagecheckout).

    Each continue_* method returns only once the next step's controls have
    rendered, so the following call can interact with them straight away.
    """

    locators = CheckoutPageLocators

    def navigate_to_checkout(self):
        self.navigate("/onepagecheckout")
        self.wait_until_visible(self.locators.BILLING_CONTINUE)

    # --- Address forms ---

    def _choose_new_address(self, dropdown: tuple, first_name_field: tuple):
        """Returning customers get a saved-address dropdown; switch it to a blank form."""
        if self.element_exists(dropdown) and self.is_visible(dropdown):
            self.select_by_text(dropdown, NEW_ADDRESS_OPTION)
            self.wait_until_visible(first_name_field)

    def _select_country(self, country_field: tuple, state_options: tuple, loading_indicator: tuple, country: str):
        """Selects a country and waits for the dependent state list to be repopulated."""
        select = Select(self.wait_until_visible(country_field))
        if select.first_selected_option.text.strip() == country:
            return
        old_options = self.find_elements(state_options)
        select.select_by_visible_text(country)
        if old_options:
            self.wait_until_stale(old_options[0])
        self.wait_until_not_present(loading_indicator)

    def _fill_address(self, address: Address, fields: dict):
        self.fill(fields["first_name"], address.first_name)
        self.fill(fields["last_name"], address.last_name)
        self.fill(fields["email"], address.email)
        if address.company:
            self.fill(fields["company"], address.company)
        self._select_country(fields["country"], fields["state_options"], fields["states_loading"], address.country)
        self.fill(fields["city"], address.city)
        self.fill(fields["address1"], address.address1)
        if address.address2:
            self.fill(fields["address2"], address.address2)
        self.fill(fields["zip_code"], address.zip_code)
        self.fill(fields["phone"], address.phone)

    def fill_billing_address(self, address: Address):
        self._choose_new_address(self.locators.BILLING_ADDRESS_SELECT, self.locators.BILLING_FIRST_NAME)
        self._fill_address(address, {
            "first_name": self.locators.BILLING_FIRST_NAME,
            "last_name": self.locators.BILLING_LAST_NAME,
            "email": self.locators.BILLING_EMAIL,
            "company": self.locators.BILLING_COMPANY,
            "country": self.locators.BILLING_COUNTRY,
            "state_options": self.locators.BILLING_STATE_OPTIONS,
            "states_loading": self.locators.BILLING_STATES_LOADING,
            "city": self.locators.BILLING_CITY,
            "address1": self.locators.BILLING_ADDRESS1,
            "address2": self.locators.BILLING_ADDRESS2,
            "zip_code": self.locators.BILLING_ZIP,
            "phone": self.locators.BILLING_PHONE,
        })
        logger.info("Billing address filled")

    def fill_shipping_address(self, address: Address):
        self._choose_new_address(self.locators.SHIPPING_ADDRESS_SELECT, self.locators.SHIPPING_FIRST_NAME)
        self._fill_address(address, {
            "first_name": self.locators.SHIPPING_FIRST_NAME,
            "last_name": self.locators.SHIPPING_LAST_NAME,
            "email": self.locators.SHIPPING_EMAIL,
            "company": self.locators.SHIPPING_COMPANY,
            "country": self.locators.SHIPPING_COUNTRY,
            "state_options": self.locators.SHIPPING_STATE_OPTIONS,
            "states_loading": self.locators.SHIPPING_STATES_LOADING,
            "city": self.locators.SHIPPING_CITY,
            "address1": self.locators.SHIPPING_ADDRESS1,
            "address2": self.locators.SHIPPING_ADDRESS2,
            "zip_code": self.locators.SHIPPING_ZIP,
            "phone": self.locators.SHIPPING_PHONE,
        })
        logger.info("Shipping address filled")

    def check_ship_to_same_address(self):
        """Ticks 'ship to the same address' when the checkbox is offered.

        The box sits in the billing step, which is already collapsed by the
        time this runs; a hidden box keeps whatever state billing left it in.
        """
        if not self.element_exists(self.locators.SHIP_TO_SAME_ADDRESS):
            return
        if self.is_checked(self.locators.SHIP_TO_SAME_ADDRESS):
            return
        if self.is_visible(self.locators.SHIP_TO_SAME_ADDRESS):
            self.click(self.locators.SHIP_TO_SAME_ADDRESS)
            # The separate shipping form collapses once the box is ticked
            self.wait_until_not_present(self.locators.SHIPPING_FIRST_NAME)

    # --- Step transitions ---

    def _continue_to(self, button: tuple, next_step_control: tuple, timeout: float = WAIT_FOR_CHECKOUT_STEP):
        self.click(button)
        self.wait_until_visible(next_step_control, timeout=timeout)

    def continue_billing_address(self):
        self._continue_to(self.locators.BILLING_CONTINUE, self.locators.SHIPPING_CONTINUE)

    def continue_shipping_address(self):
        self._continue_to(self.locators.SHIPPING_CONTINUE, self.locators.SHIPPING_METHOD_CONTINUE)

    def select_shipping_method(self, index: int = 0):
        options = self.find_elements(self.locators.SHIPPING_METHOD_OPTIONS)
        if options:
            if not 0 <= index < len(options):
                raise IndexError(f"Shipping method {index} out of range ({len(options)} offered)")
            if not options[index].is_selected():
                options[index].click()

    def continue_shipping_method(self):
        self._continue_to(self.locators.SHIPPING_METHOD_CONTINUE, self.locators.PAYMENT_METHOD_CONTINUE)

    def select_payment_method(self, index: int = 0):
        option = self.nth_element(self.locators.PAYMENT_METHOD_OPTIONS, index)
        if not option.is_selected():
            option.click()

    def continue_payment_method(self):
        self._continue_to(self.locators.PAYMENT_METHOD_CONTINUE, self.locators.PAYMENT_INFO_CONTINUE)

    def continue_payment_info(self):
        self._continue_to(self.locators.PAYMENT_INFO_CONTINUE, self.locators.CONFIRM_ORDER_BUTTON)

    def confirm_order(self):
        self._continue_to(self.locators.CONFIRM_ORDER_BUTTON, self.locators.ORDER_COMPLETED_TITLE,
                          timeout=WAIT_FOR_ORDER_COMPLETED)

    def complete_checkout(self, billing_address: Address, shipping_address: Optional[Address] = None,
                          same_address: bool = True) -> OrderConfirmation:
        """Runs every checkout step in order and returns the confirmation."""
        from demoshop_e2e.flows.checkout_flow import CheckoutFlow

        flow = CheckoutFlow(self, billing_address, shipping_address=shipping_address, same_address=same_address)
        return flow.run()

    # --- Order completed ---

    def verify_order_completion(self):
        title = self.get_text(self.locators.ORDER_COMPLETED_TITLE, timeout=WAIT_FOR_ORDER_COMPLETED)
        if ORDER_COMPLETED_TEXT not in title:
            raise PageAssertionError(f"Expected '{ORDER_COMPLETED_TEXT}', got '{title}'",
                                     expected=ORDER_COMPLETED_TEXT, actual=title)

    def get_order_number(self) -> str:
        """'Order number: 1234567' -> '1234567'"""
        text = self.get_text(self.locators.ORDER_NUMBER, timeout=WAIT_FOR_ORDER_COMPLETED)
        match = re.search(r"(\d+)", text)
        return match.group(1) if match else text

    def get_order_success_message(self) -> str:
        return self.get_text(self.locators.ORDER_COMPLETED_TITLE)

    def get_order_confirmation(self) -> OrderConfirmation:
        return OrderConfirmation(order_number=self.get_order_number(), message=self.get_order_success_message())

    def click_continue_after_order(self):
        self.click(self.locators.CONTINUE_AFTER_ORDER)
        self.wait_for_page_load()
