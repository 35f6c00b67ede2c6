# demoshop_e2e/page_objects/cart_page.py

import logging
from decimal import Decimal
from typing import List

from selenium.webdriver.remote.webelement import WebElement

from demoshop_e2e.exceptions import PageAssertionError
from demoshop_e2e.models import CartItem
from demoshop_e2e.utils.helpers import parse_currency
from .base_page import BasePage
from .locators import CartPageLocators

logger = logging.getLogger(__name__)

EMPTY_CART_TEXT = "Your Shopping Cart is empty!"


class CartPage(BasePage):
    """Page Object for /cart.

    Every read goes back to the DOM; nothing about the cart is cached between calls.
    """

    locators = CartPageLocators

    def navigate_to_cart(self):
        self.navigate("/cart")
        self.wait_until_visible(self.locators.ORDER_SUMMARY_CONTENT)

    # --- Reads ---

    def _rows(self) -> List[WebElement]:
        return self.find_elements(self.locators.CART_ROWS)

    def _row(self, index: int) -> WebElement:
        return self.nth_element(self.locators.CART_ROWS, index)

    def _read_row(self, row: WebElement) -> CartItem:
        quantity = row.find_element(*self.locators.QUANTITY_RELATIVE).get_attribute("value")
        return CartItem(
            name=self.child_text(row, self.locators.NAME_RELATIVE),
            unit_price=parse_currency(self.child_text(row, self.locators.UNIT_PRICE_RELATIVE)),
            quantity=int(quantity),
            subtotal=parse_currency(self.child_text(row, self.locators.SUBTOTAL_RELATIVE)),
        )

    def get_cart_items_count(self) -> int:
        return len(self._rows())

    def get_all_cart_items_details(self) -> List[CartItem]:
        return [self._read_row(row) for row in self._rows()]

    def get_cart_item_by_index(self, index: int) -> CartItem:
        return self._read_row(self._row(index))

    def find_cart_item_index(self, name: str) -> int:
        """Index of the first cart line whose product name contains `name`."""
        for index, row in enumerate(self._rows()):
            if name in self.child_text(row, self.locators.NAME_RELATIVE):
                return index
        raise LookupError(f"No cart item with a name containing '{name}'")

    def get_cart_item_by_name(self, name: str) -> CartItem:
        return self.get_cart_item_by_index(self.find_cart_item_index(name))

    def get_order_total(self) -> Decimal:
        return parse_currency(self.get_text(self.locators.ORDER_TOTAL_AMOUNT))

    def calculate_expected_total(self) -> Decimal:
        return sum((item.subtotal for item in self.get_all_cart_items_details()), Decimal("0"))

    # --- Updates ---

    def _submit_cart_update(self):
        """Clicks 'Update shopping cart' and waits for the reloaded page to replace the old one."""
        button = self.wait_until_clickable(self.locators.UPDATE_CART_BUTTON)
        button.click()
        self.wait_until_stale(button)
        self.wait_for_page_load()

    def update_item_quantity(self, index: int, quantity: int):
        quantity_input = self._row(index).find_element(*self.locators.QUANTITY_RELATIVE)
        quantity_input.clear()
        quantity_input.send_keys(str(quantity))
        self._submit_cart_update()
        logger.info(f"Updated cart line {index} to quantity {quantity}")

    def update_item_quantity_by_name(self, name: str, quantity: int):
        self.update_item_quantity(self.find_cart_item_index(name), quantity)

    def remove_item_by_index(self, index: int):
        checkbox = self._row(index).find_element(*self.locators.REMOVE_CHECKBOX_RELATIVE)
        if not checkbox.is_selected():
            checkbox.click()
        self._submit_cart_update()
        logger.info(f"Removed cart line {index}")

    def remove_item_by_name(self, name: str):
        self.remove_item_by_index(self.find_cart_item_index(name))

    # --- Assertions ---

    def verify_cart_item_count(self, expected_count: int):
        actual = self.get_cart_items_count()
        if actual != expected_count:
            raise PageAssertionError(f"Expected {expected_count} cart item(s), found {actual}",
                                     expected=expected_count, actual=actual)

    def verify_cart_is_empty(self):
        text = self.get_text(self.locators.ORDER_SUMMARY_CONTENT)
        if EMPTY_CART_TEXT not in text:
            raise PageAssertionError(f"Expected '{EMPTY_CART_TEXT}', got '{text}'",
                                     expected=EMPTY_CART_TEXT, actual=text)

    def verify_order_total(self):
        displayed = self.get_order_total()
        calculated = self.calculate_expected_total()
        if displayed != calculated:
            raise PageAssertionError(f"Displayed total {displayed} does not match sum of line subtotals {calculated}",
                                     expected=calculated, actual=displayed)

    # --- Navigation out of the cart ---

    def accept_terms_of_service(self):
        self.check(self.locators.TERMS_OF_SERVICE_CHECKBOX)

    def click_checkout(self):
        self.click(self.locators.CHECKOUT_BUTTON)
        self.wait_for_page_load()

    def proceed_to_checkout(self):
        self.accept_terms_of_service()
        self.click_checkout()

    def continue_shopping(self):
        self.click(self.locators.CONTINUE_SHOPPING_BUTTON)
        self.wait_for_page_load()
