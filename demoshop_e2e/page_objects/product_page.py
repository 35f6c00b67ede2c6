# demoshop_e2e/page_objects/product_page.py

import logging
from typing import List

from selenium.webdriver.remote.webelement import WebElement

from demoshop_e2e.config.config import WAIT_FOR_NOTIFICATION
from demoshop_e2e.exceptions import PageAssertionError
from demoshop_e2e.models import ProductDetails
from .base_page import BasePage
from .locators import ProductPageLocators

logger = logging.getLogger(__name__)

PRODUCT_ADDED_TEXT = "The product has been added to your"


class ProductPage(BasePage):
    """Page Object for category listings, search results and the product detail page."""

    locators = ProductPageLocators

    # --- Listing ---

    def get_all_products(self) -> List[WebElement]:
        return self.find_elements(self.locators.PRODUCT_ITEMS)

    def get_product_count(self) -> int:
        """Number of product tiles currently rendered (0 for an empty result, never raises)."""
        return len(self.get_all_products())

    def has_no_results(self) -> bool:
        return self.get_product_count() == 0

    def get_product_names(self) -> List[str]:
        return [self.child_text(item, self.locators.PRODUCT_TITLE_RELATIVE) for item in self.get_all_products()]

    def get_product_name(self, index: int) -> str:
        item = self.nth_element(self.locators.PRODUCT_ITEMS, index)
        return self.child_text(item, self.locators.PRODUCT_TITLE_RELATIVE)

    def get_product_price(self, index: int) -> str:
        item = self.nth_element(self.locators.PRODUCT_ITEMS, index)
        return self.child_text(item, self.locators.PRODUCT_PRICE_RELATIVE)

    def find_product_by_name(self, name: str) -> WebElement:
        """First product tile whose title contains `name`."""
        for item in self.get_all_products():
            if name in self.child_text(item, self.locators.PRODUCT_TITLE_RELATIVE):
                return item
        raise LookupError(f"No product with a name containing '{name}' on {self.current_url}")

    def click_product_by_index(self, index: int):
        item = self.nth_element(self.locators.PRODUCT_ITEMS, index)
        item.find_element(*self.locators.PRODUCT_TITLE_RELATIVE).click()
        self.wait_until_visible(self.locators.DETAIL_NAME)

    def click_product_by_name(self, name: str):
        item = self.find_product_by_name(name)
        item.find_element(*self.locators.PRODUCT_TITLE_RELATIVE).click()
        self.wait_until_visible(self.locators.DETAIL_NAME)

    def add_product_to_cart_by_index(self, index: int):
        """Clicks 'Add to cart' on the product tile at `index` and waits for the confirmation bar."""
        item = self.nth_element(self.locators.PRODUCT_ITEMS, index)
        self._add_to_cart_from_tile(item)

    def add_product_to_cart_by_name(self, name: str):
        item = self.find_product_by_name(name)
        self._add_to_cart_from_tile(item)

    def _add_to_cart_from_tile(self, item: WebElement):
        name = self.child_text(item, self.locators.PRODUCT_TITLE_RELATIVE)
        # A bar left over from the previous add would satisfy the wait below immediately
        self.close_notification_bar()
        item.find_element(*self.locators.ADD_TO_CART_RELATIVE).click()
        self.wait_for_product_added()
        logger.info(f"Added '{name}' to cart")

    # --- Notification bar ---

    def wait_for_product_added(self):
        self.wait_until_text_in_element(self.locators.NOTIFICATION_TEXT, PRODUCT_ADDED_TEXT,
                                        timeout=WAIT_FOR_NOTIFICATION)

    def close_notification_bar(self):
        if self.is_visible(self.locators.NOTIFICATION_CLOSE):
            self.click(self.locators.NOTIFICATION_CLOSE)
            self.wait_until_not_present(self.locators.NOTIFICATION_BAR, timeout=WAIT_FOR_NOTIFICATION)

    def verify_product_added_notification(self):
        self.wait_until_visible(self.locators.NOTIFICATION_BAR, timeout=WAIT_FOR_NOTIFICATION)
        text = self.get_text(self.locators.NOTIFICATION_TEXT)
        if PRODUCT_ADDED_TEXT not in text:
            raise PageAssertionError(f"Expected notification to contain '{PRODUCT_ADDED_TEXT}', got '{text}'",
                                     expected=PRODUCT_ADDED_TEXT, actual=text)

    # --- Detail page ---

    def add_to_cart_with_quantity(self, quantity: int):
        self.fill(self.locators.DETAIL_QUANTITY_INPUT, str(quantity))
        self.close_notification_bar()
        self.click(self.locators.DETAIL_ADD_TO_CART)
        self.wait_for_product_added()

    def get_product_details(self) -> ProductDetails:
        return ProductDetails(
            name=self.get_text(self.locators.DETAIL_NAME),
            price=self.get_text(self.locators.DETAIL_PRICE),
        )
