# demoshop_e2e/page_objects/home_page.py

import logging
import re

from demoshop_e2e.config.config import EXPECT_TIMEOUT
from demoshop_e2e.exceptions import PageAssertionError
from .base_page import BasePage
from .locators import HomePageLocators
from .product_page import ProductPage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Page Object for the header, top menu and featured products of the home page."""

    locators = HomePageLocators

    def navigate_to_home(self):
        self.navigate("/")
        self.wait_until_visible(self.locators.SEARCH_INPUT)

    def click_register(self):
        self.click(self.locators.REGISTER_LINK)
        self.wait_for_page_load()

    def click_login(self):
        self.click(self.locators.LOGIN_LINK)
        self.wait_for_page_load()

    def click_logout(self):
        self.click(self.locators.LOGOUT_LINK)
        # Logged-out header renders the login link instead
        self.wait_until_visible(self.locators.LOGIN_LINK)
        logger.info("Logged out.")

    def search_product(self, term: str):
        self.fill(self.locators.SEARCH_INPUT, term)
        self.click(self.locators.SEARCH_BUTTON)
        self.wait_for_page_load()
        logger.info(f"Searched for '{term}'")

    def go_to_shopping_cart(self):
        self.click(self.locators.SHOPPING_CART_LINK)
        self.wait_for_page_load()

    def get_cart_item_count(self) -> int:
        """Quantity shown in the header, e.g. 'Shopping cart (3)' -> 3."""
        if not self.element_exists(self.locators.CART_QUANTITY):
            return 0
        match = re.search(r"\((\d+)\)", self.find_element(self.locators.CART_QUANTITY).text)
        return int(match.group(1)) if match else 0

    def get_account_identifier(self) -> str:
        """Account name shown in the header for a logged-in customer ('' when logged out)."""
        if not self.element_exists(self.locators.ACCOUNT_LINK):
            return ""
        return self.find_elements(self.locators.ACCOUNT_LINK)[0].text.strip()

    def verify_logged_in(self, email: str):
        self.wait_until_visible(self.locators.LOGOUT_LINK, timeout=EXPECT_TIMEOUT)
        account = self.get_account_identifier()
        if email not in account:
            raise PageAssertionError(f"Expected header account '{account}' to contain '{email}'",
                                     expected=email, actual=account)

    def verify_logged_out(self):
        if not self.is_visible(self.locators.LOGIN_LINK):
            raise PageAssertionError("Expected the 'Log in' link to be visible after logout")

    def go_to_category(self, category: str):
        """Opens a top-menu category by slug ('books', 'computers', ...)."""
        try:
            locator = self.locators.CATEGORIES[category.lower()]
        except KeyError:
            raise LookupError(f"Unknown category '{category}'. Known: {sorted(self.locators.CATEGORIES)}") from None
        self.wait_until_present(locator)[0].click()
        self.wait_for_page_load()
        logger.info(f"Opened category '{category}'")

    def go_to_books_category(self):
        self.go_to_category("books")

    def go_to_computers_category(self):
        self.go_to_category("computers")

    def go_to_electronics_category(self):
        self.go_to_category("electronics")

    def add_featured_product_to_cart(self, index: int):
        product = self.nth_element(self.locators.FEATURED_PRODUCTS, index)
        notifications = ProductPage(self.driver, base_url=self.base_url, timeout=self.timeout,
                                    screenshot_dir=self.screenshot_dir)
        # A bar left over from an earlier add would satisfy the wait below immediately
        notifications.close_notification_bar()
        product.find_element(*self.locators.ADD_TO_CART_IN_ITEM).click()
        notifications.wait_for_product_added()
