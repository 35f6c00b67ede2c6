# demoshop_e2e/page_objects/base_page.py

import logging
from typing import List, Optional

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from demoshop_e2e.config.config import ACTION_TIMEOUT, BASE_URL, NAVIGATION_TIMEOUT, SCREENSHOT_DIR
from demoshop_e2e.utils.screenshots import take_screenshot
from demoshop_e2e.utils.wait_helpers import (
    wait_for_any_visible,
    wait_for_document_ready,
    wait_for_element_clickable,
    wait_for_element_not_present,
    wait_for_element_visible,
    wait_for_elements_present,
    wait_for_staleness,
    wait_for_text_in_element,
)

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all Page Objects.

    Holds the action primitives. Page objects call these and never the driver's
    element API directly, except to read inside an already located container
    element (a cart row, a product tile).
    """

    def __init__(self, driver: WebDriver, base_url: str = BASE_URL, timeout: float = ACTION_TIMEOUT,
                 screenshot_dir: str = SCREENSHOT_DIR):
        self.driver = driver
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.screenshot_dir = screenshot_dir

    # --- Navigation ---

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def navigate(self, path: str = "/"):
        """Navigates to an absolute URL or a path relative to the base URL."""
        url = self.url_for(path)
        self.driver.get(url)
        self.wait_for_page_load()
        logger.debug(f"Navigated to {url}")

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    def is_on(self, path_fragment: str) -> bool:
        """True if the current URL contains `path_fragment`."""
        return path_fragment in (self.driver.current_url or "")

    def get_title(self) -> str:
        return self.driver.title

    def wait_for_page_load(self, timeout: Optional[float] = None):
        wait_for_document_ready(self.driver, NAVIGATION_TIMEOUT if timeout is None else timeout)

    # --- Lookup ---

    def find_element(self, locator: tuple) -> WebElement:
        """Finds an element using a locator (no waiting)."""
        return self.driver.find_element(*locator)

    def find_elements(self, locator: tuple) -> List[WebElement]:
        """Finds all elements using a locator (no waiting, empty list when none)."""
        return self.driver.find_elements(*locator)

    def element_exists(self, locator: tuple) -> bool:
        """Probe: is at least one matching element in the DOM right now."""
        return len(self.find_elements(locator)) > 0

    def is_visible(self, locator: tuple) -> bool:
        """Probe: is the first matching element displayed right now."""
        elements = self.find_elements(locator)
        if not elements:
            return False
        try:
            return elements[0].is_displayed()
        except StaleElementReferenceException:
            return False

    # --- Waits ---

    def _timeout(self, timeout: Optional[float]) -> float:
        return self.timeout if timeout is None else timeout

    def wait_until_visible(self, locator: tuple, timeout: Optional[float] = None) -> WebElement:
        return wait_for_element_visible(self.driver, locator, self._timeout(timeout))

    def wait_until_clickable(self, locator: tuple, timeout: Optional[float] = None) -> WebElement:
        return wait_for_element_clickable(self.driver, locator, self._timeout(timeout))

    def wait_until_present(self, locator: tuple, timeout: Optional[float] = None) -> List[WebElement]:
        return wait_for_elements_present(self.driver, locator, self._timeout(timeout))

    def wait_until_text_in_element(self, locator: tuple, text: str, timeout: Optional[float] = None):
        wait_for_text_in_element(self.driver, locator, text, self._timeout(timeout))

    def wait_until_not_present(self, locator: tuple, timeout: Optional[float] = None):
        wait_for_element_not_present(self.driver, locator, self._timeout(timeout))

    def wait_until_stale(self, element: WebElement, timeout: Optional[float] = None):
        wait_for_staleness(self.driver, element, self._timeout(timeout))

    def wait_until_any_visible(self, locators: list, timeout: Optional[float] = None) -> WebElement:
        return wait_for_any_visible(self.driver, locators, self._timeout(timeout))

    # --- Interaction ---

    def click(self, locator: tuple, timeout: Optional[float] = None):
        self.wait_until_clickable(locator, timeout).click()

    def fill(self, locator: tuple, text: str, timeout: Optional[float] = None):
        element = self.wait_until_visible(locator, timeout)
        element.clear()
        element.send_keys(str(text))

    def get_text(self, locator: tuple, timeout: Optional[float] = None) -> str:
        return self.wait_until_visible(locator, timeout).text.strip()

    def get_input_value(self, locator: tuple, timeout: Optional[float] = None) -> str:
        return self.wait_until_visible(locator, timeout).get_attribute("value") or ""

    def get_attribute(self, locator: tuple, attribute: str, timeout: Optional[float] = None) -> Optional[str]:
        return self.wait_until_visible(locator, timeout).get_attribute(attribute)

    def is_checked(self, locator: tuple) -> bool:
        """Selected state of the first match, hidden or not (no waiting)."""
        return self.find_element(locator).is_selected()

    def check(self, locator: tuple):
        """Ticks a checkbox or radio button if it is not already selected."""
        element = self.wait_until_clickable(locator)
        if not element.is_selected():
            element.click()

    def select_by_text(self, locator: tuple, text: str):
        Select(self.wait_until_visible(locator)).select_by_visible_text(text)

    def select_by_value(self, locator: tuple, value: str):
        Select(self.wait_until_visible(locator)).select_by_value(value)

    def scroll_to_element(self, locator: tuple):
        element = self.wait_until_present(locator)[0]
        self.driver.execute_script("arguments[0].scrollIntoView({block: 'center'});", element)

    def nth_element(self, locator: tuple, index: int) -> WebElement:
        """The element at `index` among the current matches of `locator`."""
        elements = self.find_elements(locator)
        if not 0 <= index < len(elements):
            raise IndexError(f"Index {index} out of range: {len(elements)} element(s) match {locator}")
        return elements[index]

    @staticmethod
    def child_text(container: WebElement, locator: tuple) -> str:
        return container.find_element(*locator).text.strip()

    # --- Artifacts ---

    def take_screenshot(self, name: str) -> str:
        return take_screenshot(self.driver, name, self.screenshot_dir)
