# demoshop_e2e/utils/wait_helpers.py

import logging

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from demoshop_e2e.config.config import ACTION_TIMEOUT, NAVIGATION_TIMEOUT

logger = logging.getLogger(__name__)


def _wait(driver: WebDriver, condition, timeout: float, description: str):
    try:
        return WebDriverWait(driver, timeout).until(condition)
    except TimeoutException as e:
        logger.error(f"Timeout after {timeout}s waiting for {description}.")
        raise TimeoutException(f"Timed out after {timeout}s waiting for {description}", e.screen, e.stacktrace) from e


def wait_for_element_visible(driver: WebDriver, locator: tuple, timeout: float = ACTION_TIMEOUT) -> WebElement:
    """Waits for an element to be visible on the page."""
    return _wait(driver, EC.visibility_of_element_located(locator), timeout,
                 f"element located by {locator} to be visible")


def wait_for_element_clickable(driver: WebDriver, locator: tuple, timeout: float = ACTION_TIMEOUT) -> WebElement:
    """Waits for an element to be clickable on the page."""
    return _wait(driver, EC.element_to_be_clickable(locator), timeout,
                 f"element located by {locator} to be clickable")


def wait_for_elements_present(driver: WebDriver, locator: tuple, timeout: float = ACTION_TIMEOUT) -> list:
    """Waits until at least one element matches the locator and returns all matches."""
    return _wait(driver, EC.presence_of_all_elements_located(locator), timeout,
                 f"elements located by {locator} to be present")


def wait_for_text_in_element(driver: WebDriver, locator: tuple, text: str, timeout: float = ACTION_TIMEOUT):
    """Waits for specific text to be present in an element."""
    _wait(driver, EC.text_to_be_present_in_element(locator, text), timeout,
          f"text '{text}' in element located by {locator}")


def wait_for_element_not_present(driver: WebDriver, locator: tuple, timeout: float = ACTION_TIMEOUT):
    """Waits for an element to no longer be present in the DOM or visible."""
    _wait(driver, EC.invisibility_of_element_located(locator), timeout,
          f"element located by {locator} to disappear or become invisible")


def wait_for_staleness(driver: WebDriver, element: WebElement, timeout: float = ACTION_TIMEOUT):
    """Waits for a previously located element to be detached from the DOM (page reload or re-render)."""
    _wait(driver, EC.staleness_of(element), timeout, "old element to be detached from the DOM")


def wait_for_any_visible(driver: WebDriver, locators: list, timeout: float = ACTION_TIMEOUT) -> WebElement:
    """Waits until any one of several locators is visible and returns that element."""
    conditions = [EC.visibility_of_element_located(locator) for locator in locators]
    return _wait(driver, EC.any_of(*conditions), timeout,
                 f"any of {locators} to be visible")


def wait_for_document_ready(driver: WebDriver, timeout: float = NAVIGATION_TIMEOUT):
    """Waits until the browser reports the document as fully loaded."""
    _wait(driver, lambda d: d.execute_script("return document.readyState") == "complete", timeout,
          "document.readyState to be 'complete'")
