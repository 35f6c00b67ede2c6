# demoshop_e2e/fixtures/browser.py
#
# pytest plugin providing the browser, page objects and failure capture.

import base64
import logging

import httpx
import pytest
import pytest_html
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from demoshop_e2e.config.config import (
    BASE_URL,
    BROWSER,
    HEADLESS,
    IMPLICIT_WAIT,
    NAVIGATION_TIMEOUT,
    PAGE_SOURCE_ON_FAILURE,
    RUN_E2E,
    SCREENSHOT_DIR,
    SCREENSHOT_MODE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from demoshop_e2e.flows.context import JourneyContext
from demoshop_e2e.flows.journeys import ShopJourney, ShopPages
from demoshop_e2e.page_objects.cart_page import CartPage
from demoshop_e2e.page_objects.checkout_page import CheckoutPage
from demoshop_e2e.page_objects.home_page import HomePage
from demoshop_e2e.page_objects.login_page import LoginPage
from demoshop_e2e.page_objects.product_page import ProductPage
from demoshop_e2e.page_objects.registration_page import RegistrationPage
from demoshop_e2e.utils.logging_config import JourneyLogger
from demoshop_e2e.utils.screenshots import save_page_source, take_screenshot

logger = logging.getLogger(__name__)

# Fixtures that hold a browser, in lookup order
DRIVER_FIXTURES = ("driver", "shared_driver")


def create_driver(browser: str = BROWSER, headless: bool = HEADLESS):
    """Starts a local browser with a driver binary managed by webdriver-manager."""
    logger.info(f"Setting up WebDriver for browser: {browser} (headless={headless})")

    if browser == "chrome":
        options = webdriver.ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        options.add_argument(f"--window-size={WINDOW_WIDTH},{WINDOW_HEIGHT}")
        service = ChromeService(ChromeDriverManager().install())
        driver = webdriver.Chrome(service=service, options=options)
    elif browser == "firefox":
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        service = FirefoxService(GeckoDriverManager().install())
        driver = webdriver.Firefox(service=service, options=options)
        driver.set_window_size(WINDOW_WIDTH, WINDOW_HEIGHT)
    else:
        raise ValueError(f"Unsupported browser: {browser}")

    driver.implicitly_wait(IMPLICIT_WAIT)
    driver.set_page_load_timeout(NAVIGATION_TIMEOUT)
    if not headless:
        driver.maximize_window()
    return driver


def _quit(driver):
    logger.info("Quitting WebDriver.")
    driver.quit()


# --- Configuration hooks ---

def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: drives a real browser against the live shop (needs RUN_E2E=1)")


def pytest_collection_modifyitems(config, items):
    if RUN_E2E:
        return
    skip_e2e = pytest.mark.skip(reason="Browser tests disabled; set RUN_E2E=1 to run them")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


# --- Browser fixtures ---

@pytest.fixture(scope="session")
def site_available():
    """Skips browser tests when the shop cannot be reached."""
    try:
        response = httpx.get(BASE_URL, timeout=10.0, follow_redirects=True)
    except httpx.HTTPError as e:
        pytest.skip(f"{BASE_URL} is not reachable: {e}")
    if response.status_code >= 500:
        pytest.skip(f"{BASE_URL} answered with HTTP {response.status_code}")
    return BASE_URL


@pytest.fixture
def driver(site_available):
    """A fresh browser per test."""
    driver = create_driver()
    yield driver
    _quit(driver)


@pytest.fixture(scope="module")
def shared_driver(site_available):
    """One browser for a whole module of ordered, dependent tests. Closed once at module end."""
    driver = create_driver()
    yield driver
    _quit(driver)


# --- Page objects ---

@pytest.fixture
def home_page(driver):
    return HomePage(driver)


@pytest.fixture
def registration_page(driver):
    return RegistrationPage(driver)


@pytest.fixture
def login_page(driver):
    return LoginPage(driver)


@pytest.fixture
def product_page(driver):
    return ProductPage(driver)


@pytest.fixture
def cart_page(driver):
    return CartPage(driver)


@pytest.fixture
def checkout_page(driver):
    return CheckoutPage(driver)


@pytest.fixture
def shop_pages(driver):
    return ShopPages.for_driver(driver)


# --- Journey plumbing ---

@pytest.fixture
def journey_logger(request):
    log = JourneyLogger(request.node.name)
    log.test_start()
    yield log
    report = getattr(request.node, "rep_call", None)
    if report is not None:
        log.test_end("FAILED" if report.failed else "PASSED")


@pytest.fixture
def journey_context():
    return JourneyContext()


@pytest.fixture
def journey(shop_pages, journey_context, journey_logger):
    return ShopJourney(shop_pages, journey_context, journey_logger)


# --- Failure capture ---

def _driver_for(item):
    funcargs = getattr(item, "funcargs", {})
    for name in DRIVER_FIXTURES:
        if name in funcargs:
            return funcargs[name]
    return None


def capture_artifacts(driver, name: str, directory: str = SCREENSHOT_DIR, page_source: bool = False) -> dict:
    """Best-effort screenshot (and optionally page source) of the browser's current state."""
    artifacts = {}
    try:
        artifacts["screenshot"] = take_screenshot(driver, name, directory)
        if page_source:
            artifacts["page_source"] = save_page_source(driver, name, directory)
    except (WebDriverException, OSError) as e:
        logger.warning(f"Could not capture artifacts for {name}: {e}")
    return artifacts


def _attach_screenshot(report, path: str):
    with open(path, "rb") as f:
        encoded = base64.b64encode(f.read()).decode("ascii")
    extras = getattr(report, "extras", [])
    extras.append(pytest_html.extras.png(encoded, name="screenshot"))
    report.extras = extras


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    # Exposed to fixtures as item.rep_setup / rep_call / rep_teardown
    setattr(item, f"rep_{report.when}", report)

    if report.when != "call" or SCREENSHOT_MODE == "off":
        return
    if SCREENSHOT_MODE == "only-on-failure" and not report.failed:
        return
    driver = _driver_for(item)
    if driver is None:
        return

    if report.failed:
        logger.error(f"Test failed: {item.name}")
        artifacts = capture_artifacts(driver, f"failure-{item.name}", page_source=PAGE_SOURCE_ON_FAILURE)
    else:
        artifacts = capture_artifacts(driver, item.name)
    if "screenshot" in artifacts:
        _attach_screenshot(report, artifacts["screenshot"])
