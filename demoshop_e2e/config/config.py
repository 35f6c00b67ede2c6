# demoshop_e2e/config/config.py

import os

from dotenv import load_dotenv

# Values in a local .env file override nothing already set in the environment
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# --- General Configuration ---
# Base URL of the shop under test. Page objects navigate with paths relative to it.
BASE_URL = os.getenv("BASE_URL", "https://demowebshop.tricentis.com").rstrip("/")

# Browser type to use for testing (chrome, firefox)
BROWSER = os.getenv("BROWSER", "chrome").lower()
HEADLESS = _env_bool("HEADLESS", False)
WINDOW_WIDTH = int(os.getenv("WINDOW_WIDTH", "1920"))
WINDOW_HEIGHT = int(os.getenv("WINDOW_HEIGHT", "1080"))

# Browser tests only run when explicitly enabled (they need a browser and network access)
RUN_E2E = _env_bool("RUN_E2E", False)

# Implicit wait stays at 0 so existence probes return immediately; every wait is explicit
IMPLICIT_WAIT = int(os.getenv("IMPLICIT_WAIT", "0"))


# --- Timeouts (seconds) ---
ACTION_TIMEOUT = float(os.getenv("ACTION_TIMEOUT", "15"))
NAVIGATION_TIMEOUT = float(os.getenv("NAVIGATION_TIMEOUT", "30"))
EXPECT_TIMEOUT = float(os.getenv("EXPECT_TIMEOUT", "10"))

# Longer waits for steps that go through an AJAX round trip
WAIT_FOR_NOTIFICATION = float(os.getenv("WAIT_FOR_NOTIFICATION", "10"))
WAIT_FOR_CHECKOUT_STEP = float(os.getenv("WAIT_FOR_CHECKOUT_STEP", "20"))
WAIT_FOR_ORDER_COMPLETED = float(os.getenv("WAIT_FOR_ORDER_COMPLETED", "30"))


# --- Opt-in retry helper defaults ---
RETRY_ATTEMPTS = int(os.getenv("RETRY_ATTEMPTS", "3"))
RETRY_DELAY = float(os.getenv("RETRY_DELAY", "1.0"))


# --- Failure artifacts ---
# off | on | only-on-failure
SCREENSHOT_MODE = os.getenv("SCREENSHOT_MODE", "only-on-failure").lower()
PAGE_SOURCE_ON_FAILURE = _env_bool("PAGE_SOURCE_ON_FAILURE", True)


# --- Output locations (relative to the working directory the suite runs from) ---
SCREENSHOT_DIR = os.getenv("SCREENSHOT_DIR", "screenshots")
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FILE_NAME = os.getenv("LOG_FILE_NAME", "test-execution.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
REPORT_DIR = os.getenv("REPORT_DIR", "test-results")
CSV_REPORT_FILE = os.getenv("CSV_REPORT_FILE", "test-results.csv")
JSON_REPORT_FILE = os.getenv("JSON_REPORT_FILE", "results.json")


# --- Test data ---
TEST_DATA_DIR = os.getenv("TEST_DATA_DIR", "testdata")
USER_DATA_FILE = "user_data.json"
CREDENTIALS_FILE = "test_credentials.json"
ORDER_DETAILS_FILE = "last_order_details.json"
EMAIL_DOMAIN = os.getenv("EMAIL_DOMAIN", "example.com")
