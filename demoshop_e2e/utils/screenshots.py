# demoshop_e2e/utils/screenshots.py

import logging
import os
import re
from datetime import datetime

from selenium.webdriver.remote.webdriver import WebDriver

from demoshop_e2e.config.config import SCREENSHOT_DIR

logger = logging.getLogger(__name__)


def artifact_name(name: str, extension: str) -> str:
    """'failure test login' -> 'failure-test-login_2025-01-31T10-15-00-123456.png'"""
    safe_name = re.sub(r"\s+", "-", name.strip())
    safe_name = re.sub(r"[^\w.\-\[\]]", "_", safe_name)
    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S-%f")
    return f"{safe_name}_{timestamp}.{extension}"


def take_screenshot(driver: WebDriver, name: str, directory: str = SCREENSHOT_DIR) -> str:
    """Saves a PNG of the current viewport into `directory` and returns its path."""
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, artifact_name(name, "png"))
    if not driver.save_screenshot(path):
        raise IOError(f"Browser could not write screenshot to {path}")
    logger.info(f"Screenshot saved: {path}")
    return path


def save_page_source(driver: WebDriver, name: str, directory: str = SCREENSHOT_DIR) -> str:
    """Saves the current DOM as HTML next to the screenshots and returns its path."""
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, artifact_name(name, "html"))
    with open(path, "w", encoding="utf-8") as f:
        f.write(driver.page_source)
    logger.info(f"Page source saved: {path}")
    return path
