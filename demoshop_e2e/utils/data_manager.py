# demoshop_e2e/utils/data_manager.py

import json
import logging
import os
import random
import string
import threading
import time
from datetime import datetime
from typing import Any, List

from demoshop_e2e.config.config import (
    CREDENTIALS_FILE,
    EMAIL_DOMAIN,
    ORDER_DETAILS_FILE,
    TEST_DATA_DIR,
    USER_DATA_FILE,
)
from demoshop_e2e.exceptions import DataFileError
from demoshop_e2e.models import Address, Credentials, OrderDetails, Product, RegistrationData

logger = logging.getLogger(__name__)

# Last timestamp handed out by generate_unique_email (microseconds since epoch)
_last_email_stamp = 0
_email_lock = threading.Lock()


def _data_path(file_name: str, data_dir: str) -> str:
    return os.path.join(data_dir, file_name)


def load_test_data(file_name: str, data_dir: str = TEST_DATA_DIR) -> Any:
    """Loads a JSON fixture file. Raises DataFileError if it does not exist."""
    file_path = _data_path(file_name, data_dir)
    if not os.path.exists(file_path):
        raise DataFileError(f"Test data file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_test_data(file_name: str, data: Any, data_dir: str = TEST_DATA_DIR) -> str:
    """Writes `data` as pretty-printed JSON, creating the directory if needed."""
    file_path = _data_path(file_name, data_dir)
    os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.debug(f"Saved test data to {file_path}")
    return file_path


def generate_unique_email(prefix: str = "testuser", domain: str = EMAIL_DOMAIN) -> str:
    """prefix_<microsecond timestamp>@domain.

    Timestamps are strictly increasing within the process, so two calls never
    produce the same address even inside the same clock tick.
    """
    global _last_email_stamp
    with _email_lock:
        stamp = max(time.time_ns() // 1000, _last_email_stamp + 1)
        _last_email_stamp = stamp
    return f"{prefix}_{stamp}@{domain}"


def generate_random_string(length: int = 8) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(random.choice(alphabet) for _ in range(length))


def generate_random_number(min_value: int = 1, max_value: int = 100) -> int:
    return random.randint(min_value, max_value)


def get_user_registration_data(data_dir: str = TEST_DATA_DIR, prefix: str = "testuser") -> RegistrationData:
    """Registration fixture with a freshly generated email; confirm password mirrors the password."""
    raw = dict(load_test_data(USER_DATA_FILE, data_dir)["registration_data"])
    raw["email"] = generate_unique_email(prefix)
    raw["confirm_password"] = raw["password"]
    return RegistrationData.from_dict(raw)


def get_billing_address(data_dir: str = TEST_DATA_DIR) -> Address:
    return Address.from_dict(load_test_data(USER_DATA_FILE, data_dir)["billing_address"])


def get_shipping_address(data_dir: str = TEST_DATA_DIR) -> Address:
    return Address.from_dict(load_test_data(USER_DATA_FILE, data_dir)["shipping_address"])


def get_products(data_dir: str = TEST_DATA_DIR) -> List[Product]:
    return [Product.from_dict(p) for p in load_test_data(USER_DATA_FILE, data_dir)["products"]]


def save_credentials(credentials: Credentials, data_dir: str = TEST_DATA_DIR) -> str:
    path = save_test_data(CREDENTIALS_FILE, credentials.to_dict(), data_dir)
    logger.info(f"Credentials saved for user: {credentials.email}")
    return path


def load_credentials(data_dir: str = TEST_DATA_DIR) -> Credentials:
    """Credentials persisted by an earlier registration run."""
    return Credentials.from_dict(load_test_data(CREDENTIALS_FILE, data_dir))


def save_order_details(order: OrderDetails, data_dir: str = TEST_DATA_DIR) -> str:
    path = save_test_data(ORDER_DETAILS_FILE, order.to_dict(), data_dir)
    logger.info(f"Order details saved to {path}")
    return path


def get_timestamp() -> str:
    """Filesystem-safe timestamp, e.g. 2025-01-31T10-15-00."""
    return datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
