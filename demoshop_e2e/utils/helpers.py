# demoshop_e2e/utils/helpers.py

import logging
import os
import random
import re
import time
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Sequence, Tuple, Type, TypeVar

from demoshop_e2e.config.config import RETRY_ATTEMPTS, RETRY_DELAY

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def parse_currency(text: str) -> Decimal:
    """'$1,010.00' -> Decimal('1010.00')"""
    cleaned = re.sub(r"[^0-9.]", "", text or "")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Not a currency amount: {text!r}") from None


def format_currency(amount, symbol: str = "$") -> str:
    return f"{symbol}{Decimal(amount):.2f}"


def retry(fn: Callable[[], T], max_retries: int = RETRY_ATTEMPTS, delay: float = RETRY_DELAY,
          exceptions: Tuple[Type[BaseException], ...] = (Exception,)) -> T:
    """Calls `fn` until it succeeds, sleeping delay * 2**attempt between attempts.

    Opt-in only: the page objects and journeys never retry on their own.
    The last exception is re-raised once `max_retries` attempts have failed.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")
    for attempt in range(max_retries):
        try:
            return fn()
        except exceptions as e:
            if attempt == max_retries - 1:
                raise
            backoff = delay * (2 ** attempt)
            logger.warning(f"Attempt {attempt + 1}/{max_retries} failed ({e}); retrying in {backoff}s")
            time.sleep(backoff)


def random_element(items: Sequence[T]) -> T:
    if not items:
        raise IndexError("Cannot pick from an empty sequence")
    return random.choice(items)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def is_valid_phone(phone: str) -> bool:
    """10 to 15 digits once formatting characters are removed."""
    digits = re.sub(r"[^0-9]", "", phone or "")
    return 10 <= len(digits) <= 15


def get_current_date(fmt: str = "%Y-%m-%d") -> str:
    return datetime.now().strftime(fmt)


def ensure_directory(path: str) -> str:
    os.makedirs(path, exist_ok=True)
    return path


def cleanup_old_files(directory: str, max_age_days: float = 7) -> int:
    """Deletes files older than `max_age_days` from `directory`. Returns how many were removed."""
    if not os.path.isdir(directory):
        return 0

    cutoff = time.time() - max_age_days * 24 * 60 * 60
    removed = 0
    for entry in os.scandir(directory):
        if entry.is_file() and entry.stat().st_mtime < cutoff:
            os.remove(entry.path)
            removed += 1
    if removed:
        logger.info(f"Removed {removed} old file(s) from {directory}")
    return removed
