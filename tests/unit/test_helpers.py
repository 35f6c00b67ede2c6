# tests/unit/test_helpers.py

import os
import time
from decimal import Decimal

import pytest

from demoshop_e2e.utils import helpers


@pytest.mark.parametrize("text, expected", [
    ("$1,010.00", Decimal("1010.00")),
    ("24.00", Decimal("24.00")),
    (" 10.5 ", Decimal("10.5")),
])
def test_parse_currency(text, expected):
    assert helpers.parse_currency(text) == expected


@pytest.mark.parametrize("text", ["", "free", None])
def test_parse_currency_rejects_non_amounts(text):
    with pytest.raises(ValueError):
        helpers.parse_currency(text)


def test_format_currency():
    assert helpers.format_currency(Decimal("48")) == "$48.00"
    assert helpers.format_currency("3.5", symbol="EUR ") == "EUR 3.50"


def test_retry_backs_off_exponentially(mocker):
    # Arrange
    sleep = mocker.patch("demoshop_e2e.utils.helpers.time.sleep")
    fn = mocker.Mock(side_effect=[ConnectionError("boom"), ConnectionError("boom"), "ok"])

    # Act
    result = helpers.retry(fn, max_retries=3, delay=1.0)

    # Assert
    assert result == "ok"
    assert fn.call_count == 3
    assert [c.args[0] for c in sleep.call_args_list] == [1.0, 2.0]


def test_retry_reraises_last_error(mocker):
    mocker.patch("demoshop_e2e.utils.helpers.time.sleep")
    fn = mocker.Mock(side_effect=[ValueError("first"), ValueError("last")])

    with pytest.raises(ValueError, match="last"):
        helpers.retry(fn, max_retries=2, delay=0)


def test_retry_only_catches_listed_exceptions(mocker):
    mocker.patch("demoshop_e2e.utils.helpers.time.sleep")
    fn = mocker.Mock(side_effect=KeyError("not retried"))

    with pytest.raises(KeyError):
        helpers.retry(fn, exceptions=(ConnectionError,))
    assert fn.call_count == 1


def test_retry_needs_at_least_one_attempt():
    with pytest.raises(ValueError):
        helpers.retry(lambda: None, max_retries=0)


def test_random_element():
    assert helpers.random_element(["only"]) == "only"
    with pytest.raises(IndexError):
        helpers.random_element([])


@pytest.mark.parametrize("email, valid", [
    ("testuser_1@example.com", True),
    ("no-at-sign.example.com", False),
    ("spaces in@example.com", False),
    ("", False),
])
def test_is_valid_email(email, valid):
    assert helpers.is_valid_email(email) is valid


@pytest.mark.parametrize("phone, valid", [
    ("2125551234", True),
    ("+1 (212) 555-1234", True),
    ("555-1234", False),
])
def test_is_valid_phone(phone, valid):
    assert helpers.is_valid_phone(phone) is valid


def test_cleanup_old_files(tmp_path):
    # Arrange
    old_file = tmp_path / "old.png"
    new_file = tmp_path / "new.png"
    old_file.write_bytes(b"x")
    new_file.write_bytes(b"x")
    ten_days_ago = time.time() - 10 * 24 * 60 * 60
    os.utime(old_file, (ten_days_ago, ten_days_ago))

    # Act
    removed = helpers.cleanup_old_files(str(tmp_path), max_age_days=7)

    # Assert
    assert removed == 1
    assert not old_file.exists()
    assert new_file.exists()


def test_cleanup_missing_directory(tmp_path):
    assert helpers.cleanup_old_files(str(tmp_path / "missing")) == 0


def test_ensure_directory(tmp_path):
    path = helpers.ensure_directory(str(tmp_path / "a" / "b"))
    assert os.path.isdir(path)


def test_get_current_date_format():
    assert len(helpers.get_current_date()) == 10
    assert helpers.get_current_date("%Y") == time.strftime("%Y")
