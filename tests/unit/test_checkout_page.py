# tests/unit/test_checkout_page.py

from dataclasses import replace
from unittest.mock import MagicMock, call

import pytest

from demoshop_e2e.config.config import WAIT_FOR_CHECKOUT_STEP, WAIT_FOR_ORDER_COMPLETED
from demoshop_e2e.exceptions import PageAssertionError
from demoshop_e2e.models import Address
from demoshop_e2e.page_objects.checkout_page import NEW_ADDRESS_OPTION, CheckoutPage
from tests.unit.fakes import FakeDriver, FakeElement

loc = CheckoutPage.locators


# --- Pytest Fixtures ---

@pytest.fixture
def driver():
    return FakeDriver(current_url="https://shop.test/onepagecheckout")


@pytest.fixture
def checkout_page(driver):
    return CheckoutPage(driver, base_url="https://shop.test", timeout=0.2)


@pytest.fixture
def address():
    return Address(first_name="John", last_name="Doe", email="john_1@example.com", country="United States",
                   city="New York", address1="123 Main Street", zip_code="10001", phone="2125551234")


@pytest.fixture
def mock_select(mocker):
    # Select() insists on a real <select>; patch it where the checkout page uses it
    select_cls = mocker.patch("demoshop_e2e.page_objects.checkout_page.Select")
    return select_cls.return_value


# --- Address forms ---

def test_fill_billing_address_fills_required_fields_only(mocker, checkout_page, address, mock_select):
    # Arrange
    fill = mocker.patch.object(checkout_page, "fill")
    mocker.patch.object(checkout_page, "wait_until_visible")
    mock_select.first_selected_option.text = "United States"

    # Act
    checkout_page.fill_billing_address(address)

    # Assert: company and address2 are empty, so their fields are left alone
    assert fill.call_args_list == [
        call(loc.BILLING_FIRST_NAME, "John"),
        call(loc.BILLING_LAST_NAME, "Doe"),
        call(loc.BILLING_EMAIL, "john_1@example.com"),
        call(loc.BILLING_CITY, "New York"),
        call(loc.BILLING_ADDRESS1, "123 Main Street"),
        call(loc.BILLING_ZIP, "10001"),
        call(loc.BILLING_PHONE, "2125551234"),
    ]
    mock_select.select_by_visible_text.assert_not_called()


def test_fill_shipping_address_includes_optional_fields(mocker, checkout_page, address, mock_select):
    fill = mocker.patch.object(checkout_page, "fill")
    mocker.patch.object(checkout_page, "wait_until_visible")
    mock_select.first_selected_option.text = "United States"

    checkout_page.fill_shipping_address(replace(address, company="Test Company", address2="Apt 4B"))

    fill.assert_any_call(loc.SHIPPING_COMPANY, "Test Company")
    fill.assert_any_call(loc.SHIPPING_ADDRESS2, "Apt 4B")


def test_saved_address_dropdown_switches_to_new_address(mocker, driver, checkout_page, address, mock_select):
    # Arrange: a returning customer sees the saved-address dropdown
    driver.set(loc.BILLING_ADDRESS_SELECT, FakeElement(tag_name="select"))
    select_by_text = mocker.patch.object(checkout_page, "select_by_text")
    mocker.patch.object(checkout_page, "fill")
    mocker.patch.object(checkout_page, "wait_until_visible")
    mock_select.first_selected_option.text = "United States"

    # Act
    checkout_page.fill_billing_address(address)

    # Assert
    select_by_text.assert_called_once_with(loc.BILLING_ADDRESS_SELECT, NEW_ADDRESS_OPTION)


def test_changing_country_waits_for_state_list_to_reload(mocker, driver, checkout_page, mock_select):
    # Arrange
    old_option = FakeElement("Other (Non US)")
    driver.set(loc.BILLING_STATE_OPTIONS, old_option)
    driver.set(loc.BILLING_COUNTRY, FakeElement(tag_name="select"))
    mock_select.first_selected_option.text = "Select country"
    wait_until_stale = mocker.patch.object(checkout_page, "wait_until_stale")
    wait_until_not_present = mocker.patch.object(checkout_page, "wait_until_not_present")

    # Act
    checkout_page._select_country(loc.BILLING_COUNTRY, loc.BILLING_STATE_OPTIONS, loc.BILLING_STATES_LOADING, "Germany")

    # Assert
    mock_select.select_by_visible_text.assert_called_once_with("Germany")
    wait_until_stale.assert_called_once_with(old_option)
    wait_until_not_present.assert_called_once_with(loc.BILLING_STATES_LOADING)


def test_ship_to_same_address_collapses_shipping_form(driver, checkout_page):
    # Arrange
    driver.set(loc.SHIP_TO_SAME_ADDRESS, FakeElement(tag_name="input", attributes={"type": "checkbox"},
                                                     on_click=lambda: driver.remove(loc.SHIPPING_FIRST_NAME)))
    driver.set(loc.SHIPPING_FIRST_NAME, FakeElement(tag_name="input"))

    # Act
    checkout_page.check_ship_to_same_address()

    # Assert
    assert checkout_page.is_checked(loc.SHIP_TO_SAME_ADDRESS)
    assert not checkout_page.element_exists(loc.SHIPPING_FIRST_NAME)


def test_ship_to_same_address_reads_collapsed_checkbox_without_waiting(driver, checkout_page):
    # Arrange: billing step already collapsed, box hidden but ticked
    checkbox = FakeElement(tag_name="input", attributes={"type": "checkbox"}, displayed=False, selected=True)
    driver.set(loc.SHIP_TO_SAME_ADDRESS, checkbox)

    # Act
    checkout_page.check_ship_to_same_address()

    # Assert
    assert checkbox.clicks == 0
    assert checkout_page.is_checked(loc.SHIP_TO_SAME_ADDRESS) is True


def test_ship_to_same_address_leaves_hidden_unticked_checkbox_alone(driver, checkout_page):
    checkbox = FakeElement(tag_name="input", attributes={"type": "checkbox"}, displayed=False)
    driver.set(loc.SHIP_TO_SAME_ADDRESS, checkbox)

    checkout_page.check_ship_to_same_address()

    assert checkbox.clicks == 0


def test_ship_to_same_address_absent_is_noop(mocker, checkout_page):
    click = mocker.patch.object(checkout_page, "click")

    checkout_page.check_ship_to_same_address()

    click.assert_not_called()


# --- Step transitions ---

@pytest.mark.parametrize("method, button, next_control, timeout", [
    ("continue_billing_address", loc.BILLING_CONTINUE, loc.SHIPPING_CONTINUE, WAIT_FOR_CHECKOUT_STEP),
    ("continue_shipping_address", loc.SHIPPING_CONTINUE, loc.SHIPPING_METHOD_CONTINUE, WAIT_FOR_CHECKOUT_STEP),
    ("continue_shipping_method", loc.SHIPPING_METHOD_CONTINUE, loc.PAYMENT_METHOD_CONTINUE, WAIT_FOR_CHECKOUT_STEP),
    ("continue_payment_method", loc.PAYMENT_METHOD_CONTINUE, loc.PAYMENT_INFO_CONTINUE, WAIT_FOR_CHECKOUT_STEP),
    ("continue_payment_info", loc.PAYMENT_INFO_CONTINUE, loc.CONFIRM_ORDER_BUTTON, WAIT_FOR_CHECKOUT_STEP),
    ("confirm_order", loc.CONFIRM_ORDER_BUTTON, loc.ORDER_COMPLETED_TITLE, WAIT_FOR_ORDER_COMPLETED),
])
def test_continue_waits_for_next_step_controls(mocker, checkout_page, method, button, next_control, timeout):
    # Arrange
    click = mocker.patch.object(checkout_page, "click")
    wait_until_visible = mocker.patch.object(checkout_page, "wait_until_visible")

    # Act
    getattr(checkout_page, method)()

    # Assert
    click.assert_called_once_with(button)
    wait_until_visible.assert_called_once_with(next_control, timeout=timeout)


def test_select_shipping_method(driver, checkout_page):
    ground = FakeElement(tag_name="input", attributes={"type": "radio"}, selected=True)
    next_day = FakeElement(tag_name="input", attributes={"type": "radio"})
    driver.set(loc.SHIPPING_METHOD_OPTIONS, ground, next_day)

    checkout_page.select_shipping_method(1)

    assert next_day.clicks == 1
    with pytest.raises(IndexError):
        checkout_page.select_shipping_method(2)


def test_select_shipping_method_without_options_is_noop(checkout_page):
    checkout_page.select_shipping_method(0)


def test_select_payment_method_skips_already_selected(driver, checkout_page):
    cod = FakeElement(tag_name="input", attributes={"type": "radio"}, selected=True)
    driver.set(loc.PAYMENT_METHOD_OPTIONS, cod)

    checkout_page.select_payment_method(0)

    assert cod.clicks == 0


# --- Order completed ---

def test_order_confirmation_is_read_from_completed_page(driver, checkout_page):
    driver.set(loc.ORDER_COMPLETED_TITLE, FakeElement("Your order has been successfully processed!"))
    driver.set(loc.ORDER_NUMBER, FakeElement("Order number: 1876543"))

    checkout_page.verify_order_completion()
    confirmation = checkout_page.get_order_confirmation()

    assert confirmation.order_number == "1876543"
    assert confirmation.message == "Your order has been successfully processed!"


def test_verify_order_completion_with_wrong_title(driver, checkout_page):
    driver.set(loc.ORDER_COMPLETED_TITLE, FakeElement("Checkout"))

    with pytest.raises(PageAssertionError):
        checkout_page.verify_order_completion()


def test_complete_checkout_delegates_to_checkout_flow(mocker, checkout_page, address):
    # Arrange
    flow_cls = mocker.patch("demoshop_e2e.flows.checkout_flow.CheckoutFlow")
    flow_cls.return_value.run.return_value = MagicMock(order_number="1")

    # Act
    result = checkout_page.complete_checkout(address)

    # Assert
    flow_cls.assert_called_once_with(checkout_page, address, shipping_address=None, same_address=True)
    assert result.order_number == "1"
