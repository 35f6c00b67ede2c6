# demoshop_e2e/page_objects/locators.py
#
# Semantic element name -> (By, value) for every page of the shop.
# Markup changes on the site should only ever require edits in this file.

from selenium.webdriver.common.by import By


class HomePageLocators:
    REGISTER_LINK = (By.CSS_SELECTOR, "a.ico-register")
    LOGIN_LINK = (By.CSS_SELECTOR, "a.ico-login")
    LOGOUT_LINK = (By.CSS_SELECTOR, "a.ico-logout")
    SEARCH_INPUT = (By.ID, "small-searchterms")
    SEARCH_BUTTON = (By.XPATH, "//input[@type='submit' and @value='Search']")
    SHOPPING_CART_LINK = (By.XPATH, "//a[@class='ico-cart']//span[@class='cart-label']")
    CART_QUANTITY = (By.XPATH, "//a[@class='ico-cart']//span[@class='cart-qty']")
    ACCOUNT_LINK = (By.CSS_SELECTOR, ".header-links a.account")
    FEATURED_PRODUCTS = (By.CSS_SELECTOR, ".product-item")
    ADD_TO_CART_IN_ITEM = (By.CSS_SELECTOR, "input[value='Add to cart']")

    # Top-menu category links by URL slug
    CATEGORIES = {
        "books": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/books')]"),
        "computers": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/computers')]"),
        "electronics": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/electronics')]"),
        "apparel-shoes": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/apparel-shoes')]"),
        "digital-downloads": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/digital-downloads')]"),
        "jewelry": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/jewelry')]"),
        "gift-cards": (By.XPATH, "//ul[contains(@class, 'top-menu')]//a[contains(@href, '/gift-cards')]"),
    }


class RegistrationPageLocators:
    GENDER_MALE = (By.ID, "gender-male")
    GENDER_FEMALE = (By.ID, "gender-female")
    FIRST_NAME_INPUT = (By.ID, "FirstName")
    LAST_NAME_INPUT = (By.ID, "LastName")
    EMAIL_INPUT = (By.ID, "Email")
    PASSWORD_INPUT = (By.ID, "Password")
    CONFIRM_PASSWORD_INPUT = (By.ID, "ConfirmPassword")
    REGISTER_BUTTON = (By.ID, "register-button")
    RESULT_MESSAGE = (By.CSS_SELECTOR, "div.result")
    CONTINUE_BUTTON = (By.XPATH, "//input[@value='Continue']")
    ERROR_SUMMARY = (By.CSS_SELECTOR, ".validation-summary-errors")


def field_error_locator(field_name: str) -> tuple:
    """Inline validation message for a form field, e.g. 'Email'."""
    return (By.XPATH, f"//span[@data-valmsg-for='{field_name}']")


class LoginPageLocators:
    EMAIL_INPUT = (By.ID, "Email")
    PASSWORD_INPUT = (By.ID, "Password")
    REMEMBER_ME_CHECKBOX = (By.ID, "RememberMe")
    LOGIN_BUTTON = (By.XPATH, "//input[@value='Log in']")
    ERROR_SUMMARY = (By.CSS_SELECTOR, ".validation-summary-errors")


class ProductPageLocators:
    PRODUCT_ITEMS = (By.CSS_SELECTOR, ".product-item")

    # Relative to a product item
    PRODUCT_TITLE_RELATIVE = (By.CSS_SELECTOR, ".product-title a")
    PRODUCT_PRICE_RELATIVE = (By.CSS_SELECTOR, ".actual-price")
    ADD_TO_CART_RELATIVE = (By.CSS_SELECTOR, "input[value='Add to cart']")

    NOTIFICATION_BAR = (By.ID, "bar-notification")
    NOTIFICATION_TEXT = (By.CSS_SELECTOR, "#bar-notification .content")
    NOTIFICATION_CLOSE = (By.CSS_SELECTOR, "#bar-notification .close")

    # Product detail page
    DETAIL_NAME = (By.CSS_SELECTOR, ".product-name h1")
    DETAIL_PRICE = (By.CSS_SELECTOR, ".product-price span")
    DETAIL_QUANTITY_INPUT = (By.CSS_SELECTOR, ".qty-input")
    DETAIL_ADD_TO_CART = (By.CSS_SELECTOR, "input[id^='add-to-cart-button-']")


class CartPageLocators:
    CART_ROWS = (By.CSS_SELECTOR, ".cart-item-row")

    # Relative to a cart row
    NAME_RELATIVE = (By.CSS_SELECTOR, ".product-name")
    UNIT_PRICE_RELATIVE = (By.CSS_SELECTOR, ".product-unit-price")
    QUANTITY_RELATIVE = (By.CSS_SELECTOR, ".qty-input")
    SUBTOTAL_RELATIVE = (By.CSS_SELECTOR, ".product-subtotal")
    REMOVE_CHECKBOX_RELATIVE = (By.CSS_SELECTOR, ".remove-from-cart input[type='checkbox']")

    UPDATE_CART_BUTTON = (By.NAME, "updatecart")
    CONTINUE_SHOPPING_BUTTON = (By.NAME, "continueshopping")
    CHECKOUT_BUTTON = (By.ID, "checkout")
    ORDER_SUMMARY_CONTENT = (By.CSS_SELECTOR, ".order-summary-content")
    ORDER_TOTAL_AMOUNT = (By.CSS_SELECTOR, ".order-total .product-price")
    TERMS_OF_SERVICE_CHECKBOX = (By.ID, "termsofservice")


class CheckoutPageLocators:
    # Billing address
    BILLING_ADDRESS_SELECT = (By.ID, "billing-address-select")
    BILLING_FIRST_NAME = (By.ID, "BillingNewAddress_FirstName")
    BILLING_LAST_NAME = (By.ID, "BillingNewAddress_LastName")
    BILLING_EMAIL = (By.ID, "BillingNewAddress_Email")
    BILLING_COMPANY = (By.ID, "BillingNewAddress_Company")
    BILLING_COUNTRY = (By.ID, "BillingNewAddress_CountryId")
    BILLING_STATE_OPTIONS = (By.CSS_SELECTOR, "#BillingNewAddress_StateProvinceId option")
    BILLING_STATES_LOADING = (By.ID, "states-loading-progress")
    BILLING_CITY = (By.ID, "BillingNewAddress_City")
    BILLING_ADDRESS1 = (By.ID, "BillingNewAddress_Address1")
    BILLING_ADDRESS2 = (By.ID, "BillingNewAddress_Address2")
    BILLING_ZIP = (By.ID, "BillingNewAddress_ZipPostalCode")
    BILLING_PHONE = (By.ID, "BillingNewAddress_PhoneNumber")
    BILLING_CONTINUE = (By.XPATH, "//input[@onclick='Billing.save()']")

    # Shipping address
    SHIPPING_ADDRESS_SELECT = (By.ID, "shipping-address-select")
    SHIP_TO_SAME_ADDRESS = (By.ID, "ShipToSameAddress")
    SHIPPING_FIRST_NAME = (By.ID, "ShippingNewAddress_FirstName")
    SHIPPING_LAST_NAME = (By.ID, "ShippingNewAddress_LastName")
    SHIPPING_EMAIL = (By.ID, "ShippingNewAddress_Email")
    SHIPPING_COMPANY = (By.ID, "ShippingNewAddress_Company")
    SHIPPING_COUNTRY = (By.ID, "ShippingNewAddress_CountryId")
    SHIPPING_STATE_OPTIONS = (By.CSS_SELECTOR, "#ShippingNewAddress_StateProvinceId option")
    SHIPPING_STATES_LOADING = (By.ID, "shipping-states-loading-progress")
    SHIPPING_CITY = (By.ID, "ShippingNewAddress_City")
    SHIPPING_ADDRESS1 = (By.ID, "ShippingNewAddress_Address1")
    SHIPPING_ADDRESS2 = (By.ID, "ShippingNewAddress_Address2")
    SHIPPING_ZIP = (By.ID, "ShippingNewAddress_ZipPostalCode")
    SHIPPING_PHONE = (By.ID, "ShippingNewAddress_PhoneNumber")
    SHIPPING_CONTINUE = (By.XPATH, "//input[@onclick='Shipping.save()']")

    # Shipping method
    SHIPPING_METHOD_OPTIONS = (By.NAME, "shippingoption")
    SHIPPING_METHOD_CONTINUE = (By.XPATH, "//input[@onclick='ShippingMethod.save()']")

    # Payment method
    PAYMENT_METHOD_OPTIONS = (By.NAME, "paymentmethod")
    PAYMENT_METHOD_CONTINUE = (By.XPATH, "//input[@onclick='PaymentMethod.save()']")

    # Payment information
    PAYMENT_INFO_CONTINUE = (By.XPATH, "//input[@onclick='PaymentInfo.save()']")

    # Confirm order
    CONFIRM_ORDER_BUTTON = (By.XPATH, "//input[@onclick='ConfirmOrder.save()']")

    # Order completed
    ORDER_COMPLETED_TITLE = (By.CSS_SELECTOR, ".order-completed .title")
    ORDER_NUMBER = (By.CSS_SELECTOR, ".order-completed .details li")
    CONTINUE_AFTER_ORDER = (By.CSS_SELECTOR, ".order-completed input[value='Continue']")
