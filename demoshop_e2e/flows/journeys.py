# demoshop_e2e/flows/journeys.py

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from selenium.webdriver.remote.webdriver import WebDriver

from demoshop_e2e.models import Address, CartItem, Credentials, OrderConfirmation, OrderDetails, RegistrationData
from demoshop_e2e.page_objects.cart_page import CartPage
from demoshop_e2e.page_objects.checkout_page import CheckoutPage
from demoshop_e2e.page_objects.home_page import HomePage
from demoshop_e2e.page_objects.login_page import LoginPage
from demoshop_e2e.page_objects.product_page import ProductPage
from demoshop_e2e.page_objects.registration_page import RegistrationPage
from demoshop_e2e.utils import data_manager
from demoshop_e2e.utils.helpers import format_currency
from demoshop_e2e.utils.logging_config import JourneyLogger

from .checkout_flow import CheckoutFlow
from .context import JourneyContext


@dataclass
class ShopPages:
    """Every page object of the shop, all bound to the same browser."""

    home: HomePage
    registration: RegistrationPage
    login: LoginPage
    product: ProductPage
    cart: CartPage
    checkout: CheckoutPage

    @classmethod
    def for_driver(cls, driver: WebDriver, **page_kwargs) -> "ShopPages":
        return cls(
            home=HomePage(driver, **page_kwargs),
            registration=RegistrationPage(driver, **page_kwargs),
            login=LoginPage(driver, **page_kwargs),
            product=ProductPage(driver, **page_kwargs),
            cart=CartPage(driver, **page_kwargs),
            checkout=CheckoutPage(driver, **page_kwargs),
        )


class ShopJourney:
    """User journey steps across pages: register, log in, shop, check out.

    Each step reads what it needs from the JourneyContext and writes back what
    later steps rely on. Failures propagate unchanged.
    """

    def __init__(self, pages: ShopPages, context: JourneyContext, log: Optional[JourneyLogger] = None):
        self.pages = pages
        self.context = context
        self.log = log or JourneyLogger()

    def register_new_user(self, registration: Optional[RegistrationData] = None, persist: bool = True) -> Credentials:
        registration = registration or data_manager.get_user_registration_data(self.context.data_dir)
        self.log.info(f"Creating user with email: {registration.email}")

        self.pages.home.navigate_to_home()
        self.pages.home.click_register()
        self.pages.registration.register_user(registration)
        self.pages.registration.verify_registration_success()
        self.pages.registration.click_continue()

        self.context.credentials = registration.credentials()
        if persist:
            data_manager.save_credentials(self.context.credentials, self.context.data_dir)
        self.log.success(f"User registered: {registration.email}")
        return self.context.credentials

    def logout(self):
        self.pages.home.click_logout()
        self.pages.home.verify_logged_out()
        self.log.success("User logged out")

    def login(self, credentials: Optional[Credentials] = None, remember_me: bool = False):
        credentials = credentials or self.context.require_credentials()
        if not self.pages.home.element_exists(self.pages.home.locators.LOGIN_LINK):
            self.pages.home.navigate_to_home()
        self.pages.home.click_login()
        self.pages.login.login(credentials.email, credentials.password, remember_me=remember_me)
        self.pages.home.verify_logged_in(credentials.email)
        self.log.success(f"Logged in as {credentials.email}")

    def add_products_from_category(self, category: str = "books", count: int = 3) -> List[str]:
        """Adds the first `count` products of a category to the cart and returns their names."""
        self.pages.home.go_to_category(category)
        names = []
        for index in range(count):
            self.log.info(f"Adding product {index + 1} of {count} to cart")
            names.append(self.pages.product.get_product_name(index))
            self.pages.product.add_product_to_cart_by_index(index)
            self.pages.product.verify_product_added_notification()
        self.pages.product.close_notification_bar()
        self.log.success(f"{count} product(s) added to cart")
        return names

    def add_products_by_name(self, category: str, names: List[str]):
        self.pages.home.go_to_category(category)
        for name in names:
            self.pages.product.add_product_to_cart_by_name(name)
            self.pages.product.verify_product_added_notification()
        self.pages.product.close_notification_bar()
        self.log.success(f"Added {', '.join(names)}")

    def validate_cart(self, expected_count: Optional[int] = None) -> List[CartItem]:
        """Opens the cart, checks the line count and total, and snapshots the lines into the context."""
        self.pages.home.go_to_shopping_cart()
        if expected_count is not None:
            self.pages.cart.verify_cart_item_count(expected_count)
        items = self.pages.cart.get_all_cart_items_details()
        for index, item in enumerate(items, start=1):
            self.log.info(f"  {index}. {item.name} - {format_currency(item.unit_price)} x {item.quantity} "
                          f"= {format_currency(item.subtotal)}")
        self.pages.cart.verify_order_total()
        self.context.cart_items = items
        self.log.success(f"Cart validated with {len(items)} item(s)")
        return items

    def proceed_to_checkout(self):
        self.pages.cart.proceed_to_checkout()
        self.pages.checkout.wait_until_visible(self.pages.checkout.locators.BILLING_CONTINUE)
        self.log.success("Navigated to checkout page")

    def start_checkout(self, billing: Optional[Address] = None, shipping: Optional[Address] = None,
                       same_address: bool = True) -> CheckoutFlow:
        """Creates the checkout flow for this journey; billing email defaults to the registered email."""
        billing = billing or data_manager.get_billing_address(self.context.data_dir)
        if self.context.credentials is not None:
            billing = billing.with_email(self.context.credentials.email)
        self.context.checkout = CheckoutFlow(self.pages.checkout, billing,
                                             shipping_address=shipping, same_address=same_address)
        return self.context.checkout

    def checkout(self, billing: Optional[Address] = None, shipping: Optional[Address] = None,
                 same_address: bool = True) -> OrderConfirmation:
        flow = self.context.checkout or self.start_checkout(billing, shipping, same_address)
        self.context.order = flow.run()
        self.log.success(f"Order completed successfully with order number: {self.context.order.order_number}")
        return self.context.order

    def save_order_details(self) -> str:
        credentials = self.context.require_credentials()
        if self.context.order is None:
            raise RuntimeError("No completed order to save")
        details = OrderDetails(
            order_number=self.context.order.order_number,
            email=credentials.email,
            order_date=datetime.now().astimezone().isoformat(),
            items=list(self.context.cart_items),
        )
        return data_manager.save_order_details(details, self.context.data_dir)
