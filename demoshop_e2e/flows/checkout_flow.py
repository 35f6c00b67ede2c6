# demoshop_e2e/flows/checkout_flow.py

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional

from demoshop_e2e.exceptions import CheckoutAbortedError, CheckoutStepError
from demoshop_e2e.models import Address, OrderConfirmation

if TYPE_CHECKING:
    from demoshop_e2e.page_objects.checkout_page import CheckoutPage

logger = logging.getLogger(__name__)


class CheckoutStep(Enum):
    BILLING_ADDRESS = "billing_address"
    SHIPPING_ADDRESS = "shipping_address"
    SHIPPING_METHOD = "shipping_method"
    PAYMENT_METHOD = "payment_method"
    PAYMENT_INFO = "payment_info"
    CONFIRM_ORDER = "confirm_order"
    COMPLETED = "completed"


# The one valid order of steps; there is no branching and no going back
CHECKOUT_SEQUENCE = tuple(CheckoutStep)


class CheckoutFlow:
    """The one-page checkout as an explicit sequence of named steps.

    A single cursor (`current_step`) points at the next step to run. `advance()`
    runs it and only moves the cursor once the page has rendered the following
    step's controls. Any failure aborts the flow: the failed step and the last
    completed step are recorded, and the flow refuses to continue. Restarting
    means building a new flow from the beginning.
    """

    def __init__(self, checkout_page: "CheckoutPage", billing_address: Address,
                 shipping_address: Optional[Address] = None, same_address: bool = True,
                 shipping_method_index: int = 0, payment_method_index: int = 0):
        if not same_address and shipping_address is None:
            raise ValueError("A shipping address is required when not shipping to the billing address")
        self.page = checkout_page
        self.billing_address = billing_address
        self.shipping_address = shipping_address
        self.same_address = same_address
        self.shipping_method_index = shipping_method_index
        self.payment_method_index = payment_method_index

        self._position = 0
        self.last_completed_step: Optional[CheckoutStep] = None
        self.failed_step: Optional[CheckoutStep] = None
        self.confirmation: Optional[OrderConfirmation] = None

        self._actions: Dict[CheckoutStep, Callable[[], None]] = {
            CheckoutStep.BILLING_ADDRESS: self._billing_address,
            CheckoutStep.SHIPPING_ADDRESS: self._shipping_address,
            CheckoutStep.SHIPPING_METHOD: self._shipping_method,
            CheckoutStep.PAYMENT_METHOD: self._payment_method,
            CheckoutStep.PAYMENT_INFO: self._payment_info,
            CheckoutStep.CONFIRM_ORDER: self._confirm_order,
            CheckoutStep.COMPLETED: self._completed,
        }

    # --- State ---

    @property
    def current_step(self) -> Optional[CheckoutStep]:
        """Next step to run, or None once the order is completed."""
        if self._position >= len(CHECKOUT_SEQUENCE):
            return None
        return CHECKOUT_SEQUENCE[self._position]

    @property
    def is_finished(self) -> bool:
        return self.current_step is None

    @property
    def is_aborted(self) -> bool:
        return self.failed_step is not None

    # --- Driving ---

    def advance(self) -> CheckoutStep:
        """Runs the step under the cursor and returns it."""
        if self.is_aborted:
            raise CheckoutAbortedError(
                f"Checkout aborted at '{self.failed_step.value}'; start a new checkout to retry")
        step = self.current_step
        if step is None:
            raise CheckoutAbortedError("Checkout already completed")

        logger.info(f"Checkout step: {step.value}")
        try:
            self._actions[step]()
        except Exception as e:
            self.failed_step = step
            logger.error(f"Checkout step '{step.value}' failed: {e}")
            raise CheckoutStepError(step, self.last_completed_step) from e

        self.last_completed_step = step
        self._position += 1
        return step

    def run_until(self, step: CheckoutStep):
        """Advances up to and including `step`."""
        target = CHECKOUT_SEQUENCE.index(step)
        while self._position <= target:
            self.advance()

    def run(self) -> OrderConfirmation:
        """Runs every remaining step and returns the order confirmation."""
        self.run_until(CheckoutStep.COMPLETED)
        return self.confirmation

    # --- Step actions ---

    def _billing_address(self):
        self.page.fill_billing_address(self.billing_address)
        self.page.continue_billing_address()

    def _shipping_address(self):
        if self.same_address:
            self.page.check_ship_to_same_address()
        else:
            self.page.fill_shipping_address(self.shipping_address)
        self.page.continue_shipping_address()

    def _shipping_method(self):
        self.page.select_shipping_method(self.shipping_method_index)
        self.page.continue_shipping_method()

    def _payment_method(self):
        self.page.select_payment_method(self.payment_method_index)
        self.page.continue_payment_method()

    def _payment_info(self):
        self.page.continue_payment_info()

    def _confirm_order(self):
        self.page.confirm_order()

    def _completed(self):
        self.page.verify_order_completion()
        self.confirmation = self.page.get_order_confirmation()
        if not self.confirmation.order_number:
            raise ValueError("Order completed page shows no order number")
        logger.info(f"Order completed: {self.confirmation.order_number}")
