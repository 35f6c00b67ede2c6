# demoshop_e2e/flows/context.py

from dataclasses import dataclass, field
from typing import List, Optional

from demoshop_e2e.config.config import TEST_DATA_DIR
from demoshop_e2e.models import CartItem, Credentials, OrderConfirmation
from demoshop_e2e.utils import data_manager

from .checkout_flow import CheckoutFlow


@dataclass
class JourneyContext:
    """State carried from one journey step to the next.

    Passed explicitly to every step instead of living in module globals.
    """

    credentials: Optional[Credentials] = None
    cart_items: List[CartItem] = field(default_factory=list)
    checkout: Optional[CheckoutFlow] = None
    order: Optional[OrderConfirmation] = None
    data_dir: str = TEST_DATA_DIR

    def require_credentials(self) -> Credentials:
        """Credentials of this run, or those persisted by an earlier registration run.

        Raises DataFileError when no registration has happened yet.
        """
        if self.credentials is None:
            self.credentials = data_manager.load_credentials(self.data_dir)
        return self.credentials

    def require_checkout(self) -> CheckoutFlow:
        if self.checkout is None:
            raise RuntimeError("Checkout has not been started in this journey")
        return self.checkout
