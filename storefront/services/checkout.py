"""
Checkout

Turns the current cart into an order:
1. Check the cart against live catalog stock
2. Validate shipping and payment fields
3. Simulate payment processing
4. Decrement stock and send the confirmation email

The cart is left in place until the customer acknowledges the
confirmation with finish_order().
"""

import asyncio
import logging
import re
import secrets
import time
from datetime import datetime
from typing import Optional

from ..database.carts import CartStore
from ..database.products import CatalogStore
from ..models.checkout import (
    CheckoutForm,
    CheckoutState,
    Order,
    OrderItem,
    PaymentMethod,
)
from .email import EmailService
from .notifications import Notifier

logger = logging.getLogger(__name__)

CARD_NUMBER_RE = re.compile(r"^[0-9]{13,19}$")
CVV_RE = re.compile(r"^[0-9]{3,4}$")
_BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _base36(number: int) -> str:
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits)) or "0"


def generate_order_number() -> str:
    """Human-readable order number, e.g. ORD-LZ3K9Q2A-7F1C09B2"""
    millis = int(time.time() * 1000)
    return f"ORD-{_base36(millis)}-{secrets.token_hex(4).upper()}"


def validate_checkout_form(form: CheckoutForm) -> Optional[str]:
    """
    Check required shipping and payment fields.

    Returns:
        An error message for the first problem found, or None if valid
    """
    shipping = form.shipping
    if not (shipping.first_name and shipping.last_name and shipping.email and shipping.address):
        return "Please fill in all required fields"

    payment = form.payment
    if payment.method == PaymentMethod.CREDIT_CARD:
        if not all([
            payment.card_name,
            payment.card_number,
            payment.expiry_month,
            payment.expiry_year,
            payment.cvv,
        ]):
            return "Please fill in all payment details"

        if not CARD_NUMBER_RE.match(re.sub(r"\s", "", payment.card_number)):
            return "Please enter a valid card number"

        if not CVV_RE.match(payment.cvv):
            return "Please enter a valid CVV"

    elif payment.method == PaymentMethod.BANK_TRANSFER:
        if not all([payment.bank_name, payment.account_number, payment.routing_number]):
            return "Please fill in all bank details"

    return None


class CheckoutService:
    """Coordinates cart, catalog and email to place an order"""

    def __init__(
        self,
        catalog: CatalogStore,
        cart: CartStore,
        email: EmailService,
        notifier: Notifier,
        processing_delay: float = 1.5,
    ):
        self.catalog = catalog
        self.cart = cart
        self.email = email
        self.notifier = notifier
        self.processing_delay = processing_delay
        self.state = CheckoutState.FORM
        self.order: Optional[Order] = None

    def check_cart(self) -> bool:
        """Whether the cart can be checked out right now"""
        if not self.cart.items:
            self.notifier.warning("Your cart is empty")
            return False

        for item in self.cart.items:
            product = self.catalog.get(item.product.id)
            if product is None or product.in_stock < item.quantity:
                self.notifier.warning(
                    f"{item.product.name} is out of stock or has insufficient quantity"
                )
                return False

        return True

    async def submit(self, form: CheckoutForm) -> Optional[Order]:
        """
        Validate the form and place the order.

        Returns:
            The confirmed order, or None if checkout did not go ahead
        """
        if self.state == CheckoutState.CONFIRMED:
            logger.debug(f"Order {self.order.order_number} already confirmed")
            return self.order

        if self.state == CheckoutState.PROCESSING:
            self.notifier.warning("Your order is already being processed")
            return None

        if not self.check_cart():
            return None

        self.state = CheckoutState.VALIDATING
        error = validate_checkout_form(form)
        if error:
            self.notifier.error(error)
            self.state = CheckoutState.FORM
            return None

        self.state = CheckoutState.PROCESSING
        items = list(self.cart.items)

        try:
            # Simulated payment processing
            await asyncio.sleep(self.processing_delay)

            order_number = generate_order_number()
            order_items = [
                OrderItem(
                    product_id=item.product.id,
                    name=item.product.name,
                    quantity=item.quantity,
                    price=item.product.price,
                )
                for item in items
            ]
            total = sum(item.price * item.quantity for item in order_items)

            for item in items:
                product = self.catalog.get(item.product.id) or item.product
                self.catalog.update(product.id, {"in_stock": product.in_stock - item.quantity})

            await self.email.notify_order_confirmation(
                form.shipping.email,
                order_number,
                order_items,
                total,
            )
        except Exception as e:
            logger.exception(f"Checkout failed: {e}")
            self.notifier.error("There was an error processing your payment. Please try again.")
            self.state = CheckoutState.FORM
            return None

        payment_last_four = None
        if form.payment.method == PaymentMethod.CREDIT_CARD:
            payment_last_four = re.sub(r"\s", "", form.payment.card_number)[-4:]

        self.order = Order(
            order_number=order_number,
            items=order_items,
            total=total,
            shipping=form.shipping,
            payment_method=form.payment.method,
            payment_last_four=payment_last_four,
            created_at=datetime.utcnow(),
        )
        self.state = CheckoutState.CONFIRMED

        logger.info(f"Order {order_number} placed: ${total:.2f}, {len(order_items)} line(s)")
        self.notifier.success("Payment processed successfully!")
        return self.order

    def finish_order(self) -> None:
        """Acknowledge the confirmation: empty the cart and start over"""
        self.cart.clear_cart()
        self.order = None
        self.state = CheckoutState.FORM
