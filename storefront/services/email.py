"""
Order confirmation email

Simulated delivery: the message is logged and always reported as sent.
"""

import logging

from ..models.checkout import OrderItem
from .notifications import Notifier

logger = logging.getLogger(__name__)


class EmailService:
    """Sends order confirmations to customers"""

    def __init__(self, notifier: Notifier):
        self.notifier = notifier
        self.sent: list[dict] = []

    async def notify_order_confirmation(
        self,
        email: str,
        order_number: str,
        items: list[OrderItem],
        total: float,
    ) -> bool:
        """
        Send an order confirmation.

        Args:
            email: Recipient address
            order_number: Order to confirm
            items: Ordered items with name, quantity and unit price
            total: Order total

        Returns:
            True once the message is handed off
        """
        logger.info(f"Sending confirmation email to {email} for order {order_number}")
        for item in items:
            logger.info(f"  {item.quantity}x {item.name} @ ${item.price:.2f}")
        logger.info(f"Order total: ${total:.2f}")

        self.sent.append({
            "email": email,
            "order_number": order_number,
            "items": [item.model_dump() for item in items],
            "total": total,
        })
        self.notifier.success("Order confirmation email sent")
        return True
