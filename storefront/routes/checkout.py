"""Checkout API routes for the storefront"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..core.context import get_checkout, get_notifier
from ..models.checkout import CheckoutForm, CheckoutResponse
from ..models.common import to_messages
from ..services.checkout import CheckoutService
from ..services.notifications import Notifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.get("", response_model=CheckoutResponse)
async def get_checkout_status(
    checkout: CheckoutService = Depends(get_checkout),
    notifier: Notifier = Depends(get_notifier),
):
    """Current checkout state and, once confirmed, the order"""
    return CheckoutResponse(
        state=checkout.state,
        order=checkout.order,
        messages=to_messages(notifier.drain()),
    )


@router.post("", response_model=CheckoutResponse)
async def place_order(
    form: CheckoutForm,
    checkout: CheckoutService = Depends(get_checkout),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Place an order for the current cart.

    The cart stays populated until /api/checkout/finish is called.
    """
    order = await checkout.submit(form)
    if order is None:
        messages = notifier.drain()
        raise HTTPException(
            status_code=400,
            detail=messages[-1].message if messages else "Checkout failed",
        )

    return CheckoutResponse(
        state=checkout.state,
        order=order,
        messages=to_messages(notifier.drain()),
    )


@router.post("/finish", response_model=CheckoutResponse)
async def finish_order(
    checkout: CheckoutService = Depends(get_checkout),
    notifier: Notifier = Depends(get_notifier),
):
    """Acknowledge the order confirmation and empty the cart"""
    if checkout.order:
        logger.info(f"Order {checkout.order.order_number} acknowledged")
    checkout.finish_order()
    return CheckoutResponse(
        state=checkout.state,
        messages=to_messages(notifier.drain()),
    )
