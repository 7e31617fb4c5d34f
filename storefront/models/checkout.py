"""Checkout models for the storefront"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .common import Message


class CheckoutState(str, Enum):
    FORM = "form"
    VALIDATING = "validating"
    PROCESSING = "processing"
    CONFIRMED = "confirmed"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    BANK_TRANSFER = "bank_transfer"
    PAYPAL = "paypal"
    CASH_ON_DELIVERY = "cash_on_delivery"


class ShippingAddress(BaseModel):
    """Shipping address for order"""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "US"


class PaymentDetails(BaseModel):
    """Payment details for checkout"""
    method: PaymentMethod = PaymentMethod.CREDIT_CARD
    # Credit card
    card_name: str = ""
    card_number: str = ""
    expiry_month: str = ""
    expiry_year: str = ""
    cvv: str = ""
    # Bank transfer
    bank_name: str = ""
    account_number: str = ""
    routing_number: str = ""


class CheckoutForm(BaseModel):
    """Everything the customer enters on the checkout page"""
    shipping: ShippingAddress = Field(default_factory=ShippingAddress)
    payment: PaymentDetails = Field(default_factory=PaymentDetails)


class OrderItem(BaseModel):
    """Item in an order confirmation"""
    product_id: str
    name: str
    quantity: int
    price: float


class Order(BaseModel):
    """Completed order. Shown once, never stored."""
    order_number: str
    items: list[OrderItem]
    total: float
    shipping: ShippingAddress
    payment_method: PaymentMethod
    payment_last_four: Optional[str] = None
    created_at: datetime


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    state: CheckoutState
    order: Optional[Order] = None
    messages: list[Message] = []
