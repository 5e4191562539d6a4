"""
String constants returned by the API for statuses and line types.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "OrderLineStatus",
    "OrderLineType",
    "OrderStatus",
]


class OrderStatus(str, Enum):
    CREATED = "created"
    PAID = "paid"
    AUTHORIZED = "authorized"
    CANCELED = "canceled"
    REFUNDED = "refunded"
    SHIPPING = "shipping"
    COMPLETED = "completed"
    VOID = "void"


class OrderLineStatus(str, Enum):
    CREATED = "created"
    PAID = "paid"
    AUTHORIZED = "authorized"
    CANCELED = "canceled"
    REFUNDED = "refunded"
    SHIPPING = "shipping"
    COMPLETED = "completed"


class OrderLineType(str, Enum):
    PHYSICAL = "physical"
    DISCOUNT = "discount"
    DIGITAL = "digital"
    SHIPPING_FEE = "shipping_fee"
    STORE_CREDIT = "store_credit"
    GIFT_CARD = "gift_card"
    SURCHARGE = "surcharge"
