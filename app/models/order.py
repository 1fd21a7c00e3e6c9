# app/models/order.py
import uuid
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field

from app.models.base import TimestampedModel

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered", "cancelled")
PAYMENT_STATUSES = ("pending", "paid", "failed", "refunded")
TRANSACTION_STATUSES = ("pending", "completed", "failed", "refunded")


class Order(TimestampedModel, table=True):
    """
    Customer order.

    Totals are frozen at checkout:
      total = subtotal + tax + shipping
    """

    __tablename__ = "orders"

    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)

    order_number: str = Field(
        max_length=50,
        unique=True,
        index=True,
        description="Human-facing order reference",
    )

    # pending | processing | shipped | delivered | cancelled
    status: str = Field(default="pending", index=True)

    subtotal: float = Field(default=0, ge=0)
    tax: float = Field(default=0, ge=0)
    shipping: float = Field(default=0, ge=0)
    total: float = Field(default=0, ge=0)

    # pending | paid | failed | refunded
    payment_status: str = Field(default="pending", index=True)

    shipping_address_id: uuid.UUID | None = Field(
        default=None, foreign_key="addresses.id"
    )
    billing_address_id: uuid.UUID | None = Field(
        default=None, foreign_key="addresses.id"
    )


class OrderItem(TimestampedModel, table=True):
    """Line item inside an order (price is the unit price at checkout)."""

    __tablename__ = "order_items"

    order_id: uuid.UUID = Field(foreign_key="orders.id", index=True)
    product_id: uuid.UUID = Field(foreign_key="products.id", index=True)

    quantity: int = Field(gt=0)
    price: float = Field(ge=0)
    total: float = Field(ge=0)


class Payment(TimestampedModel, table=True):
    """
    Payment attempt for an order.

    provider_response keeps the raw payload returned by the payment
    provider for later reconciliation.
    """

    __tablename__ = "payments"

    order_id: uuid.UUID = Field(foreign_key="orders.id", index=True)

    # card | paypal | ...
    payment_method: str

    transaction_id: str | None = Field(default=None, unique=True, index=True)

    amount: float = Field(ge=0)

    # pending | completed | failed | refunded
    status: str = Field(default="pending", index=True)

    provider_response: dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
    )
