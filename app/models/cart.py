# app/models/cart.py
import uuid

from sqlmodel import Field

from app.models.base import TimestampedModel


class Cart(TimestampedModel, table=True):
    """
    Shopping cart.

    Either owned by a user (user_id) or, for guests, keyed by an
    opaque session_id.
    """

    __tablename__ = "carts"

    user_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="users.id",
        index=True,
    )

    session_id: str | None = Field(default=None, index=True)


class CartItem(TimestampedModel, table=True):
    """Line in a cart; price_at_add snapshots the product price."""

    __tablename__ = "cart_items"

    cart_id: uuid.UUID = Field(foreign_key="carts.id", index=True)
    product_id: uuid.UUID = Field(foreign_key="products.id", index=True)

    quantity: int = Field(gt=0, description="Must be >= 1")

    price_at_add: float = Field(description="Price when added to cart")
