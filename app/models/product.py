# app/models/product.py
import uuid

from sqlmodel import SQLModel, Field

from app.models.base import TimestampedModel


class Category(TimestampedModel, table=True):
    """
    Product category. Categories nest through parent_id.
    """

    __tablename__ = "categories"

    name: str = Field(max_length=100)

    slug: str = Field(
        max_length=255,
        unique=True,
        index=True,
        description="URL-friendly identifier (unique)",
    )

    description: str | None = None

    parent_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="categories.id",
        index=True,
    )


class Product(TimestampedModel, table=True):
    """
    Catalog entry.

    Prices are stored as plain floats in the shop currency;
    compare_at_price is the struck-through "was" price.
    """

    __tablename__ = "products"

    name: str = Field(max_length=255, index=True)

    slug: str = Field(
        max_length=255,
        unique=True,
        index=True,
        description="URL-friendly identifier (unique)",
    )

    description: str | None = None

    price: float = Field(ge=0, description="Unit price")
    compare_at_price: float | None = Field(default=None, ge=0)
    cost: float | None = Field(default=None, ge=0)

    sku: str | None = Field(
        default=None,
        max_length=100,
        unique=True,
        index=True,
    )

    stock_quantity: int = Field(default=0, ge=0)

    is_active: bool = Field(
        default=True,
        index=True,
        description="Whether this product is visible on the storefront",
    )


class ProductImage(TimestampedModel, table=True):
    """Gallery image for a product."""

    __tablename__ = "product_images"

    product_id: uuid.UUID = Field(foreign_key="products.id", index=True)
    url: str
    alt_text: str | None = None
    position: int = Field(default=0, ge=0)
    is_primary: bool = Field(default=False)


class ProductCategory(SQLModel, table=True):
    """Join table between products and categories."""

    __tablename__ = "product_categories"

    product_id: uuid.UUID = Field(foreign_key="products.id", primary_key=True)
    category_id: uuid.UUID = Field(foreign_key="categories.id", primary_key=True)
