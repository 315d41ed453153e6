"""
Pydantic schemas for catalog products.

A product carries a name, a price in the smallest currency unit and
the quantity on hand.  On the wire the fields use the cashier app's
names (``nama``, ``harga``, ``stok``); the Python attribute names are
accepted on input as well.

Integers are limited to the signed 64-bit range the database column
can hold.  Numeric strings are coerced; booleans are rejected.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProductIn(BaseModel):
    """Request body for creating or replacing a product.

    Any ``id`` sent by the client is ignored; identifiers are always
    assigned by the store.  Missing fields take their zero value.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field("", alias="nama", description="Product label")
    price: int = Field(
        0, alias="harga", ge=INT64_MIN, le=INT64_MAX, description="Price in the smallest currency unit"
    )
    stock: int = Field(0, alias="stok", ge=INT64_MIN, le=INT64_MAX, description="Quantity on hand")

    @field_validator("price", "stock", mode="before")
    @classmethod
    def reject_booleans(cls, v):
        # bool is an int subclass and would otherwise pass as 0 or 1.
        if isinstance(v, bool):
            raise ValueError("Expected an integer, got a boolean")
        return v


class Product(BaseModel):
    """A stored product, as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Store-assigned identifier")
    name: str = Field(..., alias="nama")
    price: int = Field(..., alias="harga")
    stock: int = Field(..., alias="stok")


class MessageResponse(BaseModel):
    """Plain confirmation payload."""

    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
