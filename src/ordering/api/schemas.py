"""Pydantic request/response schemas for the Ordering API — carts, checkout and orders.

These are external contracts, separate from the internal aggregates.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    isbn: str
    quantity: int = Field(ge=1, default=1)


class UpdateCartQuantityRequest(BaseModel):
    quantity: int  # zero or less removes the line


class CheckoutRequest(BaseModel):
    card_number: str
    expiry: str
    cvv: str = ""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "card_number": "4111111111111111",
                    "expiry": "12/27",
                    "cvv": "123",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    title: str
    unit_price: float
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_id: str
    items: list[CartItemResponse]
    total_items: int
    total_price: float
    updated_at: datetime | None = None


class CustomerOrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    title: str
    quantity: int
    unit_price: float
    line_total: float


class CustomerOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    placed_at: datetime
    items: list[CustomerOrderItemResponse]
    total_amount: float
    status: str
