"""Pydantic request/response schemas for the Replenishment API."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class PlaceReplenishmentRequest(BaseModel):
    isbn: str
    quantity: int | None = Field(default=None, ge=1)  # defaults to the configured reorder quantity


class ReplenishmentOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    isbn: str
    book_title: str
    publisher: str | None = None
    quantity: int
    order_date: date
    status: str
    source: str
