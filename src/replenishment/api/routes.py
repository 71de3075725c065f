"""FastAPI routes for publisher replenishment orders."""

from fastapi import APIRouter, Depends

from bookstore import Bookstore
from replenishment.api.schemas import PlaceReplenishmentRequest, ReplenishmentOrderResponse
from replenishment.order.order import ReplenishmentOrder, ReplenishmentStatus
from shared.dependencies import get_bookstore

replenishment_router = APIRouter(prefix="/replenishment-orders", tags=["replenishment"])


def _to_response(order: ReplenishmentOrder) -> ReplenishmentOrderResponse:
    return ReplenishmentOrderResponse.model_validate(order)


@replenishment_router.get("", response_model=list[ReplenishmentOrderResponse])
async def list_replenishment_orders(
    status: ReplenishmentStatus | None = None, bookstore: Bookstore = Depends(get_bookstore)
) -> list[ReplenishmentOrderResponse]:
    return [_to_response(order) for order in bookstore.replenishment.list(status=status)]


@replenishment_router.post("", status_code=201, response_model=ReplenishmentOrderResponse)
async def place_replenishment_order(
    body: PlaceReplenishmentRequest, bookstore: Bookstore = Depends(get_bookstore)
) -> ReplenishmentOrderResponse:
    return _to_response(bookstore.replenishment.place(body.isbn, body.quantity))


@replenishment_router.put("/{order_id}/confirm", response_model=ReplenishmentOrderResponse)
async def confirm_replenishment_order(
    order_id: str, bookstore: Bookstore = Depends(get_bookstore)
) -> ReplenishmentOrderResponse:
    """Confirm a pending order; its quantity is added to the book's stock."""
    return _to_response(bookstore.replenishment.confirm(order_id))


@replenishment_router.put("/{order_id}/cancel", response_model=ReplenishmentOrderResponse)
async def cancel_replenishment_order(
    order_id: str, bookstore: Bookstore = Depends(get_bookstore)
) -> ReplenishmentOrderResponse:
    return _to_response(bookstore.replenishment.cancel(order_id))
