"""FastAPI routes for the Ordering domain — carts, checkout and customer orders."""

from fastapi import APIRouter, Depends

from bookstore import Bookstore
from ordering.api.schemas import (
    AddToCartRequest,
    CartResponse,
    CheckoutRequest,
    CustomerOrderResponse,
    UpdateCartQuantityRequest,
)
from ordering.checkout.payment import PaymentDescriptor
from shared.dependencies import get_bookstore

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/{customer_id}", response_model=CartResponse)
async def get_cart(customer_id: str, bookstore: Bookstore = Depends(get_bookstore)) -> CartResponse:
    return CartResponse.model_validate(bookstore.carts.get(customer_id))


@cart_router.post("/{customer_id}/items", response_model=CartResponse)
async def add_cart_item(
    customer_id: str, body: AddToCartRequest, bookstore: Bookstore = Depends(get_bookstore)
) -> CartResponse:
    cart = bookstore.carts.add_item(customer_id, body.isbn, body.quantity)
    return CartResponse.model_validate(cart)


@cart_router.put("/{customer_id}/items/{isbn}", response_model=CartResponse)
async def update_cart_item_quantity(
    customer_id: str, isbn: str, body: UpdateCartQuantityRequest, bookstore: Bookstore = Depends(get_bookstore)
) -> CartResponse:
    cart = bookstore.carts.update_quantity(customer_id, isbn, body.quantity)
    return CartResponse.model_validate(cart)


@cart_router.delete("/{customer_id}/items/{isbn}", response_model=CartResponse)
async def remove_cart_item(customer_id: str, isbn: str, bookstore: Bookstore = Depends(get_bookstore)) -> CartResponse:
    cart = bookstore.carts.remove_item(customer_id, isbn)
    return CartResponse.model_validate(cart)


@cart_router.delete("/{customer_id}", response_model=CartResponse)
async def clear_cart(customer_id: str, bookstore: Bookstore = Depends(get_bookstore)) -> CartResponse:
    return CartResponse.model_validate(bookstore.carts.clear(customer_id))


@cart_router.post("/{customer_id}/checkout", status_code=201, response_model=CustomerOrderResponse)
async def checkout_cart(
    customer_id: str, body: CheckoutRequest, bookstore: Bookstore = Depends(get_bookstore)
) -> CustomerOrderResponse:
    """Convert the customer's cart into an order.

    Stock is deducted, low-stock books are reordered and the cart is cleared
    in one step; any failure leaves cart and stock untouched.
    """
    payment = PaymentDescriptor(card_number=body.card_number, expiry=body.expiry, cvv=body.cvv)
    order = bookstore.checkout.submit(customer_id, payment)
    return CustomerOrderResponse.model_validate(order)


# ---------------------------------------------------------------------------
# Customer Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[CustomerOrderResponse])
async def list_orders(
    customer_id: str | None = None, bookstore: Bookstore = Depends(get_bookstore)
) -> list[CustomerOrderResponse]:
    if customer_id is None:
        orders = bookstore.orders.list()
    else:
        orders = bookstore.orders.list_for_customer(customer_id)
    return [CustomerOrderResponse.model_validate(order) for order in orders]


@order_router.get("/{order_id}", response_model=CustomerOrderResponse)
async def get_order(order_id: str, bookstore: Bookstore = Depends(get_bookstore)) -> CustomerOrderResponse:
    return CustomerOrderResponse.model_validate(bookstore.orders.get(order_id))
