"""Error taxonomy for the bookstore core.

Every error is recoverable at the boundary: it carries a ``kind`` plus the
identifiers the caller needs, and renders to a plain dict with ``to_dict()``.
"""


class BookstoreError(Exception):
    """Base exception for all bookstore errors."""

    kind = "BookstoreError"

    def __init__(self, message: str, **identifiers):
        self.message = message
        self.identifiers = identifiers
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message, **self.identifiers}


class NotFound(BookstoreError):
    """Raised when a book, cart item or order does not exist."""

    kind = "NotFound"

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} not found: {identifier}", entity=entity, identifier=identifier)


class AlreadyExists(BookstoreError):
    """Raised when creating a record whose identity is already taken."""

    kind = "AlreadyExists"

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} already exists: {identifier}", entity=entity, identifier=identifier)


class InvalidStock(BookstoreError):
    """Raised when a stock adjustment would drive a quantity negative."""

    kind = "InvalidStock"

    def __init__(self, isbn: str, quantity: int, delta: int):
        self.isbn = isbn
        self.quantity = quantity
        self.delta = delta
        super().__init__(
            f"Adjustment of {delta} would leave {isbn} with negative stock ({quantity + delta})",
            isbn=isbn,
            quantity=quantity,
            delta=delta,
        )


class InsufficientStock(BookstoreError):
    """Raised when a cart or checkout asks for more copies than are in stock."""

    kind = "InsufficientStock"

    def __init__(self, isbn: str, available: int, requested: int):
        self.isbn = isbn
        self.available = available
        self.requested = requested
        super().__init__(
            f"Not enough stock for {isbn}: {available} available, {requested} requested",
            isbn=isbn,
            available=available,
            requested=requested,
        )


class InvalidPayment(BookstoreError):
    """Raised when the payment descriptor fails the format check."""

    kind = "InvalidPayment"

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(reason, field=field)


class EmptyCart(BookstoreError):
    """Raised when checking out a cart without items."""

    kind = "EmptyCart"

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"Cart is empty for customer {customer_id}", customer_id=customer_id)


class NotPending(BookstoreError):
    """Raised on a transition out of a terminal replenishment order state."""

    kind = "NotPending"

    def __init__(self, order_id: str, status: str):
        self.order_id = order_id
        self.status = status
        super().__init__(f"Order {order_id} is not pending (status: {status})", order_id=order_id, status=status)


class StockRace(BookstoreError):
    """Raised when stock changed between checkout validation and deduction."""

    kind = "StockRace"

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Stock for {isbn} changed during checkout; retry against fresh state", isbn=isbn)


class InvalidRequest(BookstoreError):
    """Raised for malformed caller input such as non-positive quantities."""

    kind = "InvalidRequest"

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(reason, field=field)
