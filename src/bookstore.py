"""Composition root — registers the domain elements and wires the stores together.

Records live in the ``bookstore`` domain's in-memory providers; a Bookstore
holds the stores that operate on them. Every call must run inside a domain
context: the FastAPI app pushes one per request, tests push one per test.
"""

from functools import lru_cache

import structlog
from protean.domain import Domain

import replenishment.order.catalog_events  # noqa: F401  (registers the auto-replenish handler)
from catalog.book.seed import sample_books
from catalog.book.store import CatalogStore
from ordering.cart.store import CartStore
from ordering.checkout.coordinator import CheckoutCoordinator
from ordering.order.history import OrderHistory
from replenishment.order.ledger import ReplenishmentLedger
from shared.config import Settings, get_settings
from shared.domain import bookstore as domain

logger = structlog.get_logger(__name__)


@lru_cache
def init_domain() -> Domain:
    """Initialize the domain once every aggregate, event and handler is registered."""
    domain.init(traverse=False)
    return domain


class Bookstore:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        init_domain()

        self.catalog = CatalogStore()
        self.replenishment = ReplenishmentLedger(self.catalog, default_quantity=self.settings.reorder_quantity)
        self.carts = CartStore(self.catalog)
        self.orders = OrderHistory()
        self.checkout = CheckoutCoordinator(
            self.catalog,
            self.carts,
            self.orders,
            min_card_number_length=self.settings.min_card_number_length,
        )

        if self.settings.seed_catalog:
            self.seed()

    def seed(self) -> None:
        books = sample_books()
        for book in books:
            self.catalog.create(**book)
        logger.info("Sample catalogue loaded", books=len(books))
