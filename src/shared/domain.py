"""Bookstore domain — one protean Domain for the catalog, ordering and replenishment contexts.

The three contexts share a single domain so that events raised by the Book
aggregate reach the replenishment handler synchronously, on the commit that
changed the stock.
"""

import structlog
from protean.domain import Domain

bookstore = Domain(name="bookstore")

logger = structlog.get_logger(__name__)
