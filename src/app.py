"""Bookstore FastAPI application.

Serves the catalog, cart, checkout, customer order and replenishment
operations over HTTP. Records live in the bookstore domain's in-memory
providers; the Bookstore wiring the stores together is held on ``app.state``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from bookstore import Bookstore, init_domain
from shared.config import get_settings
from shared.errors import (
    AlreadyExists,
    BookstoreError,
    EmptyCart,
    InsufficientStock,
    InvalidPayment,
    InvalidRequest,
    InvalidStock,
    NotFound,
    NotPending,
    StockRace,
)
from shared.logging import add_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES = {
    NotFound: 404,
    AlreadyExists: 409,
    InsufficientStock: 409,
    NotPending: 409,
    StockRace: 409,
    InvalidStock: 422,
    InvalidPayment: 422,
    EmptyCart: 422,
    InvalidRequest: 422,
}


def create_app(bookstore: Bookstore | None = None) -> FastAPI:
    domain = init_domain()
    if bookstore is None:
        configure_logging()
        with domain.domain_context():
            bookstore = Bookstore(get_settings())

    app = FastAPI(
        title="Bookstore API",
        description="Online bookstore — catalog, carts, checkout and publisher replenishment",
    )
    app.state.bookstore = bookstore

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Run each request inside the domain context, with method and path bound to its log lines."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        with domain.domain_context():
            return await call_next(request)

    @app.exception_handler(BookstoreError)
    async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
        """Map BookstoreError subclasses to structured HTTP failures."""
        status_code = ERROR_STATUS_CODES.get(type(exc), 400)
        logger.info("Request rejected", kind=exc.kind, status_code=status_code, **exc.identifiers)
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        """Field validation failures raised by the aggregates."""
        logger.info("Request rejected", kind="ValidationError", status_code=422, messages=exc.messages)
        return JSONResponse(status_code=422, content={"error": "ValidationError", "messages": exc.messages})

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    from catalog.api import book_router
    from ordering.api import cart_router, order_router
    from replenishment.api import replenishment_router

    app.include_router(book_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(replenishment_router)

    # -----------------------------------------------------------------------
    # Health / root
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "books": len(bookstore.catalog.list()),
                "pending_replenishment_orders": len(bookstore.replenishment.list(status="Pending")),
            }
        )

    return app


app = create_app()
