"""FastAPI dependencies shared by the context routers."""

from fastapi import Request

from bookstore import Bookstore


def get_bookstore(request: Request) -> Bookstore:
    """Return the Bookstore the running app was created with."""
    return request.app.state.bookstore
