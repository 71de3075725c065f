from catalog.api.routes import book_router

__all__ = ["book_router"]
