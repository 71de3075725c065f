"""FastAPI endpoints for the Catalog domain."""

from fastapi import APIRouter, Depends, Response

from bookstore import Bookstore
from catalog.api.schemas import (
    AdjustStockRequest,
    BookResponse,
    CreateBookRequest,
    SetStockRequest,
    UpdateBookRequest,
)
from catalog.book.book import Book
from shared.dependencies import get_bookstore

book_router = APIRouter(prefix="/books", tags=["books"])


def _to_response(book: Book) -> BookResponse:
    return BookResponse(
        isbn=book.isbn,
        title=book.title,
        authors=list(book.authors or []),
        publisher=book.publisher or "",
        publication_year=book.publication_year,
        price=book.price,
        category=book.category,
        quantity=book.quantity,
        threshold=book.threshold,
        image_url=book.image_url,
        low_stock=book.is_low_stock,
    )


@book_router.get("", response_model=list[BookResponse])
async def list_books(bookstore: Bookstore = Depends(get_bookstore)) -> list[BookResponse]:
    return [_to_response(book) for book in bookstore.catalog.list()]


@book_router.get("/{isbn}", response_model=BookResponse)
async def get_book(isbn: str, bookstore: Bookstore = Depends(get_bookstore)) -> BookResponse:
    return _to_response(bookstore.catalog.get(isbn))


@book_router.post("", status_code=201, response_model=BookResponse)
async def create_book(body: CreateBookRequest, bookstore: Bookstore = Depends(get_bookstore)) -> BookResponse:
    return _to_response(bookstore.catalog.create(**body.model_dump(mode="json")))


@book_router.patch("/{isbn}", response_model=BookResponse)
async def update_book(
    isbn: str, body: UpdateBookRequest, bookstore: Bookstore = Depends(get_bookstore)
) -> BookResponse:
    fields = body.model_dump(exclude_unset=True, mode="json")
    return _to_response(bookstore.catalog.set_fields(isbn, **fields))


@book_router.post("/{isbn}/stock-adjustments", response_model=BookResponse)
async def adjust_stock(
    isbn: str, body: AdjustStockRequest, bookstore: Bookstore = Depends(get_bookstore)
) -> BookResponse:
    return _to_response(bookstore.catalog.adjust_stock(isbn, body.delta))


@book_router.put("/{isbn}/stock", response_model=BookResponse)
async def set_stock(isbn: str, body: SetStockRequest, bookstore: Bookstore = Depends(get_bookstore)) -> BookResponse:
    return _to_response(bookstore.catalog.set_stock(isbn, body.quantity))


@book_router.delete("/{isbn}", status_code=204)
async def delete_book(isbn: str, bookstore: Bookstore = Depends(get_bookstore)) -> Response:
    bookstore.catalog.delete(isbn)
    return Response(status_code=204)
