"""Pydantic request/response schemas for the Catalog API.

These are external contracts, separate from the internal Book aggregate.
"""

from pydantic import BaseModel, Field

from catalog.book.book import BookCategory


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateBookRequest(BaseModel):
    isbn: str = Field(min_length=1, max_length=20)
    title: str = Field(min_length=1)
    authors: list[str] = Field(default_factory=list)
    publisher: str = ""
    publication_year: int | None = None
    price: float = Field(ge=0)
    category: BookCategory
    quantity: int = Field(ge=0, default=0)
    threshold: int = Field(ge=0, default=5)
    image_url: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "isbn": "978-0-13-468599-1",
                    "title": "The Art of Computer Programming",
                    "authors": ["Donald Knuth"],
                    "publisher": "Addison-Wesley",
                    "publication_year": 2011,
                    "price": 89.99,
                    "category": "Science",
                    "quantity": 25,
                    "threshold": 5,
                }
            ]
        }
    }


class UpdateBookRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    authors: list[str] | None = None
    publisher: str | None = None
    publication_year: int | None = None
    price: float | None = Field(default=None, ge=0)
    category: BookCategory | None = None
    threshold: int | None = Field(default=None, ge=0)
    image_url: str | None = None


class AdjustStockRequest(BaseModel):
    delta: int


class SetStockRequest(BaseModel):
    quantity: int


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class BookResponse(BaseModel):
    isbn: str
    title: str
    authors: list[str]
    publisher: str
    publication_year: int | None = None
    price: float
    category: str
    quantity: int
    threshold: int
    image_url: str | None = None
    low_stock: bool
