"""Sample catalogue loaded at start-up when ``seed_catalog`` is enabled."""

from catalog.book.book import BookCategory

SAMPLE_BOOKS = [
    {
        "isbn": "978-0-13-468599-1",
        "title": "The Art of Computer Programming",
        "authors": ["Donald Knuth"],
        "publisher": "Addison-Wesley",
        "publication_year": 2011,
        "price": 89.99,
        "category": BookCategory.SCIENCE.value,
        "quantity": 25,
        "threshold": 5,
    },
    {
        "isbn": "978-0-06-112008-4",
        "title": "To Kill a Mockingbird",
        "authors": ["Harper Lee"],
        "publisher": "HarperCollins",
        "publication_year": 1960,
        "price": 14.99,
        "category": BookCategory.ART.value,
        "quantity": 50,
        "threshold": 10,
    },
    {
        "isbn": "978-0-19-953556-8",
        "title": "A History of Modern Europe",
        "authors": ["John Merriman"],
        "publisher": "W.W. Norton",
        "publication_year": 2019,
        "price": 65.00,
        "category": BookCategory.HISTORY.value,
        "quantity": 15,
        "threshold": 3,
    },
    {
        "isbn": "978-0-07-352332-7",
        "title": "Physical Geography",
        "authors": ["Alan Strahler", "Arthur Strahler"],
        "publisher": "Wiley",
        "publication_year": 2013,
        "price": 120.00,
        "category": BookCategory.GEOGRAPHY.value,
        "quantity": 8,
        "threshold": 5,
    },
    {
        "isbn": "978-0-06-093546-7",
        "title": "The Case for God",
        "authors": ["Karen Armstrong"],
        "publisher": "Knopf",
        "publication_year": 2009,
        "price": 27.95,
        "category": BookCategory.RELIGION.value,
        "quantity": 30,
        "threshold": 7,
    },
    {
        "isbn": "978-1-59448-273-9",
        "title": "A Short History of Nearly Everything",
        "authors": ["Bill Bryson"],
        "publisher": "Broadway Books",
        "publication_year": 2004,
        "price": 18.00,
        "category": BookCategory.SCIENCE.value,
        "quantity": 40,
        "threshold": 8,
    },
    {
        "isbn": "978-0-14-028329-7",
        "title": "The Story of Art",
        "authors": ["E.H. Gombrich"],
        "publisher": "Phaidon Press",
        "publication_year": 1950,
        "price": 39.95,
        "category": BookCategory.ART.value,
        "quantity": 22,
        "threshold": 5,
    },
    {
        "isbn": "978-0-06-083865-2",
        "title": "Sapiens: A Brief History of Humankind",
        "authors": ["Yuval Noah Harari"],
        "publisher": "Harper",
        "publication_year": 2015,
        "price": 24.99,
        "category": BookCategory.HISTORY.value,
        "quantity": 60,
        "threshold": 12,
    },
    {
        "isbn": "978-0-19-280722-2",
        "title": "World Religions",
        "authors": ["John Bowker"],
        "publisher": "Oxford University Press",
        "publication_year": 2006,
        "price": 22.50,
        "category": BookCategory.RELIGION.value,
        "quantity": 18,
        "threshold": 4,
    },
    {
        "isbn": "978-0-321-12521-7",
        "title": "Introduction to Algorithms",
        "authors": ["Thomas H. Cormen", "Charles E. Leiserson", "Ronald L. Rivest"],
        "publisher": "MIT Press",
        "publication_year": 2009,
        "price": 95.00,
        "category": BookCategory.SCIENCE.value,
        "quantity": 3,
        "threshold": 5,
    },
]


def sample_books() -> list[dict]:
    return [dict(data, authors=list(data["authors"])) for data in SAMPLE_BOOKS]
