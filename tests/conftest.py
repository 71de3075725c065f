import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the environment and initialize the domain before any test runs."""
    os.environ["BOOKSTORE_ENVIRONMENT"] = session.config.option.env
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from bookstore import init_domain

    init_domain()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)


def _reset_data(domain):
    for _, provider in domain.providers.items():
        provider._data_reset()

    for _, broker in domain.brokers.items():
        broker._data_reset()

    domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def run_around_tests():
    """Push the domain context for each test, starting and ending with empty stores."""
    from shared.domain import bookstore as domain

    ctx = domain.domain_context()
    ctx.push()
    _reset_data(domain)

    yield

    _reset_data(domain)
    ctx.pop()


@pytest.fixture()
def bookstore():
    """A fresh, unseeded bookstore for every test."""
    from bookstore import Bookstore
    from shared.config import Settings

    return Bookstore(Settings(environment="test", seed_catalog=False))


@pytest.fixture()
def book_fields():
    def _book_fields(**overrides):
        fields = {
            "isbn": "978-0-00-000001-1",
            "title": "Test Book",
            "authors": ["Test Author"],
            "publisher": "Test Press",
            "publication_year": 2020,
            "price": 10.00,
            "category": "Science",
            "quantity": 10,
            "threshold": 2,
        }
        fields.update(overrides)
        return fields

    return _book_fields


@pytest.fixture()
def make_book(book_fields):
    """Build an unsaved Book aggregate."""
    from catalog.book.book import Book

    def _make_book(**overrides):
        return Book(**book_fields(**overrides))

    return _make_book


@pytest.fixture()
def add_book(bookstore, book_fields):
    """Create a book in the fixture bookstore's catalog and return it."""

    def _add_book(**overrides):
        return bookstore.catalog.create(**book_fields(**overrides))

    return _add_book
