# tests/conftest.py
import sys
import os

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT_DIR)

import itertools
import pytest
from httpx import ASGITransport, AsyncClient

from api.main import app, get_store
from api.rate_limit import limiter
from bookshelf.models import BookPayload
from bookshelf.store import BookStore


class FakeClock:
    """Returns a new, strictly increasing ISO timestamp on every call."""

    def __init__(self):
        self._seconds = itertools.count()

    def __call__(self):
        return f"2026-10-17T08:00:{next(self._seconds):02d}.000Z"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def id_factory():
    """Deterministic ids: book-0001, book-0002, ..."""
    counter = itertools.count(1)
    return lambda: f"book-{next(counter):04d}"


@pytest.fixture
def store(id_factory, clock):
    return BookStore(id_factory=id_factory, clock=clock)


@pytest.fixture
def book_data():
    """
    A complete, valid create/update body as a client would send it.

    Returns:
        dict: camelCase JSON body with pageCount 100 and readPage 25,
        so the resulting book is not finished.
    """
    return {
        "name": "Buku A",
        "year": 2010,
        "author": "John Doe",
        "summary": "Lorem ipsum dolor sit amet",
        "publisher": "Dicoding Indonesia",
        "pageCount": 100,
        "readPage": 25,
        "reading": False,
    }


@pytest.fixture
def make_payload(book_data):
    """Build a BookPayload from book_data with selected fields overridden."""

    def _make(**overrides):
        data = dict(book_data)
        data.update(overrides)
        return BookPayload(**data)

    return _make


@pytest.fixture
def seeded_store(store, make_payload):
    """
    Store pre-populated with three books covering the filter combinations.

    Contents:
        - book-0001 "Harry Potter": reading, not finished, publisher "Bloomsbury"
        - book-0002 "The Hobbit": not reading, finished, publisher "Allen & Unwin"
        - book-0003 "harry's diary": reading, finished, publisher None
    """
    store.create(
        make_payload(name="Harry Potter", publisher="Bloomsbury", reading=True)
    )
    store.create(
        make_payload(
            name="The Hobbit",
            publisher="Allen & Unwin",
            pageCount=300,
            readPage=300,
            reading=False,
        )
    )
    store.create(
        make_payload(
            name="harry's diary",
            publisher=None,
            pageCount=50,
            readPage=50,
            reading=True,
        )
    )
    return store


@pytest.fixture
async def client(monkeypatch, store):
    """
    Async test client with an isolated store and a fresh rate limit window.

    Setup:
        - Disables the API key check regardless of the local environment
        - Overrides get_store so every request hits this test's BookStore
        - Resets the slowapi limiter storage
        - Creates AsyncClient with ASGITransport for direct app communication

    Teardown:
        - Clears all dependency overrides to prevent test interference
    """
    monkeypatch.setattr("api.auth.API_KEY", None)
    app.dependency_overrides[get_store] = lambda: store
    limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
